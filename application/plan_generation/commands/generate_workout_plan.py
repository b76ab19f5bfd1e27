"""GenerateWorkoutPlanCommand - validate, generate and persist a workout plan."""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import structlog

from domain.plan_generation.core.ports.plan_repository import IPlanRepository

from ..orchestrators.generation_orchestrator import GenerationOrchestrator
from ..requests import WorkoutPlanRequest, parse_request
from ..results import GenerationResult
from .persistence import save_plan

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GenerateWorkoutPlanCommand:
    """Command to generate a workout plan.

    Attributes:
        owner_id: User the plan belongs to
        payload: Raw request (camelCase keys)
        cancel: Optional signal to stop waiting on the model
    """

    owner_id: str
    payload: Mapping[str, Any]
    cancel: Optional[asyncio.Event] = field(default=None, compare=False)


class GenerateWorkoutPlanHandler:
    """Handler for GenerateWorkoutPlanCommand.

    1. Validate the request (InvalidInputError, no generation attempted)
    2. Generate via the orchestrator (model or fallback)
    3. Persist; a persistence failure is logged and the plan still returned
    """

    def __init__(self, orchestrator: GenerationOrchestrator, repository: IPlanRepository):
        self._orchestrator = orchestrator
        self._repository = repository

    async def handle(self, command: GenerateWorkoutPlanCommand) -> GenerationResult:
        """
        Handle workout plan generation.

        Raises:
            InvalidInputError: If the payload is invalid
            CatalogExhaustionError: If the fallback has no usable exercise
        """
        request = parse_request(WorkoutPlanRequest, command.payload)
        logger.info(
            "workout_plan_requested",
            owner_id=command.owner_id,
            days_per_week=request.days_per_week,
            fitness_level=request.fitness_level.value,
            goal=request.goal.value,
        )

        outcome = await self._orchestrator.generate_workout(
            request.to_profile(),
            request.fitness_level,
            request.days_per_week,
            week_number=request.week_number,
            cancel=command.cancel,
        )
        plan_id = await save_plan(self._repository, outcome, command.owner_id)

        logger.info(
            "workout_plan_generated",
            owner_id=command.owner_id,
            source=outcome.source.value,
            attempts=outcome.attempts,
            plan_id=plan_id,
        )
        return GenerationResult(outcome.plan, outcome.metrics, outcome.source, plan_id)
