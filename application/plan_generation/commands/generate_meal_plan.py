"""GenerateMealPlanCommand - validate, generate and persist a meal plan."""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import structlog

from domain.plan_generation.core.ports.plan_repository import IPlanRepository

from ..orchestrators.generation_orchestrator import GenerationOrchestrator
from ..requests import MealPlanRequest, parse_request
from ..results import GenerationResult
from .persistence import save_plan

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GenerateMealPlanCommand:
    """Command to generate a 7-day meal plan.

    Attributes:
        owner_id: User the plan belongs to
        payload: Raw request (camelCase keys)
        cancel: Optional signal to stop waiting on the model
    """

    owner_id: str
    payload: Mapping[str, Any]
    cancel: Optional[asyncio.Event] = field(default=None, compare=False)


class GenerateMealPlanHandler:
    """Handler for GenerateMealPlanCommand."""

    def __init__(self, orchestrator: GenerationOrchestrator, repository: IPlanRepository):
        self._orchestrator = orchestrator
        self._repository = repository

    async def handle(self, command: GenerateMealPlanCommand) -> GenerationResult:
        """
        Handle meal plan generation.

        Raises:
            InvalidInputError: If the payload is invalid
            CatalogExhaustionError: If restrictions leave a meal slot empty
        """
        request = parse_request(MealPlanRequest, command.payload)
        logger.info(
            "meal_plan_requested",
            owner_id=command.owner_id,
            meals_per_day=request.meals_per_day,
            goal=request.goal.value,
            restrictions=sorted(request.restrictions),
        )

        outcome = await self._orchestrator.generate_meal(
            request.to_profile(),
            request.meals_per_day,
            week_number=request.week_number,
            cancel=command.cancel,
        )
        plan_id = await save_plan(self._repository, outcome, command.owner_id)

        logger.info(
            "meal_plan_generated",
            owner_id=command.owner_id,
            source=outcome.source.value,
            attempts=outcome.attempts,
            plan_id=plan_id,
        )
        return GenerationResult(outcome.plan, outcome.metrics, outcome.source, plan_id)
