"""Wiring for the plan generation command handlers.

Usage:
    from infrastructure.plan_generation.handler_factory import (
        create_workout_plan_handler,
        create_meal_plan_handler,
    )

    handler = create_workout_plan_handler()
    result = await handler.handle(GenerateWorkoutPlanCommand(owner_id, payload))
"""

import logging
from typing import Optional

from application.plan_generation.commands.generate_meal_plan import GenerateMealPlanHandler
from application.plan_generation.commands.generate_workout_plan import (
    GenerateWorkoutPlanHandler,
)
from application.plan_generation.orchestrators.generation_orchestrator import (
    GenerationOrchestrator,
    GenerationPolicy,
)
from domain.plan_generation.builders.deterministic_plan_builder import (
    DeterministicPlanBuilder,
)
from domain.plan_generation.builders.workout_builder import WorkoutPlanBuilder
from domain.plan_generation.catalog import validate_catalogs
from domain.plan_generation.core.ports.generative_service import IGenerativeService
from domain.plan_generation.core.ports.plan_repository import IPlanRepository
from infrastructure.config import get_generation_policy
from infrastructure.persistence.plan_repository_factory import get_plan_repository
from infrastructure.plan_generation.providers.factory import create_generative_service

logger = logging.getLogger(__name__)


def create_orchestrator(
    service: Optional[IGenerativeService] = None,
    policy: Optional[GenerationPolicy] = None,
) -> GenerationOrchestrator:
    """
    Build an orchestrator from configuration.

    Validates the static catalogs first, so a broken catalog fails at
    startup instead of inside a request.

    Args:
        service: Generative service (default: from PLAN_GENERATOR_PROVIDER)
        policy: Retry/model policy (default: from environment)

    Raises:
        CatalogExhaustionError: If a catalog cell is empty or misfiled
        ValueError: If configuration is invalid
    """
    validate_catalogs()
    policy = policy or get_generation_policy()
    service = service or create_generative_service()

    fallback = DeterministicPlanBuilder(
        workout_builder=WorkoutPlanBuilder(exercises_per_day=policy.min_exercises_per_day)
    )
    logger.info(
        "Plan generation orchestrator ready",
        extra={
            "service": type(service).__name__,
            "primary_model": policy.primary_model,
            "max_retries": policy.max_retries,
        },
    )
    return GenerationOrchestrator(service, fallback_builder=fallback, policy=policy)


def create_workout_plan_handler(
    orchestrator: Optional[GenerationOrchestrator] = None,
    repository: Optional[IPlanRepository] = None,
) -> GenerateWorkoutPlanHandler:
    return GenerateWorkoutPlanHandler(
        orchestrator or create_orchestrator(),
        repository or get_plan_repository(),
    )


def create_meal_plan_handler(
    orchestrator: Optional[GenerationOrchestrator] = None,
    repository: Optional[IPlanRepository] = None,
) -> GenerateMealPlanHandler:
    return GenerateMealPlanHandler(
        orchestrator or create_orchestrator(),
        repository or get_plan_repository(),
    )
