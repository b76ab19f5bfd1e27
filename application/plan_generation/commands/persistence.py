"""Persistence step shared by the generation handlers."""

from typing import Optional

import structlog

from domain.plan_generation.core.ports.plan_repository import IPlanRepository

from ..orchestrators.generation_orchestrator import GenerationOutcome

logger = structlog.get_logger(__name__)


async def save_plan(
    repository: IPlanRepository, outcome: GenerationOutcome, owner_id: str
) -> Optional[str]:
    """Save a generated plan; None when the gateway fails.

    A plan is valid and returnable whether or not it was stored.
    """
    try:
        return await repository.save(outcome.plan, owner_id, outcome.metrics)
    except Exception as e:
        logger.error(
            "plan_persistence_failed",
            owner_id=owner_id,
            kind=outcome.plan.kind.value,
            error=str(e),
            exc_info=True,
        )
        return None
