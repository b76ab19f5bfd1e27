"""Factory for creating plan repository instances."""

import logging
from typing import Optional

from domain.plan_generation.core.ports.plan_repository import IPlanRepository
from infrastructure.config import get_repository_backend
from infrastructure.persistence.in_memory.plan_repository import InMemoryPlanRepository

logger = logging.getLogger(__name__)

# Singleton instance
_plan_repository: Optional[IPlanRepository] = None


def create_plan_repository() -> IPlanRepository:
    """
    Create plan repository based on REPOSITORY_BACKEND configuration.

    Environment Variables:
        REPOSITORY_BACKEND: Repository type (only 'inmemory' is available)

    Returns:
        IPlanRepository implementation

    Default:
        Returns InMemoryPlanRepository if REPOSITORY_BACKEND not set
    """
    repo_type = get_repository_backend()

    if repo_type != "inmemory":
        logger.warning(
            "Unknown repository backend, falling back to inmemory",
            extra={"backend": repo_type},
        )
    return InMemoryPlanRepository()


def get_plan_repository() -> IPlanRepository:
    """
    Get singleton plan repository instance.

    Lazy initialization on first call.

    Returns:
        IPlanRepository singleton
    """
    global _plan_repository
    if _plan_repository is None:
        _plan_repository = create_plan_repository()
    return _plan_repository


def reset_plan_repository() -> None:
    """Reset singleton (for testing)."""
    global _plan_repository
    _plan_repository = None
