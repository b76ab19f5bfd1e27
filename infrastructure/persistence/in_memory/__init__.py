"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.plan_repository import (
    InMemoryPlanRepository,
    StoredPlan,
)

__all__ = [
    "InMemoryPlanRepository",
    "StoredPlan",
]
