"""In-memory implementation of IPlanRepository for testing."""

from copy import deepcopy
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from domain.plan_generation.core.entities.generated_plan import GeneratedPlan
from domain.plan_generation.core.exceptions.domain_errors import PersistenceError
from domain.plan_generation.core.ports.plan_repository import IPlanRepository
from domain.plan_generation.core.value_objects.derived_metrics import DerivedMetrics


@dataclass(frozen=True)
class StoredPlan:
    plan_id: str
    owner_id: str
    plan: GeneratedPlan
    derived_metrics: DerivedMetrics
    created_at: datetime


class InMemoryPlanRepository(IPlanRepository):
    """
    In-memory implementation of plan repository.

    Uses a dictionary to store plans in memory. Suitable for testing
    and development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._plans: dict[str, StoredPlan] = {}

    async def save(
        self,
        plan: GeneratedPlan,
        owner_id: str,
        derived_metrics: DerivedMetrics,
    ) -> str:
        """
        Save a plan in memory.

        Args:
            plan: Generated plan
            owner_id: User the plan belongs to
            derived_metrics: Metrics the plan was built from

        Returns:
            New plan id

        Raises:
            PersistenceError: If owner_id is empty
        """
        if not owner_id:
            raise PersistenceError("Cannot save a plan without an owner")

        plan_id = str(uuid4())
        # Deep copy to prevent external mutations
        self._plans[plan_id] = StoredPlan(
            plan_id=plan_id,
            owner_id=owner_id,
            plan=deepcopy(plan),
            derived_metrics=derived_metrics,
            created_at=datetime.now(timezone.utc),
        )
        return plan_id

    async def find_by_id(self, plan_id: str) -> Optional[GeneratedPlan]:
        """
        Find plan by id.

        Returns:
            Deep copy of plan if found, None otherwise
        """
        stored = self._plans.get(plan_id)
        return deepcopy(stored.plan) if stored else None

    async def find_by_owner(self, owner_id: str) -> list[GeneratedPlan]:
        """All plans of an owner, oldest first."""
        return [
            deepcopy(stored.plan)
            for stored in sorted(self._plans.values(), key=lambda s: s.created_at)
            if stored.owner_id == owner_id
        ]

    def clear(self) -> None:
        """Clear all plans (for testing)."""
        self._plans.clear()
