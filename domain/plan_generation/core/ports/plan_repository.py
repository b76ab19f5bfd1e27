"""Repository port for generated plans."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.generated_plan import GeneratedPlan
from ..value_objects.derived_metrics import DerivedMetrics


class IPlanRepository(ABC):
    """Port for plan persistence (the persistence gateway).

    Generation correctness does not depend on this port: a plan is valid
    and returnable even if saving it fails.
    """

    @abstractmethod
    async def save(
        self,
        plan: GeneratedPlan,
        owner_id: str,
        derived_metrics: DerivedMetrics,
    ) -> str:
        """Persist a plan and return its identifier.

        Raises:
            PersistenceError: If the plan cannot be stored
        """
        pass

    @abstractmethod
    async def find_by_id(self, plan_id: str) -> Optional[GeneratedPlan]:
        """Return a stored plan or None."""
        pass
