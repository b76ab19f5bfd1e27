"""GenerationResult - what a command handler returns to its caller."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from domain.plan_generation.core.entities.generated_plan import GeneratedPlan, PlanSource
from domain.plan_generation.core.value_objects.derived_metrics import DerivedMetrics


@dataclass(frozen=True)
class GenerationResult:
    """Plan, metrics and provenance for one request.

    Attributes:
        plan: Generated plan
        derived_metrics: Metrics the plan was built from
        source: "model" or "fallback"
        plan_id: Persistence id, None when saving failed
    """

    plan: GeneratedPlan
    derived_metrics: DerivedMetrics
    source: PlanSource
    plan_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "plan": self.plan.to_dict(),
            "derivedMetrics": self.derived_metrics.to_dict(),
            "source": self.source.value,
            "planId": self.plan_id,
        }
