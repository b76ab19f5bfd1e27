"""GeneratedPlan entity - a complete workout or meal plan."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from ..value_objects.derived_metrics import DerivedMetrics


class PlanSource(str, Enum):
    """Provenance flag: which path produced the plan."""

    MODEL = "model"
    FALLBACK = "fallback"


class PlanKind(str, Enum):
    """Plan flavor; fixes the JSON keys of a day."""

    WORKOUT = "workout"
    MEAL = "meal"

    @property
    def items_key(self) -> str:
        return _LAYOUT[self][0]

    @property
    def opening_section(self) -> Tuple[str, str]:
        """(section key, items key) of the section before the main items."""
        return _LAYOUT[self][1]

    @property
    def closing_section(self) -> Tuple[str, str]:
        """(section key, items key) of the section after the main items."""
        return _LAYOUT[self][2]


_LAYOUT = {
    PlanKind.WORKOUT: ("exercises", ("warmup", "exercises"), ("cooldown", "exercises")),
    PlanKind.MEAL: ("meals", ("snacks", "items"), ("hydration", "schedule")),
}

_DAY_KEYS = {"name", "focus", "notes"}

_PLAN_KEYS = {"name", "description", "days", "metadata"}


@dataclass(frozen=True)
class PlanDay:
    """One day of a plan.

    Attributes:
        name: Day label (e.g. "Day 1", "Monday")
        focus: Theme of the day (e.g. "Full Body")
        items: Ordered primary items (exercises or meals)
        opening: Warmup (workout) or snacks (meal) section
        closing: Cooldown (workout) or hydration (meal) section
        notes: Free-text guidance
        extras: Any additional day-level fields (e.g. daily totals)
    """

    name: str
    focus: str
    items: Tuple[Dict[str, Any], ...]
    opening: Dict[str, Any]
    closing: Dict[str, Any]
    notes: str = ""
    extras: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self, kind: PlanKind) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "focus": self.focus,
            kind.opening_section[0]: dict(self.opening),
            kind.items_key: [dict(item) for item in self.items],
            kind.closing_section[0]: dict(self.closing),
            "notes": self.notes,
        }
        data.update(self.extras)
        return data

    @classmethod
    def from_dict(cls, kind: PlanKind, data: Mapping[str, Any]) -> "PlanDay":
        structural = _DAY_KEYS | {
            kind.items_key,
            kind.opening_section[0],
            kind.closing_section[0],
        }
        return cls(
            name=str(data["name"]),
            focus=str(data["focus"]),
            items=tuple(dict(item) for item in data[kind.items_key]),
            opening=dict(data[kind.opening_section[0]]),
            closing=dict(data[kind.closing_section[0]]),
            notes=str(data.get("notes") or ""),
            extras={k: v for k, v in data.items() if k not in structural},
        )


@dataclass(frozen=True)
class GeneratedPlan:
    """Immutable plan plus the metrics used to build it and its provenance.

    Created once per request and handed to the persistence gateway;
    never mutated afterwards. Post-processing passes return new plans.

    Attributes:
        extras: Plan-level sections beyond the days (e.g. groceryList,
            mealPrep, nutrition for meal plans)
    """

    kind: PlanKind
    name: str
    description: str
    days: Tuple[PlanDay, ...]
    metrics: DerivedMetrics
    source: PlanSource
    metadata: Dict[str, Any] = field(default_factory=dict)
    extras: Dict[str, Any] = field(default_factory=dict)

    def with_days(self, days: Tuple[PlanDay, ...]) -> "GeneratedPlan":
        return replace(self, days=days)

    def item_names(self) -> list[str]:
        """Names of all primary items, in plan order."""
        return [item.get("name", "") for day in self.days for item in day.items]

    def to_dict(self) -> Dict[str, Any]:
        """Render the plan payload (the JSON shape the validator checks)."""
        data: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "days": [day.to_dict(self.kind) for day in self.days],
        }
        data.update(self.extras)
        data["metadata"] = dict(self.metadata)
        return data

    @classmethod
    def from_payload(
        cls,
        kind: PlanKind,
        payload: Mapping[str, Any],
        metrics: DerivedMetrics,
        source: PlanSource,
        metadata: Mapping[str, Any],
    ) -> "GeneratedPlan":
        """Build a plan from an already validated payload."""
        return cls(
            kind=kind,
            name=str(payload["name"]),
            description=str(payload["description"]),
            days=tuple(PlanDay.from_dict(kind, day) for day in payload["days"]),
            metrics=metrics,
            source=source,
            metadata=dict(metadata),
            extras={k: v for k, v in payload.items() if k not in _PLAN_KEYS},
        )
