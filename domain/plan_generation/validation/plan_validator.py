"""PlanValidator - structural and semantic checks on a plan payload.

Applies to both model output (parsed JSON) and fallback output
(``GeneratedPlan.to_dict()``).
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from ..core.entities.generated_plan import PlanKind


@dataclass(frozen=True)
class PlanShape:
    """Expected shape of a plan payload.

    Attributes:
        kind: Workout or meal; fixes the day's key names
        expected_days: Exact number of days
        min_items_per_day: Minimum number of primary items per day
    """

    kind: PlanKind
    expected_days: int
    min_items_per_day: int


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


class PlanValidator:
    """Collect every shape violation of a plan payload.

    Never raises for bad payloads; each problem becomes one message.
    """

    def validate(self, payload: Any, shape: PlanShape) -> ValidationResult:
        """
        Validate a payload against the expected shape.

        Args:
            payload: Parsed plan (any JSON value)
            shape: Expected kind, day count and items per day

        Returns:
            ValidationResult with one message per violation
        """
        if not isinstance(payload, Mapping):
            return ValidationResult(False, ["Plan must be a JSON object"])

        errors: List[str] = []
        if not payload.get("name"):
            errors.append("Plan is missing a name")
        if not payload.get("description"):
            errors.append("Plan is missing a description")

        days = payload.get("days")
        if not isinstance(days, list) or not days:
            errors.append("Plan must have at least one day")
            return ValidationResult(False, errors)

        if len(days) != shape.expected_days:
            errors.append(f"Plan must have exactly {shape.expected_days} days, got {len(days)}")

        for index, day in enumerate(days, start=1):
            errors.extend(self._validate_day(index, day, shape))

        return ValidationResult(not errors, errors)

    def _validate_day(self, index: int, day: Any, shape: PlanShape) -> List[str]:
        label = f"Day {index}"
        if not isinstance(day, Mapping):
            return [f"{label} must be an object"]

        errors = []
        if not day.get("name"):
            errors.append(f"{label} is missing a name")
        if not day.get("focus"):
            errors.append(f"{label} is missing a focus")

        kind = shape.kind
        items = day.get(kind.items_key)
        if not isinstance(items, list) or len(items) < shape.min_items_per_day:
            count = len(items) if isinstance(items, list) else 0
            errors.append(
                f"{label} must have at least {shape.min_items_per_day} "
                f"{kind.items_key}, got {count}"
            )
        if isinstance(items, list):
            check = _exercise_errors if kind is PlanKind.WORKOUT else _meal_errors
            for position, item in enumerate(items, start=1):
                errors.extend(check(f"{label}, item {position}", item))

        for section, section_items in (kind.opening_section, kind.closing_section):
            block = day.get(section)
            entries = block.get(section_items) if isinstance(block, Mapping) else None
            if not isinstance(entries, list) or not entries:
                errors.append(f"{label} must have a non-empty {section} section")

        return errors


def _exercise_errors(label: str, item: Any) -> List[str]:
    if not isinstance(item, Mapping):
        return [f"{label} must be an object"]

    errors = []
    if not item.get("name"):
        errors.append(f"{label} is missing a name")
    sets = item.get("sets")
    if isinstance(sets, bool) or not isinstance(sets, (int, float)) or sets < 1:
        errors.append(f"{label} has invalid sets")
    if not item.get("reps"):
        errors.append(f"{label} is missing reps")
    if not item.get("rest"):
        errors.append(f"{label} is missing rest time")
    return errors


def _meal_errors(label: str, item: Any) -> List[str]:
    if not isinstance(item, Mapping):
        return [f"{label} must be an object"]

    errors = []
    if not item.get("name"):
        errors.append(f"{label} is missing a name")
    calories = item.get("calories")
    if isinstance(calories, bool) or not isinstance(calories, (int, float)) or calories <= 0:
        errors.append(f"{label} has invalid calories")
    return errors
