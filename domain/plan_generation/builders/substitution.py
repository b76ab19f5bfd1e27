"""BMI substitution - swap high-impact exercises for supported variants."""

import logging
from dataclasses import replace
from typing import Any, Dict, Mapping

from ..catalog.substitutions import BMI_SUBSTITUTIONS, Substitution
from ..core.entities.generated_plan import GeneratedPlan, PlanKind
from ..core.value_objects.bmi_category import BMICategory
from ..core.value_objects.fitness_level import FitnessLevel

logger = logging.getLogger(__name__)


def apply_bmi_substitutions(
    plan: GeneratedPlan,
    fitness_level: FitnessLevel,
    bmi_category: BMICategory,
    table: Mapping[BMICategory, Mapping[str, Substitution]] = BMI_SUBSTITUTIONS,
) -> GeneratedPlan:
    """
    Return a copy of a workout plan with BMI-specific substitutions.

    Only beginners outside the normal BMI band are affected. The input
    plan is never modified, and applying the pass twice gives the same
    result as applying it once.

    Args:
        plan: Workout plan to post-process
        fitness_level: User's training experience
        bmi_category: User's BMI band
        table: Substitution table per BMI band

    Returns:
        New plan with substituted exercise names and annotations, or the
        input plan when nothing applies
    """
    if plan.kind is not PlanKind.WORKOUT:
        return plan
    if fitness_level is not FitnessLevel.BEGINNER or bmi_category is BMICategory.NORMAL:
        return plan

    substitutions = table.get(bmi_category, {})
    if not substitutions:
        return plan

    changed = False
    days = []
    for day in plan.days:
        items = []
        for item in day.items:
            substitution = substitutions.get(item.get("name", ""))
            if substitution is None:
                items.append(item)
                continue
            items.append(_substitute(item, substitution, bmi_category))
            changed = True
        days.append(replace(day, items=tuple(items)))

    if not changed:
        return plan

    logger.info(
        "Applied BMI substitutions",
        extra={"bmi_category": bmi_category.value, "plan": plan.name},
    )
    return plan.with_days(tuple(days))


def _substitute(
    item: Mapping[str, Any], substitution: Substitution, bmi_category: BMICategory
) -> Dict[str, Any]:
    original = item["name"]
    note = f"Modified for {bmi_category.value} BMI: {substitution.reason}"
    existing_notes = item.get("notes") or ""

    replaced = dict(item)
    replaced["name"] = substitution.name
    replaced["substituted_for"] = original
    replaced["notes"] = f"{existing_notes} {note}".strip()
    replaced["form_cues"] = list(item.get("form_cues") or []) + [
        f"Modified variant of {original}"
    ]
    execution = item.get("execution")
    if isinstance(execution, Mapping):
        replaced["execution"] = dict(execution, form_cues=list(replaced["form_cues"]))
    if isinstance(item.get("progression"), Mapping):
        replaced["progression"] = {
            "next_steps": f"Return to {original} once this variant feels easy",
            "variations": [original],
            "scaling_options": [],
        }
    return replaced
