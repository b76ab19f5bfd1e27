"""MealPlanBuilder - deterministic 7-day meal plan from the meal catalog."""

import logging
from typing import AbstractSet, Dict, FrozenSet, List, Mapping, Optional, Set, Tuple

from ..catalog.meals import DIET_COLUMNS, MEAL_CATALOG, RESTRICTION_TAGS
from ..catalog.templates import (
    MEAL_LAYOUTS,
    SNACK_SECTION,
    MealTime,
    hydration_section,
    meal_prep_section,
    nutrition_section,
    occurrence_shares,
)
from ..core.entities.catalog_item import DietType, MealItem, MealSlot
from ..core.entities.generated_plan import GeneratedPlan, PlanDay, PlanKind, PlanSource
from ..core.exceptions.domain_errors import CatalogExhaustionError, InvalidInputError
from ..core.value_objects.biometric_profile import BiometricProfile
from ..core.value_objects.derived_metrics import DerivedMetrics
from ..selection.scored_selector import ScoredSelector
from .grocery_list import build_grocery_list

logger = logging.getLogger(__name__)

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

MACROS = ("protein", "carbs", "fats", "fiber")


def diet_for(restrictions: AbstractSet[str]) -> DietType:
    """Most restrictive diet named in the restrictions."""
    if "vegan" in restrictions:
        return DietType.VEGAN
    if "vegetarian" in restrictions:
        return DietType.VEGETARIAN
    return DietType.STANDARD


def excluded_tags(restrictions: AbstractSet[str]) -> FrozenSet[str]:
    return frozenset(tag for name, tag in RESTRICTION_TAGS.items() if name in restrictions)


class MealPlanBuilder:
    """Build a 7-day meal plan without the generative model.

    Each meal slot is filled with the catalog item scoring closest to the
    slot's share of the calorie and macro targets. Items of a slot type do
    not repeat within the week until that slot's pool is used up.
    """

    def __init__(
        self,
        catalog: Mapping[Tuple[MealSlot, DietType], Tuple[MealItem, ...]] = MEAL_CATALOG,
        selector: Optional[ScoredSelector] = None,
    ):
        self._catalog = catalog
        self._selector = selector or ScoredSelector()

    def build(
        self,
        profile: BiometricProfile,
        metrics: DerivedMetrics,
        meals_per_day: int,
        week_number: int = 1,
    ) -> GeneratedPlan:
        """
        Build a 7-day plan with ``meals_per_day`` meals plus a snack.

        Raises:
            InvalidInputError: If no layout exists for ``meals_per_day``
            CatalogExhaustionError: If restrictions leave a slot without
                any candidate
        """
        layout = MEAL_LAYOUTS.get(meals_per_day)
        if layout is None:
            raise InvalidInputError(
                f"mealsPerDay must be between {min(MEAL_LAYOUTS)} and {max(MEAL_LAYOUTS)}"
            )

        diet = diet_for(profile.restrictions)
        blocked = excluded_tags(profile.restrictions)
        pools = {
            slot: self._pool(slot, diet, blocked)
            for slot in {meal.slot for meal in layout + (SNACK_SECTION,)}
        }

        shares = occurrence_shares(layout + (SNACK_SECTION,))
        calories = metrics.target_calories
        grams = metrics.macro_grams()

        used: Dict[MealSlot, Set[str]] = {slot: set() for slot in pools}
        served: List[MealItem] = []

        def pick(meal: MealTime) -> MealItem:
            share = shares[meal.name]
            target = {"calories": calories * share}
            target.update({macro: grams[macro] * share for macro in MACROS})
            excluded = _rotation_excluded(pools[meal.slot], used[meal.slot], meal.slot)
            item = self._selector.select(pools[meal.slot], target, excluded)
            used[meal.slot].add(item.name)
            served.append(item)
            return item

        days = []
        for day_name in WEEKDAYS:
            meals = [_meal_entry(meal, pick(meal)) for meal in layout]
            snack = pick(SNACK_SECTION)
            snacks = {
                "time": SNACK_SECTION.time,
                "calories": snack.calories,
                "items": [snack.to_plan_item()],
            }
            days.append(
                PlanDay(
                    name=day_name,
                    focus=profile.goal.label(),
                    items=tuple(meals),
                    opening=snacks,
                    closing=hydration_section(profile.weight_kg),
                    notes=(
                        f"Target {round(calories)} kcal across "
                        f"{meals_per_day} meals and a snack."
                    ),
                    extras=_day_totals(meals + snacks["items"]),
                )
            )

        goal_label = profile.goal.label()
        return GeneratedPlan(
            kind=PlanKind.MEAL,
            name=f"7-Day {goal_label} Meal Plan",
            description=(
                f"{diet.value.capitalize()} plan with {meals_per_day} meals per day "
                f"targeting {round(calories)} kcal"
            ),
            days=tuple(days),
            metrics=metrics,
            source=PlanSource.FALLBACK,
            metadata={
                "goal": profile.goal.value,
                "mealsPerDay": meals_per_day,
                "weekNumber": week_number,
                "bmiCategory": metrics.bmi_category.value,
                "diet": diet.value,
            },
            extras={
                "groceryList": build_grocery_list(served, profile.restrictions, blocked),
                "mealPrep": meal_prep_section(),
                "nutrition": nutrition_section(layout, profile.weight_kg, profile.restrictions),
            },
        )

    def _pool(
        self, slot: MealSlot, diet: DietType, blocked: FrozenSet[str]
    ) -> Tuple[MealItem, ...]:
        pool = tuple(
            item
            for column in DIET_COLUMNS[diet]
            for item in self._catalog.get((slot, column), ())
            if not item.tags & blocked
        )
        if not pool:
            detail = f"restrictions {sorted(blocked)}" if blocked else "empty meal cell"
            raise CatalogExhaustionError(slot.value, diet.value, detail)
        return pool


def _rotation_excluded(
    pool: Tuple[MealItem, ...], used: Set[str], slot: MealSlot
) -> AbstractSet[str]:
    # Start a new rotation once every item of the pool has been served
    if {item.name for item in pool} <= used:
        logger.warning(
            "Meal rotation exhausted, allowing repeats",
            extra={"slot": slot.value, "pool_size": len(pool)},
        )
        used.clear()
    return used


def _meal_entry(meal: MealTime, item: MealItem) -> dict:
    entry = item.to_plan_item()
    entry["meal"] = meal.name
    entry["time"] = meal.time
    return entry


def _day_totals(entries: list) -> dict:
    return {
        "totalCalories": round(sum(entry["calories"] for entry in entries)),
        "macros": {
            macro: round(sum(entry[macro] for entry in entries), 1) for macro in MACROS
        },
    }
