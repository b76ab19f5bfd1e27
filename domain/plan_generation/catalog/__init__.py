"""Static catalogs for the deterministic fallback builders."""

from ..core.entities.catalog_item import DietType, MealSlot
from ..core.exceptions.domain_errors import CatalogExhaustionError
from ..core.value_objects.fitness_level import FitnessLevel
from .exercises import (
    CARDIO,
    EXERCISE_CATALOG,
    FOCUS_AREAS,
    FULL_BODY,
    LOWER_BODY,
    UPPER_BODY,
    exercises_for,
)
from .meals import DIET_COLUMNS, MEAL_CATALOG, RESTRICTION_TAGS, meals_for
from .substitutions import BMI_SUBSTITUTIONS, Substitution
from .templates import MEAL_LAYOUTS, SNACK_SECTION, MealTime


def validate_catalogs(exercise_catalog=EXERCISE_CATALOG, meal_catalog=MEAL_CATALOG) -> None:
    """Check every catalog cell is populated and consistent.

    Raises:
        CatalogExhaustionError: On the first empty or mislabelled cell
    """
    for focus in FOCUS_AREAS:
        for level in FitnessLevel:
            cell = exercise_catalog.get(focus, {}).get(level, ())
            if not cell:
                raise CatalogExhaustionError(focus, level.value, "empty exercise cell")
            for exercise in cell:
                if exercise.focus != focus or exercise.difficulty is not level:
                    raise CatalogExhaustionError(
                        focus, level.value, f"misfiled exercise {exercise.name!r}"
                    )

    for slot in MealSlot:
        for diet in DietType:
            cell = meal_catalog.get((slot, diet), ())
            if not cell:
                raise CatalogExhaustionError(slot.value, diet.value, "empty meal cell")
            for meal in cell:
                if meal.slot is not slot or meal.diet is not diet:
                    raise CatalogExhaustionError(
                        slot.value, diet.value, f"misfiled meal {meal.name!r}"
                    )


__all__ = [
    "BMI_SUBSTITUTIONS",
    "CARDIO",
    "DIET_COLUMNS",
    "EXERCISE_CATALOG",
    "FOCUS_AREAS",
    "FULL_BODY",
    "LOWER_BODY",
    "MEAL_CATALOG",
    "MEAL_LAYOUTS",
    "MealTime",
    "RESTRICTION_TAGS",
    "SNACK_SECTION",
    "Substitution",
    "UPPER_BODY",
    "exercises_for",
    "meals_for",
    "validate_catalogs",
]
