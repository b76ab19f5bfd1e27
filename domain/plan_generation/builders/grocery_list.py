"""Grocery list for a meal plan, built from the meals actually served."""

from types import MappingProxyType
from typing import AbstractSet, Any, Dict, FrozenSet, Iterable, List, Mapping, Tuple

from ..catalog.meals import GLUTEN, NUTS
from ..core.entities.catalog_item import MealItem

# kcal per gram
MACRO_ENERGY = {"protein": 4.0, "carbs": 4.0, "fats": 9.0}

GROUP_FOR_MACRO = {"protein": "proteins", "carbs": "carbs", "fats": "fats"}

PRODUCE: Tuple[str, ...] = (
    "Leafy greens",
    "Mixed berries",
    "Bell peppers",
    "Broccoli",
    "Bananas",
)

# (item, tags it carries)
PANTRY: Tuple[Tuple[str, FrozenSet[str]], ...] = (
    ("Herbs and spices", frozenset()),
    ("Olive oil", frozenset()),
    ("Canned beans and lentils", frozenset()),
    ("Whole grain bread", frozenset({GLUTEN})),
    ("Nut butter", frozenset({NUTS})),
    ("Plant protein powder", frozenset()),
)

# alternative group -> (restrictions that call for it, swaps)
ALTERNATIVES: Mapping[str, Tuple[FrozenSet[str], Tuple[str, ...]]] = MappingProxyType(
    {
        "dairy": (
            frozenset({"dairy_free", "vegan"}),
            ("Oat milk", "Coconut yogurt", "Nutritional yeast"),
        ),
        "gluten": (frozenset({"gluten_free"}), ("Quinoa", "Rice", "Gluten-free oats")),
        "meat": (frozenset({"vegetarian", "vegan"}), ("Tofu", "Tempeh", "Legumes")),
        "nuts": (frozenset({"nut_free"}), ("Sunflower seeds", "Pumpkin seeds", "Seed butter")),
    }
)


def dominant_macro(item: MealItem) -> str:
    """Macro contributing the most calories; ties go to protein, then carbs."""
    energy = {macro: getattr(item, macro) * kcal for macro, kcal in MACRO_ENERGY.items()}
    return max(energy, key=lambda macro: energy[macro])


def build_grocery_list(
    served: Iterable[MealItem],
    restrictions: AbstractSet[str],
    blocked_tags: FrozenSet[str],
) -> Dict[str, Any]:
    """
    Group the week's meals by dominant macro and add staples.

    Each meal is listed once, in the order it is first served. Pantry
    staples carrying a blocked tag are left out. Alternatives cover the
    groups the restrictions ask for, or every group when there are none.

    Example:
        >>> build_grocery_list([], frozenset(), frozenset())["pantry"][0]
        'Herbs and spices'
    """
    groups: Dict[str, List[str]] = {"proteins": [], "carbs": [], "fats": []}
    seen = set()
    for item in served:
        if item.name in seen:
            continue
        seen.add(item.name)
        groups[GROUP_FOR_MACRO[dominant_macro(item)]].append(item.name)

    wanted = {
        group: list(swaps)
        for group, (triggers, swaps) in ALTERNATIVES.items()
        if triggers & restrictions
    }
    if not wanted:
        wanted = {group: list(swaps) for group, (_, swaps) in ALTERNATIVES.items()}

    return {
        "proteins": groups["proteins"],
        "carbs": groups["carbs"],
        "fats": groups["fats"],
        "produce": list(PRODUCE),
        "pantry": [name for name, tags in PANTRY if not tags & blocked_tags],
        "alternatives": wanted,
    }
