"""Fixed day sections and meal layouts used by the fallback builders."""

from types import MappingProxyType
from typing import AbstractSet, Any, Dict, Mapping, NamedTuple, Tuple

from ..core.entities.catalog_item import MealSlot

WARMUP: Mapping[str, Any] = MappingProxyType(
    {
        "duration": "10 minutes",
        "exercises": (
            {
                "name": "Light Jogging",
                "duration": "5 minutes",
                "description": "Easy jog or brisk march in place",
                "purpose": "Increase heart rate and body temperature",
            },
            {
                "name": "Arm Circles",
                "duration": "1 minute",
                "description": "Small to large circles in both directions",
                "purpose": "Mobilize the shoulder joints",
            },
            {
                "name": "Dynamic Stretching",
                "duration": "4 minutes",
                "description": "Leg swings, hip openers and torso twists",
                "purpose": "Prepare muscles and joints for training",
            },
        ),
    }
)

COOLDOWN: Mapping[str, Any] = MappingProxyType(
    {
        "duration": "10 minutes",
        "exercises": (
            {
                "name": "Static Stretching",
                "duration": "5 minutes",
                "description": "Hold each major muscle group stretch for 30 seconds",
                "purpose": "Restore range of motion",
            },
            {
                "name": "Foam Rolling",
                "duration": "3 minutes",
                "description": "Roll quads, hamstrings, calves and upper back",
                "purpose": "Reduce muscle tightness",
            },
            {
                "name": "Deep Breathing",
                "duration": "2 minutes",
                "description": "Slow nasal breathing lying on the back",
                "purpose": "Bring heart rate back to resting",
            },
        ),
    }
)

WATER_ML_PER_KG = 35

HYDRATION_SCHEDULE: Tuple[str, ...] = (
    "1 glass upon waking",
    "1 glass with each meal",
    "1 glass between meals",
    "Sip water before and after training",
)


MEAL_PREP: Mapping[str, Any] = MappingProxyType(
    {
        "tips": (
            "Prep vegetables in advance",
            "Cook proteins and grains in bulk",
            "Portion meals into containers right after cooking",
        ),
        "schedule": "Sunday and Wednesday meal prep sessions",
        "storage": (
            "Use airtight containers",
            "Label with dates",
            "Refrigerate within two hours of cooking",
            "Eat refrigerated meals within 3-4 days or freeze them",
        ),
    }
)

NUTRITION_GUIDELINES: Tuple[str, ...] = (
    "Include a protein source with each meal",
    "Fill half the plate with vegetables",
    "Eat slowly and stop when comfortably full",
)

BASE_SUPPLEMENTS: Tuple[str, ...] = ("Multivitamin if needed", "Protein powder optional")

# restriction -> supplements worth considering
RESTRICTION_SUPPLEMENTS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "vegan": ("Vitamin B12", "Algae-based omega-3"),
        "vegetarian": ("Vitamin B12",),
        "dairy_free": ("Calcium and vitamin D if intake is low",),
    }
)


class MealTime(NamedTuple):
    name: str
    slot: MealSlot
    time: str


_BREAKFAST = MealTime("Breakfast", MealSlot.BREAKFAST, "8:00 AM")
_MID_MORNING = MealTime("Mid-Morning Snack", MealSlot.SNACK, "10:30 AM")
_LUNCH = MealTime("Lunch", MealSlot.LUNCH, "12:30 PM")
_AFTERNOON = MealTime("Afternoon Snack", MealSlot.SNACK, "3:30 PM")
_DINNER = MealTime("Dinner", MealSlot.DINNER, "7:00 PM")
_EVENING = MealTime("Evening Snack", MealSlot.SNACK, "9:00 PM")

# meals per day -> ordered meals of the day
MEAL_LAYOUTS: Mapping[int, Tuple[MealTime, ...]] = MappingProxyType(
    {
        2: (_BREAKFAST, _DINNER),
        3: (_BREAKFAST, _LUNCH, _DINNER),
        4: (_BREAKFAST, _LUNCH, _AFTERNOON, _DINNER),
        5: (_BREAKFAST, _MID_MORNING, _LUNCH, _AFTERNOON, _DINNER),
        6: (_BREAKFAST, _MID_MORNING, _LUNCH, _AFTERNOON, _DINNER, _EVENING),
    }
)

# the daily snacks section counts as one more snack occurrence
SNACK_SECTION = MealTime("Daily Snack", MealSlot.SNACK, "Anytime")

SLOT_SHARES: Mapping[MealSlot, float] = MappingProxyType(
    {
        MealSlot.BREAKFAST: 0.25,
        MealSlot.LUNCH: 0.35,
        MealSlot.DINNER: 0.30,
        MealSlot.SNACK: 0.10,
    }
)


def occurrence_shares(meals: Tuple[MealTime, ...]) -> Dict[str, float]:
    """Calorie share per meal name, summing to 1.

    A slot type's share is split evenly over its occurrences, then shares
    are normalised over the slot types present.

    Example:
        >>> occurrence_shares(MEAL_LAYOUTS[2] + (SNACK_SECTION,))["Breakfast"]
        0.3846153846153846
    """
    counts: Dict[MealSlot, int] = {}
    for meal in meals:
        counts[meal.slot] = counts.get(meal.slot, 0) + 1

    present_total = sum(SLOT_SHARES[slot] for slot in counts)
    return {
        meal.name: SLOT_SHARES[meal.slot] / counts[meal.slot] / present_total for meal in meals
    }


def warmup_section() -> Dict[str, Any]:
    return {"duration": WARMUP["duration"], "exercises": [dict(e) for e in WARMUP["exercises"]]}


def cooldown_section() -> Dict[str, Any]:
    return {
        "duration": COOLDOWN["duration"],
        "exercises": [dict(e) for e in COOLDOWN["exercises"]],
    }


def hydration_section(weight_kg: float) -> Dict[str, Any]:
    liters = weight_kg * WATER_ML_PER_KG / 1000.0
    return {"water": f"{liters:.1f} liters per day", "schedule": list(HYDRATION_SCHEDULE)}


def meal_prep_section() -> Dict[str, Any]:
    return {
        "tips": list(MEAL_PREP["tips"]),
        "schedule": MEAL_PREP["schedule"],
        "storage": list(MEAL_PREP["storage"]),
    }


def nutrition_section(
    layout: Tuple[MealTime, ...], weight_kg: float, restrictions: AbstractSet[str]
) -> Dict[str, Any]:
    """Plan-level nutrition guidance for a day layout.

    Timing lists the layout's meal times; supplements add what the
    restrictions call for.
    """
    supplements = list(BASE_SUPPLEMENTS)
    for restriction in sorted(restrictions):
        for supplement in RESTRICTION_SUPPLEMENTS.get(restriction, ()):
            if supplement not in supplements:
                supplements.append(supplement)
    return {
        "guidelines": list(NUTRITION_GUIDELINES),
        "timing": ", ".join(f"{meal.name} at {meal.time}" for meal in layout),
        "supplements": supplements,
        "hydration": f"Drink {hydration_section(weight_kg)['water']}",
    }
