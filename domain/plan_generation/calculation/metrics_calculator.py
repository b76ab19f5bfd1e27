"""MetricsCalculator - BMI, BMR, TDEE, calorie target and macro split."""

import logging
from typing import Dict, Tuple, Union

from ..core.exceptions.domain_errors import InvalidInputError
from ..core.value_objects.activity_level import PAL_MULTIPLIERS, ActivityLevel
from ..core.value_objects.biometric_profile import BiometricProfile, Sex
from ..core.value_objects.bmi_category import BMICategory
from ..core.value_objects.derived_metrics import DerivedMetrics, MacroDistribution
from ..core.value_objects.goal import Goal

logger = logging.getLogger(__name__)

MACROS = ("protein", "carbs", "fats", "fiber")

# (protein, carbs, fats, fiber) as fractions of calories
GOAL_BASE_SPLIT: Dict[Goal, Tuple[float, float, float, float]] = {
    Goal.WEIGHT_LOSS: (0.35, 0.30, 0.25, 0.10),
    Goal.MAINTENANCE: (0.25, 0.40, 0.25, 0.10),
    Goal.MUSCLE_GAIN: (0.30, 0.40, 0.20, 0.10),
}

# More activity shifts calories toward carbs; each row sums to zero
ACTIVITY_DELTA: Dict[ActivityLevel, Tuple[float, float, float, float]] = {
    ActivityLevel.SEDENTARY: (0.0, -0.05, 0.03, 0.02),
    ActivityLevel.LIGHT: (0.0, -0.02, 0.01, 0.01),
    ActivityLevel.MODERATE: (0.0, 0.0, 0.0, 0.0),
    ActivityLevel.ACTIVE: (-0.02, 0.05, -0.03, 0.0),
    ActivityLevel.VERY_ACTIVE: (-0.04, 0.08, -0.04, 0.0),
}

MACRO_BOUNDS: Dict[str, Tuple[float, float]] = {
    "protein": (0.20, 0.50),
    "carbs": (0.20, 0.60),
    "fats": (0.15, 0.40),
    "fiber": (0.10, 0.20),
}

# Order in which macros give up share when the split exceeds 100%
_TRIM_ORDER = ("carbs", "fats", "protein", "fiber")


def bmi(weight_kg: float, height_cm: float) -> float:
    """Body Mass Index = weight (kg) / (height (m))².

    Raises:
        InvalidInputError: If weight or height is not positive
    """
    errors = []
    if weight_kg <= 0:
        errors.append(f"weight must be positive, got {weight_kg}")
    if height_cm <= 0:
        errors.append(f"height must be positive, got {height_cm}")
    if errors:
        raise InvalidInputError(errors)

    height_m = height_cm / 100.0
    return weight_kg / (height_m**2)


def bmi_category(bmi_value: float) -> BMICategory:
    """WHO banding with cutoffs 18.5 / 25 / 30."""
    return BMICategory.from_bmi(bmi_value)


def bmr(weight_kg: float, height_cm: float, age: int, sex: Sex) -> float:
    """Mifflin-St Jeor basal metabolic rate in kcal/day.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Others: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + sex.bmr_offset()


def tdee(bmr_value: float, activity_level: Union[ActivityLevel, str]) -> float:
    """TDEE = BMR × PAL multiplier.

    An unknown activity level falls back to the sedentary multiplier;
    request validation is expected to reject such values first.
    """
    try:
        level = ActivityLevel(activity_level)
    except ValueError:
        logger.warning(
            "Unknown activity level, using sedentary multiplier",
            extra={"activity_level": activity_level},
        )
        level = ActivityLevel.SEDENTARY
    return bmr_value * PAL_MULTIPLIERS[level]


def target_calories(tdee_value: float, goal: Goal) -> float:
    """Daily calorie target: TDEE × {0.85, 1.0, 1.15} for the goal."""
    return tdee_value * goal.calorie_multiplier()


def macro_distribution(goal: Goal, activity_level: ActivityLevel) -> MacroDistribution:
    """Macro split as fractions of calories.

    Starts from the goal's base split, applies the activity delta, clamps
    each macro into its valid range, then trims shares (carbs first) if
    the total exceeds 1.

    Example:
        >>> macro_distribution(Goal.MAINTENANCE, ActivityLevel.MODERATE)
        MacroDistribution(protein=0.25, carbs=0.4, fats=0.25, fiber=0.1)
    """
    base = GOAL_BASE_SPLIT[goal]
    delta = ACTIVITY_DELTA[activity_level]

    shares = {}
    for macro, start, shift in zip(MACROS, base, delta):
        low, high = MACRO_BOUNDS[macro]
        shares[macro] = round(min(high, max(low, start + shift)), 4)

    overflow = round(sum(shares.values()) - 1.0, 4)
    for macro in _TRIM_ORDER:
        if overflow <= 0:
            break
        low, _ = MACRO_BOUNDS[macro]
        cut = min(overflow, shares[macro] - low)
        shares[macro] = round(shares[macro] - cut, 4)
        overflow = round(overflow - cut, 4)

    return MacroDistribution(**shares)


class MetricsCalculator:
    """Compute all derived metrics for a biometric profile.

    Flow:
    1. BMI and BMI category from weight/height (converted to kg/cm)
    2. BMR from Mifflin-St Jeor
    3. TDEE from BMR and activity level
    4. Target calories from TDEE and goal
    5. Macro distribution from goal and activity level

    Pure and deterministic; safe to share between requests.
    """

    def calculate(self, profile: BiometricProfile) -> DerivedMetrics:
        """
        Calculate derived metrics for one request.

        Args:
            profile: User biometrics with activity level and goal

        Returns:
            DerivedMetrics consumed by prompt and fallback builders

        Raises:
            InvalidInputError: If weight or height is not positive

        Example:
            >>> metrics = MetricsCalculator().calculate(profile)
            >>> metrics.bmi_category
            <BMICategory.OVERWEIGHT: 'overweight'>
        """
        weight_kg = profile.weight_kg
        height_cm = profile.height_cm

        bmi_value = bmi(weight_kg, height_cm)
        bmr_value = bmr(weight_kg, height_cm, profile.age, profile.sex)
        tdee_value = tdee(bmr_value, profile.activity_level)

        return DerivedMetrics(
            bmi=bmi_value,
            bmi_category=bmi_category(bmi_value),
            bmr=bmr_value,
            tdee=tdee_value,
            target_calories=target_calories(tdee_value, profile.goal),
            macro_distribution=macro_distribution(profile.goal, profile.activity_level),
        )
