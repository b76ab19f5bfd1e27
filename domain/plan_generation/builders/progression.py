"""Progression rules - training volume per level, BMI band, goal and week."""

import math
from dataclasses import dataclass

from ..core.value_objects.bmi_category import BMICategory
from ..core.value_objects.fitness_level import FitnessLevel
from ..core.value_objects.goal import Goal

BASE_SETS = {
    FitnessLevel.BEGINNER: 3,
    FitnessLevel.INTERMEDIATE: 4,
    FitnessLevel.ADVANCED: 5,
}

BASE_REPS = {
    FitnessLevel.BEGINNER: "8-10",
    FitnessLevel.INTERMEDIATE: "10-12",
    FitnessLevel.ADVANCED: "12-15",
}

BASE_REST = {
    FitnessLevel.BEGINNER: "90-120 seconds",
    FitnessLevel.INTERMEDIATE: "60-90 seconds",
    FitnessLevel.ADVANCED: "45-60 seconds",
}

# sets removed for heavier BMI bands
BMI_SET_REDUCTION = {
    BMICategory.UNDERWEIGHT: 0.0,
    BMICategory.NORMAL: 0.0,
    BMICategory.OVERWEIGHT: 0.5,
    BMICategory.OBESE: 1.0,
}

MIN_SETS = 2
WEEKLY_INCREASE = 0.1
MAX_PROGRESSION_WEEKS = 3


@dataclass(frozen=True)
class Progression:
    sets: int
    reps: str
    rest: str


def _scaled(sets: float, multiplier: float) -> int:
    # round first so 5 * 1.2 stays 6
    return math.ceil(round(sets * multiplier, 6))


def calculate_progression(
    fitness_level: FitnessLevel,
    bmi_category: BMICategory,
    goal: Goal,
    week_number: int = 1,
) -> Progression:
    """
    Sets, reps and rest for a week of training.

    Volume grows 10% per week for the first three weeks after week 1,
    then plateaus. Weight loss trades load for density (one extra set,
    high reps, short rest); muscle gain uses the hypertrophy range.

    Example:
        >>> calculate_progression(
        ...     FitnessLevel.BEGINNER, BMICategory.OBESE, Goal.MAINTENANCE, 1
        ... )
        Progression(sets=2, reps='8-10', rest='90-120 seconds')
    """
    adjusted = max(MIN_SETS, BASE_SETS[fitness_level] - BMI_SET_REDUCTION[bmi_category])
    weeks = min(max(week_number, 1) - 1, MAX_PROGRESSION_WEEKS)
    multiplier = 1 + weeks * WEEKLY_INCREASE

    if goal is Goal.WEIGHT_LOSS:
        return Progression(_scaled(adjusted + 1, multiplier), "15-20", "30-45 seconds")
    if goal is Goal.MUSCLE_GAIN:
        return Progression(_scaled(adjusted, multiplier), "8-12", "60-90 seconds")
    return Progression(
        _scaled(adjusted, multiplier),
        BASE_REPS[fitness_level],
        BASE_REST[fitness_level],
    )


def exercise_guidance(goal: Goal, fitness_level: FitnessLevel, bmi_category: BMICategory) -> str:
    """Comma-separated selection priorities for the prompt."""
    guidance = []
    if goal is Goal.WEIGHT_LOSS:
        guidance += ["higher rep ranges", "circuit-style training", "minimal rest between exercises"]
    elif goal is Goal.MUSCLE_GAIN:
        guidance += ["moderate rep ranges (8-12)", "time under tension", "controlled movements"]
    else:
        guidance += ["compound movements with proper form", "balanced volume"]

    if bmi_category in (BMICategory.OVERWEIGHT, BMICategory.OBESE):
        guidance += ["low-impact variations", "proper joint alignment", "gradual progression"]

    if fitness_level is FitnessLevel.BEGINNER:
        guidance += [
            "master basic movements first",
            "focus on form over weight",
            "use scaling options when needed",
        ]

    return ", ".join(guidance)


def progression_guidance(goal: Goal, fitness_level: FitnessLevel, week_number: int) -> str:
    """Sentence-style progression advice for the prompt and day notes."""
    guidance = []
    if week_number > 1:
        guidance.append(f"Week {week_number} progression: Increase intensity by 10%")

    if goal is Goal.WEIGHT_LOSS:
        guidance.append("Focus on increasing duration or reducing rest time")
        guidance.append("Maintain form throughout higher rep ranges")
    elif goal is Goal.MUSCLE_GAIN:
        guidance.append("Focus on time under tension and muscle contraction")
        guidance.append("Gradually increase weight while maintaining 8-12 rep range")
    else:
        guidance.append("Keep volume steady and refine technique")

    if fitness_level is FitnessLevel.BEGINNER:
        guidance.append("Master form before increasing intensity")
        guidance.append("Use scaling options when needed")

    return ". ".join(guidance)
