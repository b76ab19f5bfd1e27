"""WorkoutPlanBuilder - deterministic workout plan from the exercise catalog."""

import logging
import random
from typing import AbstractSet, Dict, List, Mapping, Optional, Set, Tuple

from ..catalog.exercises import CARDIO, EXERCISE_CATALOG, FULL_BODY, LOWER_BODY, UPPER_BODY
from ..catalog.templates import cooldown_section, warmup_section
from ..core.entities.catalog_item import Exercise
from ..core.entities.generated_plan import GeneratedPlan, PlanDay, PlanKind, PlanSource
from ..core.exceptions.domain_errors import CatalogExhaustionError
from ..core.value_objects.biometric_profile import BiometricProfile
from ..core.value_objects.derived_metrics import DerivedMetrics
from ..core.value_objects.fitness_level import FitnessLevel
from ..selection.scored_selector import ScoredSelector
from .progression import Progression, calculate_progression, progression_guidance
from .substitution import apply_bmi_substitutions

logger = logging.getLogger(__name__)

DEFAULT_EXERCISES_PER_DAY = 4

EQUIPMENT_FREE_RESTRICTIONS = frozenset({"no_equipment", "bodyweight_only"})

SIX_DAY_CYCLE = (UPPER_BODY, LOWER_BODY, CARDIO, UPPER_BODY, LOWER_BODY, FULL_BODY)


def focus_rotation(days_per_week: int) -> Tuple[str, ...]:
    """
    Focus area per training day.

    - up to 3 days: full body every day
    - 4-5 days: alternate upper and lower body
    - 6-7 days: upper, lower, cardio, upper, lower, full body, repeating

    Example:
        >>> focus_rotation(4)
        ('Upper Body & Core', 'Lower Body & Core', 'Upper Body & Core', 'Lower Body & Core')
    """
    if days_per_week <= 3:
        return (FULL_BODY,) * days_per_week
    if days_per_week <= 5:
        return tuple(UPPER_BODY if i % 2 == 0 else LOWER_BODY for i in range(days_per_week))
    return tuple(SIX_DAY_CYCLE[i % len(SIX_DAY_CYCLE)] for i in range(days_per_week))


class WorkoutPlanBuilder:
    """Build a workout plan without the generative model.

    Exercises are drawn at random (injectable RNG) from the catalog cell
    for each day's focus and the user's level. No exercise repeats within
    a day; across days of the same focus an exercise comes back only once
    the cell has been used up.
    """

    def __init__(
        self,
        catalog: Mapping[str, Mapping[FitnessLevel, Tuple[Exercise, ...]]] = EXERCISE_CATALOG,
        selector: Optional[ScoredSelector] = None,
        rng: Optional[random.Random] = None,
        exercises_per_day: int = DEFAULT_EXERCISES_PER_DAY,
    ):
        self._catalog = catalog
        self._selector = selector or ScoredSelector()
        self._rng = rng or random.Random()
        self._exercises_per_day = exercises_per_day

    def build(
        self,
        profile: BiometricProfile,
        metrics: DerivedMetrics,
        fitness_level: FitnessLevel,
        days_per_week: int,
        week_number: int = 1,
    ) -> GeneratedPlan:
        """
        Build a plan with ``days_per_week`` days.

        Raises:
            CatalogExhaustionError: If a focus/level cell has no usable
                exercise after restriction filtering
        """
        progression = calculate_progression(
            fitness_level, metrics.bmi_category, profile.goal, week_number
        )
        notes = progression_guidance(profile.goal, fitness_level, week_number)
        bodyweight_only = bool(profile.restrictions & EQUIPMENT_FREE_RESTRICTIONS)

        used: Dict[str, Set[str]] = {}
        days = []
        for index, focus in enumerate(focus_rotation(days_per_week), start=1):
            pool = self._pool(focus, fitness_level, bodyweight_only)
            picks = self._pick_day(pool, used.setdefault(focus, set()), focus)
            days.append(
                PlanDay(
                    name=f"Day {index}",
                    focus=focus,
                    items=tuple(_plan_item(exercise, progression) for exercise in picks),
                    opening=warmup_section(),
                    closing=cooldown_section(),
                    notes=notes,
                )
            )

        goal_label = profile.goal.label()
        plan = GeneratedPlan(
            kind=PlanKind.WORKOUT,
            name=f"{days_per_week}-Day {goal_label} Plan",
            description=(
                f"{fitness_level.label()} {days_per_week}-day workout plan "
                f"focused on {goal_label.lower()}"
            ),
            days=tuple(days),
            metrics=metrics,
            source=PlanSource.FALLBACK,
            metadata={
                "fitnessLevel": fitness_level.value,
                "goal": profile.goal.value,
                "daysPerWeek": days_per_week,
                "weekNumber": week_number,
                "bmiCategory": metrics.bmi_category.value,
            },
        )
        return apply_bmi_substitutions(plan, fitness_level, metrics.bmi_category)

    def _pool(
        self, focus: str, fitness_level: FitnessLevel, bodyweight_only: bool
    ) -> Tuple[Exercise, ...]:
        cells = self._catalog.get(focus, {})
        pool = list(cells.get(fitness_level, ()))
        if bodyweight_only:
            pool = [exercise for exercise in pool if exercise.is_bodyweight()]
            if len(pool) < self._exercises_per_day:
                self._borrow_bodyweight(pool, cells, focus, fitness_level)

        if not pool:
            detail = "no bodyweight exercises" if bodyweight_only else "empty exercise cell"
            raise CatalogExhaustionError(focus, fitness_level.value, detail)
        if len(pool) < self._exercises_per_day:
            logger.warning(
                "Exercise pool smaller than daily slots, exercises will repeat",
                extra={"focus": focus, "level": fitness_level.value, "size": len(pool)},
            )
        return tuple(pool)

    def _borrow_bodyweight(
        self,
        pool: List[Exercise],
        cells: Mapping[FitnessLevel, Tuple[Exercise, ...]],
        focus: str,
        fitness_level: FitnessLevel,
    ) -> None:
        # Nearest levels of the same focus first
        names = {exercise.name for exercise in pool}
        size = len(pool)
        for level in _nearest_levels(fitness_level):
            for exercise in cells.get(level, ()):
                if exercise.is_bodyweight() and exercise.name not in names:
                    pool.append(exercise)
                    names.add(exercise.name)
            if len(pool) >= self._exercises_per_day:
                break
        if len(pool) > size:
            logger.info(
                "Extended bodyweight pool from other levels",
                extra={"focus": focus, "level": fitness_level.value, "size": len(pool)},
            )

    def _pick_day(
        self, pool: Tuple[Exercise, ...], used: Set[str], focus: str
    ) -> List[Exercise]:
        picks: List[Exercise] = []
        day_names: Set[str] = set()
        for _ in range(self._exercises_per_day):
            excluded = _rotation_excluded(pool, used, day_names, focus)
            exercise = self._selector.pick_random(pool, excluded, self._rng)
            picks.append(exercise)
            day_names.add(exercise.name)
            used.add(exercise.name)
        return picks


def _nearest_levels(level: FitnessLevel) -> List[FitnessLevel]:
    levels = list(FitnessLevel)
    position = levels.index(level)
    others = [other for other in levels if other is not level]
    return sorted(others, key=lambda other: abs(levels.index(other) - position))


def _rotation_excluded(
    pool: Tuple[Exercise, ...], used: Set[str], day_names: AbstractSet[str], focus: str
) -> AbstractSet[str]:
    # Start a new rotation once every exercise of the cell has been used
    names = {exercise.name for exercise in pool}
    if names <= used | day_names and not names <= day_names:
        logger.warning(
            "Exercise rotation exhausted, allowing repeats across days",
            extra={"focus": focus, "cell_size": len(names)},
        )
        used.clear()
        used.update(day_names)
    return used | day_names


def _plan_item(exercise: Exercise, progression: Progression) -> dict:
    item = exercise.to_plan_item()
    item["sets"] = progression.sets
    item["rest"] = progression.rest
    if not exercise.is_timed():
        item["reps"] = progression.reps
    return item
