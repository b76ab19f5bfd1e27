"""Unit tests for progression rules and prompt guidance."""

import pytest

from domain.plan_generation.builders.progression import (
    MIN_SETS,
    Progression,
    calculate_progression,
    exercise_guidance,
    progression_guidance,
)
from domain.plan_generation.core.value_objects.bmi_category import BMICategory
from domain.plan_generation.core.value_objects.fitness_level import FitnessLevel
from domain.plan_generation.core.value_objects.goal import Goal


class TestCalculateProgression:
    """Test sets/reps/rest per goal, BMI band and week."""

    def test_maintenance_uses_level_defaults(self) -> None:
        progression = calculate_progression(
            FitnessLevel.INTERMEDIATE, BMICategory.NORMAL, Goal.MAINTENANCE
        )

        assert progression == Progression(4, "10-12", "60-90 seconds")

    def test_weight_loss_adds_a_set_and_shortens_rest(self) -> None:
        progression = calculate_progression(
            FitnessLevel.BEGINNER, BMICategory.NORMAL, Goal.WEIGHT_LOSS
        )

        assert progression == Progression(4, "15-20", "30-45 seconds")

    def test_muscle_gain_uses_hypertrophy_range(self) -> None:
        progression = calculate_progression(
            FitnessLevel.ADVANCED, BMICategory.NORMAL, Goal.MUSCLE_GAIN
        )

        assert progression == Progression(5, "8-12", "60-90 seconds")

    def test_obese_reduces_sets_but_not_below_minimum(self) -> None:
        progression = calculate_progression(
            FitnessLevel.BEGINNER, BMICategory.OBESE, Goal.MAINTENANCE
        )

        assert progression.sets == MIN_SETS

    def test_overweight_half_set_reduction_rounds_up(self) -> None:
        # 3 - 0.5 = 2.5 -> 3
        progression = calculate_progression(
            FitnessLevel.BEGINNER, BMICategory.OVERWEIGHT, Goal.MUSCLE_GAIN
        )

        assert progression.sets == 3

    @pytest.mark.parametrize("week,sets", [(1, 5), (2, 6), (3, 6), (4, 7), (10, 7)])
    def test_weekly_increase_caps_after_three_weeks(self, week: int, sets: int) -> None:
        progression = calculate_progression(
            FitnessLevel.ADVANCED, BMICategory.NORMAL, Goal.MAINTENANCE, week
        )

        assert progression.sets == sets


class TestGuidance:
    """Test prompt guidance text."""

    def test_exercise_guidance_low_impact_for_heavier_bands(self) -> None:
        text = exercise_guidance(Goal.WEIGHT_LOSS, FitnessLevel.BEGINNER, BMICategory.OBESE)

        assert "low-impact variations" in text
        assert "master basic movements first" in text

    def test_exercise_guidance_normal_advanced(self) -> None:
        text = exercise_guidance(Goal.MUSCLE_GAIN, FitnessLevel.ADVANCED, BMICategory.NORMAL)

        assert text == "moderate rep ranges (8-12), time under tension, controlled movements"

    def test_progression_guidance_mentions_week(self) -> None:
        text = progression_guidance(Goal.MAINTENANCE, FitnessLevel.INTERMEDIATE, 3)

        assert text.startswith("Week 3 progression: Increase intensity by 10%")

    def test_first_week_has_no_progression_sentence(self) -> None:
        text = progression_guidance(Goal.MAINTENANCE, FitnessLevel.INTERMEDIATE, 1)

        assert "Week" not in text
