"""Unit tests for workout and meal prompt builders."""

from application.plan_generation.prompts.meal_prompts import MealPrompts
from application.plan_generation.prompts.workout_prompts import WorkoutPrompts
from domain.plan_generation.calculation.metrics_calculator import MetricsCalculator
from domain.plan_generation.core.value_objects.bmi_category import BMICategory
from domain.plan_generation.core.value_objects.fitness_level import FitnessLevel
from domain.plan_generation.core.value_objects.goal import Goal


def _workout_prompts(**overrides) -> WorkoutPrompts:
    fields = {
        "days_per_week": 4,
        "fitness_level": FitnessLevel.BEGINNER,
        "goal": Goal.WEIGHT_LOSS,
        "bmi_category": BMICategory.OBESE,
        "week_number": 2,
        "restrictions": frozenset({"no_equipment"}),
        "min_exercises": 4,
    }
    fields.update(overrides)
    return WorkoutPrompts(**fields)


class TestWorkoutPrompts:
    """Test detailed and simplified workout prompts."""

    def test_detailed_includes_request_context(self) -> None:
        system, user = _workout_prompts().detailed()

        assert system.role == "system"
        assert user.role == "user"
        assert "4-day workout plan for a beginner" in user.content
        assert "low-impact variations" in user.content
        assert "Week 2 progression" in user.content
        assert "no_equipment" in user.content
        assert '"form_cues"' in user.content
        assert '"execution"' in user.content
        assert '"scaling_options"' in user.content

    def test_simplified_puts_schema_in_system_message(self) -> None:
        system, user = _workout_prompts(min_exercises=5).simplified()

        assert "at least 5 exercises" in system.content
        assert '"exercises"' in system.content
        assert user.content.startswith("4 days, beginner level")

    def test_no_restrictions(self) -> None:
        _, user = _workout_prompts(restrictions=frozenset()).detailed()

        assert "Restrictions: none" in user.content


class TestMealPrompts:
    """Test meal prompts carry the calorie and macro targets."""

    def test_targets(self, scenario_profile) -> None:
        metrics = MetricsCalculator().calculate(scenario_profile)
        prompts = MealPrompts(4, Goal.WEIGHT_LOSS, metrics, frozenset({"vegan"}))

        _, user = prompts.detailed()
        system, short = prompts.simplified()

        assert "1777 kcal per day" in user.content
        assert "4 meals per day" in user.content
        assert "Dietary restrictions: vegan" in user.content
        assert "at least 4 meals" in system.content
        assert "1777 kcal" in short.content

    def test_bmi_category_in_both_prompts(self, scenario_profile) -> None:
        metrics = MetricsCalculator().calculate(scenario_profile)
        prompts = MealPrompts(3, Goal.WEIGHT_LOSS, metrics, frozenset())

        _, user = prompts.detailed()
        _, short = prompts.simplified()

        assert "BMI category: overweight" in user.content
        assert "BMI category overweight" in short.content

    def test_detailed_schema_has_plan_sections(self, scenario_profile) -> None:
        metrics = MetricsCalculator().calculate(scenario_profile)

        _, user = MealPrompts(3, Goal.MAINTENANCE, metrics, frozenset()).detailed()

        for key in ('"groceryList"', '"mealPrep"', '"nutrition"', '"alternatives"'):
            assert key in user.content
