"""Unit tests for inbound plan request models."""

import pytest

from application.plan_generation.requests import (
    MealPlanRequest,
    WorkoutPlanRequest,
    parse_request,
)
from domain.plan_generation.core.exceptions.domain_errors import InvalidInputError
from domain.plan_generation.core.value_objects.activity_level import ActivityLevel
from domain.plan_generation.core.value_objects.biometric_profile import (
    HeightUnit,
    Sex,
    WeightUnit,
)
from domain.plan_generation.core.value_objects.fitness_level import FitnessLevel
from domain.plan_generation.core.value_objects.goal import Goal


class TestWorkoutPlanRequest:
    """Test workout request parsing."""

    def test_parses_camel_case(self, workout_payload: dict) -> None:
        request = parse_request(WorkoutPlanRequest, workout_payload)

        assert request.days_per_week == 3
        assert request.fitness_level is FitnessLevel.BEGINNER
        assert request.activity_level is ActivityLevel.SEDENTARY
        assert request.goal is Goal.WEIGHT_LOSS
        assert request.week_number == 1
        assert request.restrictions == frozenset()

    def test_to_profile(self, workout_payload: dict) -> None:
        workout_payload["biometrics"].update({"weightUnit": "LB", "heightUnit": "in"})

        profile = parse_request(WorkoutPlanRequest, workout_payload).to_profile()

        assert profile.sex is Sex.MALE
        assert profile.weight_unit is WeightUnit.LB
        assert profile.height_unit is HeightUnit.IN
        assert profile.weight_kg == pytest.approx(80 * 0.453592)

    def test_client_spellings_accepted(self, workout_payload: dict) -> None:
        workout_payload.update(
            {
                "activityLevel": "Very Active",
                "goal": "Muscle-Gain",
                "fitnessLevel": "Advanced",
                "restrictions": ["Gluten-Free", " ", "No Equipment"],
            }
        )

        request = parse_request(WorkoutPlanRequest, workout_payload)

        assert request.activity_level is ActivityLevel.VERY_ACTIVE
        assert request.goal is Goal.MUSCLE_GAIN
        assert request.fitness_level is FitnessLevel.ADVANCED
        assert request.restrictions == frozenset({"gluten_free", "no_equipment"})

    def test_missing_sex_defaults_to_other(self, workout_payload: dict) -> None:
        del workout_payload["biometrics"]["sex"]

        request = parse_request(WorkoutPlanRequest, workout_payload)

        assert request.biometrics.sex is Sex.OTHER

    def test_collects_every_invalid_field(self, workout_payload: dict) -> None:
        workout_payload["biometrics"]["age"] = 0
        workout_payload["biometrics"]["weight"] = -70
        workout_payload["daysPerWeek"] = 8

        with pytest.raises(InvalidInputError) as exc_info:
            parse_request(WorkoutPlanRequest, workout_payload)

        errors = exc_info.value.errors
        assert len(errors) == 3
        assert any(error.startswith("biometrics.age:") for error in errors)
        assert any(error.startswith("biometrics.weight:") for error in errors)
        assert any(error.startswith("daysPerWeek:") for error in errors)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("goal", "bulk"),
            ("activityLevel", "couch"),
            ("fitnessLevel", "elite"),
            ("weekNumber", 0),
        ],
    )
    def test_rejects_unknown_values(self, workout_payload: dict, field: str, value) -> None:
        workout_payload[field] = value

        with pytest.raises(InvalidInputError) as exc_info:
            parse_request(WorkoutPlanRequest, workout_payload)

        assert exc_info.value.errors[0].startswith(f"{field}:")

    def test_missing_required_field(self, workout_payload: dict) -> None:
        del workout_payload["fitnessLevel"]

        with pytest.raises(InvalidInputError, match="fitnessLevel"):
            parse_request(WorkoutPlanRequest, workout_payload)


class TestMealPlanRequest:
    """Test meal request parsing."""

    def test_defaults(self, meal_payload: dict) -> None:
        del meal_payload["mealsPerDay"]

        request = parse_request(MealPlanRequest, meal_payload)

        assert request.meals_per_day == 3

    @pytest.mark.parametrize("meals", [1, 7])
    def test_meals_per_day_range(self, meal_payload: dict, meals: int) -> None:
        meal_payload["mealsPerDay"] = meals

        with pytest.raises(InvalidInputError, match="mealsPerDay"):
            parse_request(MealPlanRequest, meal_payload)
