"""Unit test configuration.

Unit tests do not load configuration from .env and never call external
services. Shared fixtures build biometric profiles.
"""

from typing import Any, Callable

import pytest

from domain.plan_generation.core.value_objects.activity_level import ActivityLevel
from domain.plan_generation.core.value_objects.biometric_profile import (
    BiometricProfile,
    Sex,
)
from domain.plan_generation.core.value_objects.goal import Goal


@pytest.fixture
def make_profile() -> Callable[..., BiometricProfile]:
    """Factory for profiles; defaults to the reference scenario."""

    def _make(**overrides: Any) -> BiometricProfile:
        fields: dict = {
            "age": 25,
            "weight": 80.0,
            "height": 170.0,
            "sex": Sex.MALE,
            "activity_level": ActivityLevel.SEDENTARY,
            "goal": Goal.WEIGHT_LOSS,
        }
        fields.update(overrides)
        return BiometricProfile(**fields)

    return _make


@pytest.fixture
def scenario_profile(make_profile: Callable[..., BiometricProfile]) -> BiometricProfile:
    """25 years, 80 kg, 170 cm, male, sedentary, weight loss."""
    return make_profile()


@pytest.fixture
def workout_payload() -> dict:
    """Valid camelCase workout request."""
    return {
        "biometrics": {"age": 25, "weight": 80, "height": 170, "sex": "male"},
        "activityLevel": "sedentary",
        "goal": "weight_loss",
        "fitnessLevel": "beginner",
        "daysPerWeek": 3,
    }


@pytest.fixture
def meal_payload() -> dict:
    """Valid camelCase meal request."""
    return {
        "biometrics": {"age": 30, "weight": 65, "height": 168, "sex": "female"},
        "activityLevel": "moderate",
        "goal": "maintenance",
        "mealsPerDay": 3,
    }
