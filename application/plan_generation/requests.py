"""Inbound plan requests - pydantic models accepting camelCase payloads."""

from typing import Any, FrozenSet, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.plan_generation.core.exceptions.domain_errors import InvalidInputError
from domain.plan_generation.core.value_objects.activity_level import ActivityLevel
from domain.plan_generation.core.value_objects.biometric_profile import (
    BiometricProfile,
    HeightUnit,
    Sex,
    WeightUnit,
)
from domain.plan_generation.core.value_objects.fitness_level import FitnessLevel
from domain.plan_generation.core.value_objects.goal import Goal

R = TypeVar("R", bound="PlanRequest")


def _normalize(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower().replace("-", "_").replace(" ", "_")
    return value


class BiometricsInput(BaseModel):
    """Body measurements as sent by the client."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    age: int = Field(..., gt=0, le=120, description="Age in years")
    weight: float = Field(..., gt=0, description="Body weight in weightUnit")
    height: float = Field(..., gt=0, description="Height in heightUnit")
    sex: Sex = Field(Sex.OTHER, description="Sex for the BMR offset")
    weight_unit: WeightUnit = Field(WeightUnit.KG, alias="weightUnit")
    height_unit: HeightUnit = Field(HeightUnit.CM, alias="heightUnit")

    @field_validator("sex", mode="before")
    @classmethod
    def parse_sex(cls, v: Any) -> Any:
        """Accept aliases such as "M", "F" or "non-binary"."""
        return Sex(v) if isinstance(v, str) else v

    @field_validator("weight_unit", "height_unit", mode="before")
    @classmethod
    def lower_unit(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v


class PlanRequest(BaseModel):
    """Fields shared by workout and meal requests."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    biometrics: BiometricsInput
    activity_level: ActivityLevel = Field(..., alias="activityLevel")
    goal: Goal
    restrictions: FrozenSet[str] = Field(default_factory=frozenset)
    week_number: int = Field(1, ge=1, alias="weekNumber")

    @field_validator("activity_level", mode="before")
    @classmethod
    def parse_activity_level(cls, v: Any) -> Any:
        return ActivityLevel(v) if isinstance(v, str) else v

    @field_validator("goal", mode="before")
    @classmethod
    def parse_goal(cls, v: Any) -> Any:
        return Goal(v) if isinstance(v, str) else v

    @field_validator("restrictions", mode="before")
    @classmethod
    def normalize_restrictions(cls, v: Any) -> Any:
        """Lowercase snake_case tags, blanks dropped ("Gluten-Free" -> "gluten_free")."""
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple, set, frozenset)):
            return frozenset(_normalize(item) for item in v if str(item).strip())
        return v

    def to_profile(self) -> BiometricProfile:
        body = self.biometrics
        return BiometricProfile(
            age=body.age,
            weight=body.weight,
            height=body.height,
            sex=body.sex,
            activity_level=self.activity_level,
            goal=self.goal,
            restrictions=self.restrictions,
            weight_unit=body.weight_unit,
            height_unit=body.height_unit,
        )


class WorkoutPlanRequest(PlanRequest):
    """Request for a multi-day workout plan.

    Example:
        >>> WorkoutPlanRequest.model_validate({
        ...     "biometrics": {"age": 25, "weight": 80, "height": 170, "sex": "male"},
        ...     "activityLevel": "sedentary",
        ...     "goal": "weight_loss",
        ...     "fitnessLevel": "beginner",
        ...     "daysPerWeek": 3,
        ... }).days_per_week
        3
    """

    fitness_level: FitnessLevel = Field(..., alias="fitnessLevel")
    days_per_week: int = Field(..., ge=1, le=7, alias="daysPerWeek")

    @field_validator("fitness_level", mode="before")
    @classmethod
    def parse_fitness_level(cls, v: Any) -> Any:
        return _normalize(v)


class MealPlanRequest(PlanRequest):
    """Request for a 7-day meal plan."""

    meals_per_day: int = Field(3, ge=2, le=6, alias="mealsPerDay")


def parse_request(model: Type[R], payload: Mapping[str, Any]) -> R:
    """
    Validate a raw payload into a request model.

    Raises:
        InvalidInputError: With one message per invalid field
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        errors: List[str] = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "request"
            errors.append(f"{location}: {error['msg']}")
        raise InvalidInputError(errors) from e
