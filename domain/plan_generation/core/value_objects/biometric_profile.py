"""BiometricProfile value object - per-request user biometrics."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional

from ..exceptions.domain_errors import InvalidInputError
from .activity_level import ActivityLevel
from .goal import Goal

LB_TO_KG = 0.453592
IN_TO_CM = 2.54


class Sex(str, Enum):
    """Biological sex used only for the BMR offset.

    OTHER covers non-binary and unspecified inputs; it shares the
    female offset.
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Sex"]:
        if isinstance(value, str):
            aliases = {
                "m": cls.MALE,
                "f": cls.FEMALE,
                "unspecified": cls.OTHER,
                "non_binary": cls.OTHER,
                "non-binary": cls.OTHER,
            }
            normalized = value.strip().lower()
            if normalized in aliases:
                return aliases[normalized]
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    def bmr_offset(self) -> float:
        """Mifflin-St Jeor constant term for this sex."""
        return 5.0 if self is Sex.MALE else -161.0


class WeightUnit(str, Enum):
    KG = "kg"
    LB = "lb"


class HeightUnit(str, Enum):
    CM = "cm"
    IN = "in"


@dataclass(frozen=True)
class BiometricProfile:
    """User biometric and lifestyle data for one generation request.

    Immutable; created per request and never persisted by the core.

    Attributes:
        age: Age in years (> 0)
        weight: Body weight in ``weight_unit``
        height: Height in ``height_unit``
        sex: Biological sex for the BMR formula
        activity_level: Physical activity level
        goal: Training/nutrition goal
        restrictions: Dietary or equipment restrictions
        weight_unit: Unit of ``weight`` (kg or lb)
        height_unit: Unit of ``height`` (cm or in)
    """

    age: int
    weight: float
    height: float
    sex: Sex
    activity_level: ActivityLevel
    goal: Goal
    restrictions: FrozenSet[str] = field(default_factory=frozenset)
    weight_unit: WeightUnit = WeightUnit.KG
    height_unit: HeightUnit = HeightUnit.CM

    def __post_init__(self) -> None:
        """Validate numeric fields.

        Raises:
            InvalidInputError: With one message per invalid field
        """
        errors = []
        if self.age <= 0:
            errors.append(f"age must be positive, got {self.age}")
        if self.weight <= 0:
            errors.append(f"weight must be positive, got {self.weight}")
        if self.height <= 0:
            errors.append(f"height must be positive, got {self.height}")
        if errors:
            raise InvalidInputError(errors)

    @property
    def weight_kg(self) -> float:
        """Weight converted to kilograms."""
        if self.weight_unit is WeightUnit.LB:
            return self.weight * LB_TO_KG
        return self.weight

    @property
    def height_cm(self) -> float:
        """Height converted to centimeters."""
        if self.height_unit is HeightUnit.IN:
            return self.height * IN_TO_CM
        return self.height
