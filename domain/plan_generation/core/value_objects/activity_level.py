"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Optional


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @classmethod
    def _missing_(cls, value: object) -> Optional["ActivityLevel"]:
        # Accept "Very Active", "very-active" and similar client spellings
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return PAL_MULTIPLIERS[self]

    def description(self) -> str:
        """Get human-readable description."""
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
            ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.VERY_ACTIVE: "Very hard exercise + physical job",
        }
        return descriptions[self]


PAL_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
