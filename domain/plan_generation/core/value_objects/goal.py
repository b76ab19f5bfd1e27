"""Goal value object - user's training and nutrition objective."""

from enum import Enum
from typing import Optional


class Goal(str, Enum):
    """User's goal determining calorie target and plan emphasis.

    - WEIGHT_LOSS: 15% calorie deficit
    - MAINTENANCE: eat at TDEE
    - MUSCLE_GAIN: 15% calorie surplus
    """

    WEIGHT_LOSS = "weight_loss"
    MAINTENANCE = "maintenance"
    MUSCLE_GAIN = "muscle_gain"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Goal"]:
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    def calorie_multiplier(self) -> float:
        """Get the fixed TDEE multiplier for this goal.

        Example:
            >>> Goal.WEIGHT_LOSS.calorie_multiplier()
            0.85
        """
        multipliers = {
            Goal.WEIGHT_LOSS: 0.85,
            Goal.MAINTENANCE: 1.0,
            Goal.MUSCLE_GAIN: 1.15,
        }
        return multipliers[self]

    def label(self) -> str:
        """Human-readable label used in plan names and prompts."""
        labels = {
            Goal.WEIGHT_LOSS: "Fat Loss",
            Goal.MAINTENANCE: "Balanced Maintenance",
            Goal.MUSCLE_GAIN: "Muscle Building",
        }
        return labels[self]
