"""FitnessLevel value object - training experience of the user."""

from enum import Enum


class FitnessLevel(str, Enum):
    """Training experience, used to pick the exercise catalog column."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    def label(self) -> str:
        return self.value.capitalize()
