"""BMICategory value object - WHO body mass index banding."""

from enum import Enum


class BMICategory(str, Enum):
    """BMI band with standard WHO cutoffs (18.5 / 25 / 30)."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    @classmethod
    def from_bmi(cls, bmi: float) -> "BMICategory":
        """Classify a BMI value; lower bounds are inclusive.

        Example:
            >>> BMICategory.from_bmi(25.0)
            <BMICategory.OVERWEIGHT: 'overweight'>
        """
        if bmi < 18.5:
            return cls.UNDERWEIGHT
        elif bmi < 25.0:
            return cls.NORMAL
        elif bmi < 30.0:
            return cls.OVERWEIGHT
        else:
            return cls.OBESE
