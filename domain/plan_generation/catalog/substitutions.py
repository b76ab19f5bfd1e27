"""BMI-based exercise substitutions for beginners.

Each table maps an exercise name to a lower-impact or better-supported
variant. Replacement names never appear as keys of the same table, which
keeps substitution idempotent.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple

from ..core.value_objects.bmi_category import BMICategory


class Substitution(NamedTuple):
    name: str
    reason: str


_UNDERWEIGHT = {
    "Jumping Jacks": Substitution(
        "Controlled Step Jacks", "Lower energy cost while building work capacity"
    ),
    "High Knees": Substitution(
        "Controlled March", "Keeps heart rate moderate to protect energy balance"
    ),
    "Jumping Rope": Substitution(
        "Slow Boxer Shuffle", "Lower energy cost while building coordination"
    ),
    "Push-Ups": Substitution(
        "Knee Push-Ups", "Builds pressing strength with a manageable load"
    ),
    "Plank": Substitution("Knee Plank", "Shorter lever for progressive core strength"),
}

_OVERWEIGHT = {
    "Jumping Jacks": Substitution("Step Jacks", "Removes impact on knees and ankles"),
    "High Knees": Substitution("Marching in Place", "Removes impact while keeping heart rate up"),
    "Jumping Rope": Substitution(
        "Low-Impact Boxer Shuffle", "Removes repeated jumping impact"
    ),
    "Push-Ups": Substitution("Incline Push-Ups", "Reduces the share of body weight pressed"),
    "Bodyweight Squats": Substitution("Box Squats", "Box sets a safe depth and supports the knees"),
    "Reverse Lunges": Substitution(
        "Supported Reverse Lunges", "Hand support improves balance and knee control"
    ),
    "Lunges": Substitution("Supported Split Squats", "Static stance reduces knee stress"),
    "Step-Ups": Substitution("Low Step-Ups", "Lower step reduces knee load"),
}

_OBESE = {
    "Jumping Jacks": Substitution("Seated Jacks", "Seated variant removes all impact"),
    "High Knees": Substitution("Seated Marching", "Seated variant removes all impact"),
    "Jumping Rope": Substitution("Seated Boxer Punches", "Seated cardio without impact"),
    "Push-Ups": Substitution("Wall Push-Ups", "Wall angle keeps the load light"),
    "Bodyweight Squats": Substitution("Chair Squats", "Chair supports the bottom of the squat"),
    "Reverse Lunges": Substitution(
        "Chair-Assisted Lunges", "Chair support improves balance and knee control"
    ),
    "Lunges": Substitution(
        "Chair-Assisted Split Squats", "Chair support reduces knee stress"
    ),
    "Step-Ups": Substitution("Low Step-Ups", "Lower step reduces knee load"),
    "Plank": Substitution("Incline Plank", "Elevated hands reduce load on shoulders and back"),
}

BMI_SUBSTITUTIONS: Mapping[BMICategory, Mapping[str, Substitution]] = MappingProxyType(
    {
        BMICategory.UNDERWEIGHT: MappingProxyType(_UNDERWEIGHT),
        BMICategory.NORMAL: MappingProxyType({}),
        BMICategory.OVERWEIGHT: MappingProxyType(_OVERWEIGHT),
        BMICategory.OBESE: MappingProxyType(_OBESE),
    }
)
