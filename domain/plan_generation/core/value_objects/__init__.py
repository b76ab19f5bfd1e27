"""Value objects for plan generation domain."""

from .activity_level import ActivityLevel
from .biometric_profile import BiometricProfile, HeightUnit, Sex, WeightUnit
from .bmi_category import BMICategory
from .derived_metrics import DerivedMetrics, MacroDistribution
from .fitness_level import FitnessLevel
from .goal import Goal

__all__ = [
    "ActivityLevel",
    "BiometricProfile",
    "BMICategory",
    "DerivedMetrics",
    "FitnessLevel",
    "Goal",
    "HeightUnit",
    "MacroDistribution",
    "Sex",
    "WeightUnit",
]
