"""Calculation services for plan generation."""

from .metrics_calculator import (
    MetricsCalculator,
    bmi,
    bmi_category,
    bmr,
    macro_distribution,
    target_calories,
    tdee,
)

__all__ = [
    "MetricsCalculator",
    "bmi",
    "bmi_category",
    "bmr",
    "tdee",
    "target_calories",
    "macro_distribution",
]
