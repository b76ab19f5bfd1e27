"""Entities for plan generation domain."""

from .catalog_item import (
    CatalogItem,
    DietType,
    Execution,
    Exercise,
    ExerciseProgression,
    MealItem,
    MealSlot,
)
from .generated_plan import GeneratedPlan, PlanDay, PlanKind, PlanSource

__all__ = [
    "CatalogItem",
    "DietType",
    "Execution",
    "Exercise",
    "ExerciseProgression",
    "GeneratedPlan",
    "MealItem",
    "MealSlot",
    "PlanDay",
    "PlanKind",
    "PlanSource",
]
