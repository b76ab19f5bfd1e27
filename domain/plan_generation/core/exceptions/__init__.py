"""Domain exceptions for plan generation."""

from .domain_errors import (
    CatalogExhaustionError,
    GenerationAttemptError,
    InvalidInputError,
    PersistenceError,
    PlanGenerationError,
)

__all__ = [
    "PlanGenerationError",
    "InvalidInputError",
    "GenerationAttemptError",
    "CatalogExhaustionError",
    "PersistenceError",
]
