"""Plan payload validation."""

from .plan_validator import PlanShape, PlanValidator, ValidationResult

__all__ = ["PlanShape", "PlanValidator", "ValidationResult"]
