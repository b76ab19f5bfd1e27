"""Orchestrators for plan generation."""

from .generation_orchestrator import (
    GenerationCancelled,
    GenerationOrchestrator,
    GenerationOutcome,
    GenerationPolicy,
)

__all__ = [
    "GenerationCancelled",
    "GenerationOrchestrator",
    "GenerationOutcome",
    "GenerationPolicy",
]
