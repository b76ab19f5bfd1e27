"""Generative service providers for plan generation."""

from infrastructure.plan_generation.providers.factory import create_generative_service
from infrastructure.plan_generation.providers.stub_generative_service import (
    StubGenerativeService,
)

__all__ = [
    "StubGenerativeService",
    "create_generative_service",
]
