"""Ports for plan generation domain."""

from .generative_service import ChatMessage, CompletionRequest, IGenerativeService
from .plan_repository import IPlanRepository

__all__ = [
    "ChatMessage",
    "CompletionRequest",
    "IGenerativeService",
    "IPlanRepository",
]
