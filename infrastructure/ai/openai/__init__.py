"""OpenAI client implementation for plan generation."""

from infrastructure.ai.openai.client import EmptyCompletionError, OpenAIPlanClient

__all__ = [
    "EmptyCompletionError",
    "OpenAIPlanClient",
]
