"""Port (interface) for external generative text services.

The generation orchestrator treats the model as an opaque text-completion
service: a request goes in, raw text comes out, or the call fails.
"""

from dataclasses import dataclass
from typing import Protocol, Tuple


@dataclass(frozen=True)
class ChatMessage:
    """Single chat message (role is "system" or "user")."""

    role: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class CompletionRequest:
    """Immutable request for one generation attempt.

    Each attempt builds its own request; nothing is shared between
    attempts.

    Attributes:
        model: Model name
        messages: Ordered messages (system instruction, then user instruction)
        temperature: Sampling temperature
        max_tokens: Completion token budget
        json_response: Ask the service to respond with a JSON object
    """

    model: str
    messages: Tuple[ChatMessage, ...]
    temperature: float
    max_tokens: int
    json_response: bool = True


class IGenerativeService(Protocol):
    """
    Interface for text generation providers.

    Implementations can be:
    - OpenAI chat completions (production)
    - Stub provider (development, always unavailable)
    - Fake services in tests
    """

    async def complete(self, request: CompletionRequest) -> str:
        """
        Run one completion and return the raw text.

        Args:
            request: Completion request for this attempt

        Returns:
            Raw completion text, expected to parse as plan JSON

        Raises:
            Exception: Implementation-specific errors (timeout, non-2xx
                status, empty completion). Callers treat all of them as
                a failed attempt.
        """
        ...
