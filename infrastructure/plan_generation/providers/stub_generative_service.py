"""Stub generative service for development and tests.

Always unavailable, so every request goes through the deterministic
fallback without calling external APIs.
"""

from domain.plan_generation.core.ports.generative_service import CompletionRequest


class StubGenerativeService:
    """Stub implementation of IGenerativeService that never answers."""

    def __init__(self) -> None:
        self.calls = 0

    async def complete(self, request: CompletionRequest) -> str:
        """
        Fail like an unreachable service.

        Raises:
            ConnectionError: Always
        """
        self.calls += 1
        raise ConnectionError(f"Generative service stub is unavailable (model {request.model})")
