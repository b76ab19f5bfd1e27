"""OpenAI chat completions client - implements the IGenerativeService port.

Key Features:
- JSON-object response format
- Circuit breaker (5 failures -> 60s open)
- Client-level timeout; SDK retries disabled (the orchestrator owns retries)
"""

import logging
import time
from typing import Any, Dict, Optional

from circuitbreaker import circuit
from openai import AsyncOpenAI

from domain.plan_generation.core.ports.generative_service import CompletionRequest

logger = logging.getLogger(__name__)


class EmptyCompletionError(ValueError):
    """OpenAI answered without any message content."""


class OpenAIPlanClient:
    """
    OpenAI chat completions adapter for plan generation.

    Example:
        >>> from infrastructure.ai.openai.client import OpenAIPlanClient
        >>> client = OpenAIPlanClient(api_key="sk-...")
        >>> raw = await client.complete(request)
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
    ):
        """
        Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            base_url: Optional API base URL (proxies, compatible servers)
            timeout_s: Client-level request timeout in seconds
        """
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_s,
            max_retries=0,
        )

    @circuit(failure_threshold=5, recovery_timeout=60, name="openai_plan_generation")  # type: ignore[misc]
    async def complete(self, request: CompletionRequest) -> str:
        """
        Run one chat completion and return its text.

        Args:
            request: Model, messages and sampling settings

        Returns:
            Raw message content

        Raises:
            APIError: On OpenAI API failures
            EmptyCompletionError: If the completion has no content
            CircuitBreakerError: While the circuit is open
        """
        start_time = time.time()

        kwargs: Dict[str, Any] = {
            "model": request.model,
            "messages": [message.to_dict() for message in request.messages],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.json_response:
            kwargs["response_format"] = {"type": "json_object"}

        logger.debug(
            "Calling OpenAI chat completion",
            extra={
                "model": request.model,
                "message_count": len(request.messages),
                "max_tokens": request.max_tokens,
            },
        )

        response = await self._client.chat.completions.create(**kwargs)

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise EmptyCompletionError("OpenAI returned an empty completion")

        usage = response.usage
        logger.info(
            "OpenAI response received",
            extra={
                "model": request.model,
                "total_tokens": getattr(usage, "total_tokens", None),
                "processing_time_ms": int((time.time() - start_time) * 1000),
            },
        )
        return content
