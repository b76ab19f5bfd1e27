"""Unit tests for OpenAIPlanClient.

Note: These are UNIT tests with mocked OpenAI API calls. Failing calls
are kept below the circuit breaker threshold.
"""

from typing import Any, Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from domain.plan_generation.core.ports.generative_service import (
    ChatMessage,
    CompletionRequest,
)
from infrastructure.ai.openai.client import EmptyCompletionError, OpenAIPlanClient


@pytest.fixture
def mock_openai_client() -> Iterator[Any]:
    """Fixture providing mocked OpenAI AsyncClient."""
    with patch("infrastructure.ai.openai.client.AsyncOpenAI") as mock:
        yield mock


@pytest.fixture
def request_() -> CompletionRequest:
    return CompletionRequest(
        model="gpt-4o",
        messages=(ChatMessage("system", "You are a coach"), ChatMessage("user", "3 days")),
        temperature=0.7,
        max_tokens=4000,
    )


def _response(content: Any) -> MagicMock:
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    response.usage = MagicMock(total_tokens=1500)
    return response


class TestOpenAIPlanClientInit:
    """Test client initialization."""

    def test_sdk_retries_disabled(self, mock_openai_client: Any) -> None:
        OpenAIPlanClient(api_key="test-key", timeout_s=12.0)

        mock_openai_client.assert_called_once_with(
            api_key="test-key",
            base_url=None,
            timeout=12.0,
            max_retries=0,
        )


class TestComplete:
    """Test chat completion calls."""

    @pytest.mark.asyncio
    async def test_returns_content(self, mock_openai_client: Any, request_) -> None:
        create = AsyncMock(return_value=_response('{"name": "Plan"}'))
        mock_openai_client.return_value.chat.completions.create = create
        client = OpenAIPlanClient(api_key="test-key")

        raw = await client.complete(request_)

        assert raw == '{"name": "Plan"}'
        kwargs = create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["max_tokens"] == 4000
        assert kwargs["messages"][0] == {"role": "system", "content": "You are a coach"}

    @pytest.mark.asyncio
    async def test_plain_text_request(self, mock_openai_client: Any) -> None:
        create = AsyncMock(return_value=_response("ok"))
        mock_openai_client.return_value.chat.completions.create = create
        client = OpenAIPlanClient(api_key="test-key")
        plain = CompletionRequest("gpt-4o-mini", (), 0.2, 100, json_response=False)

        await client.complete(plain)

        assert "response_format" not in create.call_args.kwargs

    @pytest.mark.asyncio
    async def test_empty_completion_raises(self, mock_openai_client: Any, request_) -> None:
        mock_openai_client.return_value.chat.completions.create = AsyncMock(
            return_value=_response(None)
        )
        client = OpenAIPlanClient(api_key="test-key")

        with pytest.raises(EmptyCompletionError):
            await client.complete(request_)
