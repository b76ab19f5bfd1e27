"""Provider Factory for the generative service.

Environment-based provider selection with graceful fallback to the stub.
Strategy:
- .env (runtime): PLAN_GENERATOR_PROVIDER=openai
- .env.test (pytest): PLAN_GENERATOR_PROVIDER=stub
- Default: stub (every request uses the deterministic fallback)
"""

from domain.plan_generation.core.ports.generative_service import IGenerativeService
from infrastructure.ai.openai.client import OpenAIPlanClient
from infrastructure.config import (
    get_generation_policy,
    get_generator_provider,
    get_openai_api_key,
    get_openai_base_url,
)
from infrastructure.plan_generation.providers.stub_generative_service import (
    StubGenerativeService,
)


def create_generative_service() -> IGenerativeService:
    """Create generative service based on PLAN_GENERATOR_PROVIDER env var.

    Environment variable: PLAN_GENERATOR_PROVIDER
    Values:
        - "openai": OpenAI chat completions (requires OPENAI_API_KEY)
        - "stub": Stub service (default)

    Returns:
        IGenerativeService: Generative service instance

    Raises:
        ValueError: If openai is selected without OPENAI_API_KEY

    Example:
        # In .env (production):
        PLAN_GENERATOR_PROVIDER=openai
        OPENAI_API_KEY=sk-...
    """
    mode = get_generator_provider()

    if mode == "openai":
        api_key = get_openai_api_key()
        if not api_key:
            raise ValueError(
                "PLAN_GENERATOR_PROVIDER=openai but OPENAI_API_KEY not set. "
                "Set OPENAI_API_KEY in .env or use PLAN_GENERATOR_PROVIDER=stub"
            )
        return OpenAIPlanClient(
            api_key=api_key,
            base_url=get_openai_base_url(),
            timeout_s=get_generation_policy().attempt_timeout_s,
        )

    # Default: stub (safe fallback)
    return StubGenerativeService()
