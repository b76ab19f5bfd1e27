"""Unit tests for configuration and factories."""

from typing import Any, Iterator

import pytest

from application.plan_generation.commands.generate_workout_plan import (
    GenerateWorkoutPlanCommand,
    GenerateWorkoutPlanHandler,
)
from domain.plan_generation.core.entities.generated_plan import PlanSource
from infrastructure.ai.openai.client import OpenAIPlanClient
from infrastructure.config import get_generation_policy, get_generator_provider
from infrastructure.persistence import plan_repository_factory
from infrastructure.persistence.in_memory.plan_repository import InMemoryPlanRepository
from infrastructure.plan_generation.handler_factory import (
    create_meal_plan_handler,
    create_orchestrator,
    create_workout_plan_handler,
)
from infrastructure.plan_generation.providers.factory import create_generative_service
from infrastructure.plan_generation.providers.stub_generative_service import (
    StubGenerativeService,
)

_ENV_VARS = (
    "OPENAI_API_KEY",
    "PLAN_GENERATOR_PROVIDER",
    "PLAN_PRIMARY_MODEL",
    "PLAN_MAX_RETRIES",
    "PLAN_ATTEMPT_TIMEOUT_S",
    "PLAN_MIN_EXERCISES_PER_DAY",
    "REPOSITORY_BACKEND",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Unset plan generation variables and reset the repository singleton."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    plan_repository_factory.reset_plan_repository()
    yield
    plan_repository_factory.reset_plan_repository()


class TestConfig:
    """Test environment parsing."""

    def test_defaults(self) -> None:
        policy = get_generation_policy()

        assert get_generator_provider() == "stub"
        assert policy.primary_model == "gpt-4o"
        assert policy.max_retries == 3
        assert policy.attempt_timeout_s == 30.0

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PLAN_PRIMARY_MODEL", "gpt-4.1")
        monkeypatch.setenv("PLAN_MAX_RETRIES", "1")
        monkeypatch.setenv("PLAN_ATTEMPT_TIMEOUT_S", "12.5")

        policy = get_generation_policy()

        assert policy.primary_model == "gpt-4.1"
        assert policy.max_retries == 1
        assert policy.attempt_timeout_s == 12.5

    @pytest.mark.parametrize(
        "name,value",
        [
            ("PLAN_MAX_RETRIES", "many"),
            ("PLAN_MAX_RETRIES", "-1"),
            ("PLAN_ATTEMPT_TIMEOUT_S", "0"),
        ],
    )
    def test_invalid_values(self, monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
        monkeypatch.setenv(name, value)

        with pytest.raises(ValueError, match=name):
            get_generation_policy()


class TestGenerativeServiceFactory:
    """Test provider selection."""

    def test_default_is_stub(self) -> None:
        assert isinstance(create_generative_service(), StubGenerativeService)

    def test_openai_requires_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PLAN_GENERATOR_PROVIDER", "openai")

        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            create_generative_service()

    def test_openai(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PLAN_GENERATOR_PROVIDER", "OpenAI")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

        assert isinstance(create_generative_service(), OpenAIPlanClient)


class TestRepositoryFactory:
    """Test repository selection and singleton."""

    def test_unknown_backend_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")

        assert isinstance(plan_repository_factory.create_plan_repository(), InMemoryPlanRepository)

    def test_singleton(self) -> None:
        first = plan_repository_factory.get_plan_repository()

        assert plan_repository_factory.get_plan_repository() is first


class TestHandlerFactory:
    """Test end-to-end wiring with the stub provider."""

    @pytest.mark.asyncio
    async def test_workout_handler_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, workout_payload: dict
    ) -> None:
        monkeypatch.setenv("PLAN_MAX_RETRIES", "0")
        handler = create_workout_plan_handler()

        result = await handler.handle(GenerateWorkoutPlanCommand("user-1", workout_payload))

        assert isinstance(handler, GenerateWorkoutPlanHandler)
        assert result.source is PlanSource.FALLBACK
        stored = await plan_repository_factory.get_plan_repository().find_by_id(result.plan_id)
        assert stored == result.plan

    @pytest.mark.asyncio
    async def test_min_exercises_reaches_fallback(
        self, monkeypatch: pytest.MonkeyPatch, workout_payload: dict
    ) -> None:
        monkeypatch.setenv("PLAN_MAX_RETRIES", "0")
        monkeypatch.setenv("PLAN_MIN_EXERCISES_PER_DAY", "5")

        result = await create_workout_plan_handler().handle(
            GenerateWorkoutPlanCommand("user-1", workout_payload)
        )

        assert all(len(day.items) == 5 for day in result.plan.days)

    def test_meal_handler_shares_orchestrator(self) -> None:
        orchestrator = create_orchestrator(service=StubGenerativeService())
        repository: Any = InMemoryPlanRepository()

        handler = create_meal_plan_handler(orchestrator, repository)

        assert handler._orchestrator is orchestrator
        assert handler._repository is repository


class TestConfigureLogging:
    """Test logging setup."""

    def test_routes_structlog_through_stdlib(self, caplog: pytest.LogCaptureFixture) -> None:
        import logging

        import structlog

        from infrastructure.config import configure_logging

        configure_logging("debug")
        try:
            with caplog.at_level(logging.INFO, logger="plan_generation_test"):
                structlog.get_logger("plan_generation_test").info("plan_ready", attempts=2)

            assert "event='plan_ready'" in caplog.text
            assert "attempts=2" in caplog.text
        finally:
            structlog.reset_defaults()
