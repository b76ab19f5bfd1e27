"""Unit tests for the plan generation command handlers."""

from unittest.mock import AsyncMock

import pytest

from application.plan_generation.commands.generate_meal_plan import (
    GenerateMealPlanCommand,
    GenerateMealPlanHandler,
)
from application.plan_generation.commands.generate_workout_plan import (
    GenerateWorkoutPlanCommand,
    GenerateWorkoutPlanHandler,
)
from application.plan_generation.orchestrators.generation_orchestrator import (
    GenerationOrchestrator,
    GenerationPolicy,
)
from domain.plan_generation.core.entities.generated_plan import PlanKind, PlanSource
from domain.plan_generation.core.exceptions.domain_errors import (
    InvalidInputError,
    PersistenceError,
)
from infrastructure.persistence.in_memory.plan_repository import InMemoryPlanRepository
from infrastructure.plan_generation.providers.stub_generative_service import (
    StubGenerativeService,
)


@pytest.fixture
def service() -> StubGenerativeService:
    return StubGenerativeService()


@pytest.fixture
def orchestrator(service: StubGenerativeService) -> GenerationOrchestrator:
    return GenerationOrchestrator(service, policy=GenerationPolicy(max_retries=1))


@pytest.fixture
def repository() -> InMemoryPlanRepository:
    return InMemoryPlanRepository()


class TestGenerateWorkoutPlanHandler:
    """Test workout handler flow."""

    @pytest.mark.asyncio
    async def test_generates_and_persists(
        self, orchestrator, repository, service, workout_payload: dict
    ) -> None:
        handler = GenerateWorkoutPlanHandler(orchestrator, repository)

        result = await handler.handle(GenerateWorkoutPlanCommand("user-1", workout_payload))

        assert result.source is PlanSource.FALLBACK
        assert result.plan.kind is PlanKind.WORKOUT
        assert len(result.plan.days) == 3
        assert result.plan_id is not None
        assert await repository.find_by_id(result.plan_id) == result.plan
        assert service.calls == 2

    @pytest.mark.asyncio
    async def test_to_dict(self, orchestrator, repository, workout_payload: dict) -> None:
        handler = GenerateWorkoutPlanHandler(orchestrator, repository)

        data = (await handler.handle(GenerateWorkoutPlanCommand("user-1", workout_payload))).to_dict()

        assert set(data) == {"plan", "derivedMetrics", "source", "planId"}
        assert data["source"] == "fallback"
        assert data["derivedMetrics"]["bmiCategory"] == "overweight"
        assert len(data["plan"]["days"]) == 3

    @pytest.mark.asyncio
    async def test_invalid_payload_never_calls_service(
        self, orchestrator, repository, service, workout_payload: dict
    ) -> None:
        workout_payload["daysPerWeek"] = 0
        handler = GenerateWorkoutPlanHandler(orchestrator, repository)

        with pytest.raises(InvalidInputError):
            await handler.handle(GenerateWorkoutPlanCommand("user-1", workout_payload))

        assert service.calls == 0

    @pytest.mark.asyncio
    async def test_persistence_failure_still_returns_plan(
        self, orchestrator, workout_payload: dict
    ) -> None:
        repository = AsyncMock()
        repository.save.side_effect = PersistenceError("database down")
        handler = GenerateWorkoutPlanHandler(orchestrator, repository)

        result = await handler.handle(GenerateWorkoutPlanCommand("user-1", workout_payload))

        assert result.plan_id is None
        assert len(result.plan.days) == 3
        repository.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_empty_owner_is_a_persistence_failure(
        self, orchestrator, repository, workout_payload: dict
    ) -> None:
        handler = GenerateWorkoutPlanHandler(orchestrator, repository)

        result = await handler.handle(GenerateWorkoutPlanCommand("", workout_payload))

        assert result.plan_id is None


class TestGenerateMealPlanHandler:
    """Test meal handler flow."""

    @pytest.mark.asyncio
    async def test_generates_and_persists(
        self, orchestrator, repository, meal_payload: dict
    ) -> None:
        handler = GenerateMealPlanHandler(orchestrator, repository)

        result = await handler.handle(GenerateMealPlanCommand("user-2", meal_payload))

        assert result.plan.kind is PlanKind.MEAL
        assert len(result.plan.days) == 7
        assert all(len(day.items) == 3 for day in result.plan.days)
        assert await repository.find_by_owner("user-2") == [result.plan]

    @pytest.mark.asyncio
    async def test_restrictions_reach_the_builder(
        self, orchestrator, repository, meal_payload: dict
    ) -> None:
        meal_payload["restrictions"] = ["Vegan"]
        handler = GenerateMealPlanHandler(orchestrator, repository)

        result = await handler.handle(GenerateMealPlanCommand("user-2", meal_payload))

        assert result.plan.metadata["diet"] == "vegan"
