"""GenerationOrchestrator - model attempts with retries, then fallback.

Flow per request:
1. ComputeMetrics (InvalidInputError propagates)
2. Attempt 0: detailed prompt, primary model, large token budget
3. Parse (strip code fences, json.loads) and validate the completion
4. Attempts 1..max_retries: simplified prompt, retry model, smaller
   budget, lower temperature each time
5. All attempts failed (or cancelled): deterministic fallback
"""

import asyncio
import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple

import structlog
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt

from domain.plan_generation.builders.deterministic_plan_builder import (
    DeterministicPlanBuilder,
)
from domain.plan_generation.calculation.metrics_calculator import MetricsCalculator
from domain.plan_generation.core.entities.generated_plan import (
    GeneratedPlan,
    PlanKind,
    PlanSource,
)
from domain.plan_generation.core.exceptions.domain_errors import GenerationAttemptError
from domain.plan_generation.core.ports.generative_service import (
    ChatMessage,
    CompletionRequest,
    IGenerativeService,
)
from domain.plan_generation.core.value_objects.biometric_profile import BiometricProfile
from domain.plan_generation.core.value_objects.derived_metrics import DerivedMetrics
from domain.plan_generation.core.value_objects.fitness_level import FitnessLevel
from domain.plan_generation.validation.plan_validator import PlanShape, PlanValidator

from ..prompts.meal_prompts import MealPrompts
from ..prompts.workout_prompts import WorkoutPrompts

logger = structlog.get_logger(__name__)

_CODE_FENCE = re.compile(r"^\s*```[a-zA-Z]*\s*(.*?)\s*```\s*$", re.DOTALL)


@dataclass(frozen=True)
class GenerationPolicy:
    """Retry and model settings for the orchestrator.

    Attributes:
        primary_model: Model for the first, detailed attempt
        retry_model: Cheaper model for simplified retries
        max_retries: Retries after the first attempt
        attempt_timeout_s: Per-attempt timeout in seconds
        primary_max_tokens: Token budget of the first attempt
        retry_max_tokens: Token budget of each retry
        primary_temperature: Temperature of the first attempt
        retry_temperatures: Temperature per retry; the last one repeats
        min_exercises_per_day: Minimum exercises per workout day
    """

    primary_model: str = "gpt-4o"
    retry_model: str = "gpt-4o-mini"
    max_retries: int = 3
    attempt_timeout_s: float = 30.0
    primary_max_tokens: int = 4000
    retry_max_tokens: int = 2500
    primary_temperature: float = 0.7
    retry_temperatures: Tuple[float, ...] = (0.5, 0.35, 0.2)
    min_exercises_per_day: int = 4

    def request_for(self, attempt: int, messages: Tuple[ChatMessage, ...]) -> CompletionRequest:
        """Completion request for attempt ``attempt`` (0 is the first)."""
        if attempt == 0:
            return CompletionRequest(
                model=self.primary_model,
                messages=messages,
                temperature=self.primary_temperature,
                max_tokens=self.primary_max_tokens,
            )
        index = min(attempt, len(self.retry_temperatures)) - 1
        return CompletionRequest(
            model=self.retry_model,
            messages=messages,
            temperature=self.retry_temperatures[index],
            max_tokens=self.retry_max_tokens,
        )


@dataclass(frozen=True)
class GenerationOutcome:
    """Orchestrator result.

    Attributes:
        plan: Plan from the model or the fallback builder
        metrics: Metrics computed for the request
        source: Which path produced the plan
        attempts: Number of model attempts made
    """

    plan: GeneratedPlan
    metrics: DerivedMetrics
    source: PlanSource
    attempts: int


class _Prompts(Protocol):
    def detailed(self) -> Tuple[ChatMessage, ...]:
        ...

    def simplified(self) -> Tuple[ChatMessage, ...]:
        ...


class GenerationCancelled(Exception):
    """Cancel signal observed; the orchestrator skips to the fallback."""


def strip_code_fences(text: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    match = _CODE_FENCE.match(text)
    return match.group(1) if match else text.strip()


def parse_completion(raw: str, attempt: int) -> Any:
    """
    Parse raw completion text as JSON.

    Raises:
        GenerationAttemptError: If the text is empty or not JSON
    """
    if not raw or not raw.strip():
        raise GenerationAttemptError(attempt, "empty completion")
    try:
        return json.loads(strip_code_fences(raw))
    except json.JSONDecodeError as e:
        raise GenerationAttemptError(attempt, f"invalid JSON: {e.msg}") from e


class GenerationOrchestrator:
    """
    Produces a plan for every valid request.

    The generative service is best effort: every failure mode (network,
    timeout, open circuit, empty text, bad JSON, wrong shape) counts as a
    failed attempt. After ``max_retries + 1`` failed attempts the
    deterministic builder produces the plan. Only InvalidInputError and
    CatalogExhaustionError reach the caller.

    Example:
        >>> orchestrator = GenerationOrchestrator(service)
        >>> outcome = await orchestrator.generate_workout(
        ...     profile, FitnessLevel.BEGINNER, days_per_week=3
        ... )
        >>> outcome.source
        <PlanSource.FALLBACK: 'fallback'>
    """

    def __init__(
        self,
        generative_service: IGenerativeService,
        calculator: Optional[MetricsCalculator] = None,
        validator: Optional[PlanValidator] = None,
        fallback_builder: Optional[DeterministicPlanBuilder] = None,
        policy: Optional[GenerationPolicy] = None,
    ):
        self._service = generative_service
        self._calculator = calculator or MetricsCalculator()
        self._validator = validator or PlanValidator()
        self._fallback = fallback_builder or DeterministicPlanBuilder()
        self._policy = policy or GenerationPolicy()

    async def generate_workout(
        self,
        profile: BiometricProfile,
        fitness_level: FitnessLevel,
        days_per_week: int,
        week_number: int = 1,
        cancel: Optional[asyncio.Event] = None,
    ) -> GenerationOutcome:
        """
        Generate a workout plan.

        Args:
            profile: User biometrics, goal and restrictions
            fitness_level: Training experience
            days_per_week: Number of training days (1-7)
            week_number: Program week, drives progression
            cancel: Optional signal; when set, skip to the fallback

        Raises:
            InvalidInputError: If metrics cannot be computed
            CatalogExhaustionError: If the fallback has no usable exercise
        """
        metrics = self._calculator.calculate(profile)
        prompts = WorkoutPrompts(
            days_per_week=days_per_week,
            fitness_level=fitness_level,
            goal=profile.goal,
            bmi_category=metrics.bmi_category,
            week_number=week_number,
            restrictions=profile.restrictions,
            min_exercises=self._policy.min_exercises_per_day,
        )
        shape = PlanShape(PlanKind.WORKOUT, days_per_week, self._policy.min_exercises_per_day)
        metadata = {
            "fitnessLevel": fitness_level.value,
            "goal": profile.goal.value,
            "daysPerWeek": days_per_week,
            "weekNumber": week_number,
            "bmiCategory": metrics.bmi_category.value,
        }

        plan, attempts = await self._attempt_model(shape, prompts, metrics, metadata, cancel)
        if plan is None:
            plan = self._fallback.build_workout(
                profile, metrics, fitness_level, days_per_week, week_number
            )
        return GenerationOutcome(plan, metrics, plan.source, attempts)

    async def generate_meal(
        self,
        profile: BiometricProfile,
        meals_per_day: int,
        week_number: int = 1,
        cancel: Optional[asyncio.Event] = None,
    ) -> GenerationOutcome:
        """
        Generate a 7-day meal plan.

        Raises:
            InvalidInputError: If metrics cannot be computed
            CatalogExhaustionError: If restrictions leave a meal slot empty
        """
        metrics = self._calculator.calculate(profile)
        prompts = MealPrompts(
            meals_per_day=meals_per_day,
            goal=profile.goal,
            metrics=metrics,
            restrictions=profile.restrictions,
        )
        shape = PlanShape(PlanKind.MEAL, 7, meals_per_day)
        metadata = {
            "goal": profile.goal.value,
            "mealsPerDay": meals_per_day,
            "weekNumber": week_number,
            "bmiCategory": metrics.bmi_category.value,
        }

        plan, attempts = await self._attempt_model(shape, prompts, metrics, metadata, cancel)
        if plan is None:
            plan = self._fallback.build_meal(profile, metrics, meals_per_day, week_number)
        return GenerationOutcome(plan, metrics, plan.source, attempts)

    async def _attempt_model(
        self,
        shape: PlanShape,
        prompts: _Prompts,
        metrics: DerivedMetrics,
        metadata: Dict[str, Any],
        cancel: Optional[asyncio.Event],
    ) -> Tuple[Optional[GeneratedPlan], int]:
        """Run model attempts; (plan, attempts) or (None, attempts) on exhaustion."""
        attempts = 0
        payload = None
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._policy.max_retries + 1),
                retry=retry_if_exception_type(GenerationAttemptError),
                reraise=True,
            ):
                with attempt:
                    number = attempt.retry_state.attempt_number - 1
                    attempts = number + 1
                    payload = await self._run_attempt(number, shape, prompts, cancel)
        except GenerationAttemptError as e:
            logger.warning(
                "generation_attempts_exhausted",
                kind=shape.kind.value,
                attempts=attempts,
                last_reason=e.reason,
            )
            return None, attempts
        except GenerationCancelled:
            logger.info("generation_cancelled", kind=shape.kind.value, attempts=attempts)
            return None, attempts

        logger.info("generation_succeeded", kind=shape.kind.value, attempts=attempts)
        plan = GeneratedPlan.from_payload(
            shape.kind, payload, metrics, PlanSource.MODEL, metadata
        )
        return plan, attempts

    async def _run_attempt(
        self,
        attempt: int,
        shape: PlanShape,
        prompts: _Prompts,
        cancel: Optional[asyncio.Event],
    ) -> Any:
        if cancel is not None and cancel.is_set():
            raise GenerationCancelled()

        messages = prompts.detailed() if attempt == 0 else prompts.simplified()
        request = self._policy.request_for(attempt, messages)
        logger.info(
            "generation_attempt_started",
            kind=shape.kind.value,
            attempt=attempt,
            model=request.model,
            temperature=request.temperature,
        )

        try:
            raw = await self._complete_with_timeout(attempt, request, cancel)
            payload = parse_completion(raw, attempt)
            result = self._validator.validate(payload, shape)
            if not result.is_valid:
                raise GenerationAttemptError(attempt, "validation failed", result.errors)
        except GenerationAttemptError as e:
            logger.warning(
                "generation_attempt_failed",
                kind=shape.kind.value,
                attempt=attempt,
                reason=e.reason,
                errors=e.errors[:5],
            )
            raise

        return payload

    async def _complete_with_timeout(
        self,
        attempt: int,
        request: CompletionRequest,
        cancel: Optional[asyncio.Event],
    ) -> str:
        """
        Await one completion, bounded by the attempt timeout.

        Raises:
            GenerationAttemptError: On timeout or any service error
            GenerationCancelled: If ``cancel`` is set while waiting
        """
        call = asyncio.ensure_future(self._service.complete(request))
        waiters = {call}
        cancel_wait = None
        if cancel is not None:
            cancel_wait = asyncio.ensure_future(cancel.wait())
            waiters.add(cancel_wait)

        try:
            done, pending = await asyncio.wait(
                waiters,
                timeout=self._policy.attempt_timeout_s,
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            for task in waiters:
                task.cancel()
            raise

        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

        if call in done:
            try:
                return call.result()
            except Exception as e:
                raise GenerationAttemptError(attempt, f"service error: {e}") from e
        if cancel_wait is not None and cancel_wait in done:
            raise GenerationCancelled()
        raise GenerationAttemptError(attempt, f"timed out after {self._policy.attempt_timeout_s}s")
