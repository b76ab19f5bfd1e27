"""Domain exceptions for plan generation."""

from typing import Iterable, Optional, Union


class PlanGenerationError(Exception):
    """Base exception for plan generation domain errors."""

    pass


class InvalidInputError(PlanGenerationError):
    """Raised when request fields are missing, malformed or out of range.

    Carries one message per violated field so a caller can report every
    problem at once. Generation is never attempted when this is raised.
    """

    def __init__(self, errors: Union[str, Iterable[str]]):
        self.errors = [errors] if isinstance(errors, str) else list(errors)
        super().__init__("; ".join(self.errors))


class GenerationAttemptError(PlanGenerationError):
    """A single generation attempt failed (network, timeout, parse, shape).

    Recovered internally by the orchestrator; never surfaced to callers.
    """

    def __init__(self, attempt: int, reason: str, errors: Optional[list[str]] = None):
        super().__init__(f"Attempt {attempt} failed: {reason}")
        self.attempt = attempt
        self.reason = reason
        self.errors = errors or []


class CatalogExhaustionError(PlanGenerationError):
    """Raised when no catalog item exists for a required slot.

    Indicates a data/configuration defect rather than a bad request.
    """

    def __init__(self, category: str, level: str, detail: str = ""):
        message = f"No catalog items for ({category}, {level})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.category = category
        self.level = level


class PersistenceError(PlanGenerationError):
    """Raised by the persistence gateway when a plan cannot be saved."""

    pass
