"""Configuration utilities for infrastructure layer.

Values come from environment variables; a ``.env`` file in the working
directory is loaded first (existing variables win).
"""

import logging
import os
from typing import Optional

import structlog
from dotenv import load_dotenv

from application.plan_generation.orchestrators.generation_orchestrator import (
    GenerationPolicy,
)

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_openai_api_key() -> Optional[str]:
    return os.getenv("OPENAI_API_KEY") or None


def get_openai_base_url() -> Optional[str]:
    """Optional OpenAI-compatible base URL (proxy or self-hosted)."""
    return os.getenv("OPENAI_BASE_URL") or None


def get_generator_provider() -> str:
    """
    Get the generative provider name.

    Returns:
        "openai" or "stub" from PLAN_GENERATOR_PROVIDER, defaults to "stub"
    """
    return os.getenv("PLAN_GENERATOR_PROVIDER", "stub").lower()


def get_repository_backend() -> str:
    return os.getenv("REPOSITORY_BACKEND", "inmemory").lower()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def get_generation_policy() -> GenerationPolicy:
    """
    Build the orchestrator policy from the environment.

    Environment Variables:
        PLAN_PRIMARY_MODEL: First-attempt model (default gpt-4o)
        PLAN_RETRY_MODEL: Retry model (default gpt-4o-mini)
        PLAN_MAX_RETRIES: Retries after the first attempt (default 3)
        PLAN_ATTEMPT_TIMEOUT_S: Per-attempt timeout (default 30)
        PLAN_MIN_EXERCISES_PER_DAY: Minimum exercises per day (default 4)

    Raises:
        ValueError: If a numeric variable is malformed or out of range
    """
    defaults = GenerationPolicy()
    policy = GenerationPolicy(
        primary_model=os.getenv("PLAN_PRIMARY_MODEL", defaults.primary_model),
        retry_model=os.getenv("PLAN_RETRY_MODEL", defaults.retry_model),
        max_retries=_int_env("PLAN_MAX_RETRIES", defaults.max_retries),
        attempt_timeout_s=_float_env("PLAN_ATTEMPT_TIMEOUT_S", defaults.attempt_timeout_s),
        min_exercises_per_day=_int_env(
            "PLAN_MIN_EXERCISES_PER_DAY", defaults.min_exercises_per_day
        ),
    )
    if policy.max_retries < 0:
        raise ValueError("PLAN_MAX_RETRIES must be >= 0")
    if policy.attempt_timeout_s <= 0:
        raise ValueError("PLAN_ATTEMPT_TIMEOUT_S must be > 0")
    if policy.min_exercises_per_day < 1:
        raise ValueError("PLAN_MIN_EXERCISES_PER_DAY must be >= 1")
    return policy


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure stdlib logging and route structlog through it.

    Args:
        level: Log level name; defaults to LOG_LEVEL (INFO)
    """
    level_name = (level or get_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
