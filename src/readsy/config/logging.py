"""Shared logging helpers for Readsy."""

from __future__ import annotations

import logging

from .env import optional_env_var
from .errors import InvalidConfigurationError

LOG_LEVEL_ENV_VAR = "READSY_LOG_LEVEL"


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    defaults to ``READSY_LOG_LEVEL`` (or INFO) and the format is terse enough for CLI
    output. Pass ``force=True`` to reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def get_log_level() -> int:
    raw = optional_env_var(LOG_LEVEL_ENV_VAR)
    if raw is None:
        return logging.INFO
    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        raise InvalidConfigurationError(LOG_LEVEL_ENV_VAR, raw, "a logging level name")
    return level
