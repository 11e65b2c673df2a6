"""Defaults for ISBN reconciliation runs."""

from __future__ import annotations

from dataclasses import dataclass

from readsy.domain.reconciliation.engine import DEFAULT_SOURCE_TIMEOUT_SECONDS

from .env import optional_env_float


@dataclass(frozen=True, slots=True)
class ReconciliationConfig:
    source_timeout_seconds: float = DEFAULT_SOURCE_TIMEOUT_SECONDS


def get_reconciliation_config() -> ReconciliationConfig:
    return ReconciliationConfig(
        source_timeout_seconds=optional_env_float(
            "READSY_SOURCE_TIMEOUT_SECONDS", DEFAULT_SOURCE_TIMEOUT_SECONDS
        )
    )
