"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (store
capacity, sweep interval and log level).
"""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# Store capacity (distinct keys) and background expiry sweep
STORE_MAX_SIZE = _env_int("STORE_MAX_SIZE", 10_000)
STORE_SWEEP_INTERVAL = _env_float("STORE_SWEEP_INTERVAL", 60.0)

# Logging
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO").upper()
