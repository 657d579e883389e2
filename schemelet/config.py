from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

# Defaults
DEFAULT_MAX_CALL_DEPTH = 128
DEFAULT_MAX_NATIVE_ARGS = 16
DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int, environ: Mapping[str, str] | None = None) -> int:
    environ = os.environ if environ is None else environ
    raw = environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def check_log_level(level: str, source: str) -> str:
    level = level.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{source} must name a logging level, got {level!r}")
    return level


def log_level_from_env(var: str, default: str, environ: Mapping[str, str] | None = None) -> str:
    environ = os.environ if environ is None else environ
    return check_log_level(environ.get(var) or default, var)


@dataclass(frozen=True)
class Config:
    """Runtime limits and logging settings."""

    max_call_depth: int = DEFAULT_MAX_CALL_DEPTH
    max_native_args: int = DEFAULT_MAX_NATIVE_ARGS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        return cls(
            max_call_depth=int_from_env(
                "SCHEMELET_MAX_CALL_DEPTH", DEFAULT_MAX_CALL_DEPTH, environ
            ),
            max_native_args=int_from_env(
                "SCHEMELET_MAX_NATIVE_ARGS", DEFAULT_MAX_NATIVE_ARGS, environ
            ),
            log_level=log_level_from_env("SCHEMELET_LOG_LEVEL", DEFAULT_LOG_LEVEL, environ),
        )
