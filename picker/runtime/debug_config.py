"""Picker debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    # unrecognised values keep the default
    return bool(default)


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable picker debug configuration."""

    strict_checks: bool
    fill_trace_enabled: bool
    log_level: str


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with picker-prefixed override; blank values are skipped."""
    for name in ("PICKER_LOG_LEVEL", "LOG_LEVEL"):
        value = _raw(name, env=env)
        if value is not None and value.strip():
            return value.strip().upper()
    return default.strip().upper()


def load_debug_config(*, env: Mapping[str, str] | None = None) -> DebugConfig:
    """Load immutable debug configuration from env vars or an explicit mapping."""
    return DebugConfig(
        strict_checks=_flag("PICKER_STRICT_CHECKS", True, env=env),
        fill_trace_enabled=_flag("PICKER_FILL_TRACE", False, env=env),
        log_level=resolve_log_level_name(env=env),
    )
