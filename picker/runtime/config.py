"""Centralized runtime configuration for picker layout engines."""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Mapping

from picker.api.logging import PickerLoggingConfig
from picker.runtime.debug_config import DebugConfig, _raw, load_debug_config


@dataclass(frozen=True, slots=True)
class PickerRuntimeConfig:
    debug: DebugConfig
    logging: PickerLoggingConfig = field(default_factory=PickerLoggingConfig)

    @property
    def strict_checks(self) -> bool:
        return self.debug.strict_checks

    @property
    def fill_trace_enabled(self) -> bool:
        return self.debug.fill_trace_enabled


_RUNTIME_CONFIG: ContextVar[PickerRuntimeConfig | None] = ContextVar(
    "picker_runtime_config", default=None
)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_format(raw: str, fallback: str) -> str:
    value = str(raw).strip().lower()
    if value not in {"text", "json"}:
        return fallback
    return value


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> PickerRuntimeConfig:
    debug = load_debug_config(env=env)
    file_path = _text("PICKER_LOG_FILE", "", env=env)
    return PickerRuntimeConfig(
        debug=debug,
        logging=PickerLoggingConfig(
            level_name=debug.log_level,
            console_format=_normalize_format(_text("PICKER_LOG_FORMAT", "text", env=env), "text"),
            file_path=file_path or None,
            file_format=_normalize_format(_text("PICKER_LOG_FILE_FORMAT", "json", env=env), "json"),
        ),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> PickerRuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: PickerRuntimeConfig) -> PickerRuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> PickerRuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "PickerRuntimeConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "set_runtime_config",
]
