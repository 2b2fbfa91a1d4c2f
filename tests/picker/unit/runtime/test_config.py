from __future__ import annotations

from picker.runtime.config import (
    get_runtime_config,
    load_runtime_config,
    set_runtime_config,
)
from tests.picker.conftest import make_config


def test_load_runtime_config_defaults() -> None:
    cfg = load_runtime_config(env={})
    assert cfg.strict_checks is True
    assert cfg.fill_trace_enabled is False
    assert cfg.logging.level_name == "INFO"
    assert cfg.logging.console_format == "text"
    assert cfg.logging.file_path is None
    assert cfg.logging.file_format == "json"


def test_load_runtime_config_parses_env_mapping() -> None:
    cfg = load_runtime_config(
        env={
            "PICKER_STRICT_CHECKS": "off",
            "PICKER_FILL_TRACE": "yes",
            "LOG_LEVEL": "warning",
            "PICKER_LOG_FORMAT": "JSON",
            "PICKER_LOG_FILE": "logs/picker.log",
            "PICKER_LOG_FILE_FORMAT": "text",
        }
    )
    assert cfg.strict_checks is False
    assert cfg.fill_trace_enabled is True
    assert cfg.debug.log_level == "WARNING"
    assert cfg.logging.console_format == "json"
    assert cfg.logging.file_path == "logs/picker.log"
    assert cfg.logging.file_format == "text"


def test_unknown_values_fall_back_to_defaults() -> None:
    cfg = load_runtime_config(
        env={"PICKER_STRICT_CHECKS": "maybe", "PICKER_LOG_FORMAT": "xml", "PICKER_LOG_LEVEL": " "}
    )
    assert cfg.strict_checks is True
    assert cfg.logging.console_format == "text"
    assert cfg.logging.level_name == "INFO"


def test_picker_log_level_overrides_generic_level() -> None:
    cfg = load_runtime_config(env={"LOG_LEVEL": "ERROR", "PICKER_LOG_LEVEL": "debug"})
    assert cfg.logging.level_name == "DEBUG"


def test_set_runtime_config_is_returned_by_get() -> None:
    previous = get_runtime_config()
    custom = make_config(strict=False)
    try:
        set_runtime_config(custom)
        assert get_runtime_config() is custom
    finally:
        set_runtime_config(previous)
