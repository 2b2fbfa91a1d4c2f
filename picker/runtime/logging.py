"""Logging setup scoped to the ``picker`` logger namespace."""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from picker.api.logging import JsonFormatter
from picker.runtime.config import PickerRuntimeConfig, get_runtime_config

PICKER_LOGGER_NAME = "picker"
TRACE_LOGGER_NAMES = ("picker.layout", "picker.snap")

_QUEUE_LISTENER: QueueListener | None = None


def configure_picker_logging(config: PickerRuntimeConfig) -> logging.Logger:
    """Route ``picker.*`` records to a console handler and an optional file.

    Handlers hang off the ``picker`` logger, which stops propagating, so the
    host application's root handlers and level are left alone. With fill
    tracing on, the layout and snap loggers are opened to DEBUG regardless
    of the namespace level.
    """
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None

    settings = config.logging
    logger = logging.getLogger(PICKER_LOGGER_NAME)
    for handler in tuple(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(getattr(logging, settings.level_name.upper(), logging.INFO))
    logger.propagate = False
    trace_level = logging.DEBUG if config.fill_trace_enabled else logging.NOTSET
    for name in TRACE_LOGGER_NAMES:
        logging.getLogger(name).setLevel(trace_level)

    sinks: list[logging.Handler] = [_stream_handler(settings.console_format)]
    if settings.file_path:
        sinks.append(_file_handler(Path(settings.file_path), settings.file_format))

    if len(sinks) == 1:
        logger.addHandler(sinks[0])
        return logger
    # file writes happen off the layout thread
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    logger.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *sinks, respect_handler_level=True)
    _QUEUE_LISTENER.start()
    return logger


def setup_picker_logging(config: PickerRuntimeConfig | None = None) -> None:
    """Configure picker logging unless the process already routes records."""
    if logging.getLogger(PICKER_LOGGER_NAME).handlers or logging.getLogger().handlers:
        return
    configure_picker_logging(config or get_runtime_config())


def _stream_handler(kind: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(_resolve_formatter(kind))
    return handler


def _file_handler(path: Path, kind: str) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_resolve_formatter(kind))
    return handler


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
