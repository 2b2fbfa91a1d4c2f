"""Picker exception taxonomy and degradation logging."""

from __future__ import annotations

import logging


class PickerError(Exception):
    """Base class for picker layout failures."""


class InvalidIndexError(PickerError, IndexError):
    """Anchor or pending scroll target outside ``[0, item_count)``."""

    def __init__(self, index: int, item_count: int) -> None:
        super().__init__(f"item index {index} outside [0, {item_count})")
        self.index = index
        self.item_count = item_count


class InconsistentGeometryError(PickerError, ValueError):
    """Viewport adapter reported a non-positive measured height."""

    def __init__(self, index: int, height: int) -> None:
        super().__init__(f"item {index} measured non-positive height {height}")
        self.index = index
        self.height = height


class InvalidStateBlobError(PickerError, ValueError):
    """Persisted layout state could not be decoded."""


class UnknownViewError(PickerError, LookupError):
    """View is not attached to the layout engine."""


def log_degraded(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.WARNING,
) -> None:
    """Emit observability for a violation tolerated outside strict mode."""
    logger.log(level, message, *args)
