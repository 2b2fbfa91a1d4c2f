"""Picker geometry primitives."""

from __future__ import annotations

from dataclasses import dataclass

NO_FOCUS = -1


@dataclass(frozen=True, slots=True)
class ItemSize:
    """Decorated measured size of one item view."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Placement:
    """Item index paired with its vertical interval in viewport coordinates."""

    index: int
    top: int
    bottom: int
    width: int = 0

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def midpoint(self) -> int:
        """Return vertical midpoint, truncated to whole pixels."""
        return self.top + self.height // 2

    def contains_line(self, y: int) -> bool:
        """Return whether a horizontal line lies inside the interval, edges included."""
        return self.top <= y <= self.bottom

    def shifted(self, dy: int) -> Placement:
        return Placement(self.index, self.top + dy, self.bottom + dy, self.width)


def focus_line_for(viewport_height: int) -> int:
    """Return the focus line for a viewport height."""
    return int(viewport_height) // 2


def distance_to_focus(placement: Placement, focus_line: int) -> int:
    """Return signed distance from focus line; negative means above it."""
    return placement.midpoint - focus_line
