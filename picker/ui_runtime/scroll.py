"""Scroll delta clamping at the picker list ends."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from picker.ui_runtime.geometry import Placement


@dataclass(frozen=True, slots=True)
class ScrollOutcome:
    """Result of clamping a requested scroll delta."""

    requested: int
    applied: int

    @property
    def clamped(self) -> bool:
        return self.applied != self.requested


def clamp_scroll_delta(
    dy: int,
    placements: Iterable[Placement],
    item_count: int,
    focus_line: int,
) -> ScrollOutcome:
    """Limit dy so the first and last items can reach but never pass the focus line."""
    top: Placement | None = None
    bottom: Placement | None = None
    for placement in placements:
        if top is None or placement.index < top.index:
            top = placement
        if bottom is None or placement.index > bottom.index:
            bottom = placement
    if top is None or bottom is None:
        return ScrollOutcome(requested=dy, applied=0)

    if dy < 0 and top.index == 0:
        possible = top.midpoint - focus_line
        return ScrollOutcome(requested=dy, applied=possible if possible > dy else dy)
    if dy > 0 and bottom.index == item_count - 1:
        possible = bottom.midpoint - focus_line
        return ScrollOutcome(requested=dy, applied=possible if possible < dy else dy)
    return ScrollOutcome(requested=dy, applied=dy)
