"""Focus and contiguity helpers over attached placements."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from picker.ui_runtime.geometry import Placement


def find_focused_placement(placements: Iterable[Placement], focus_line: int) -> Placement | None:
    """Return the first placement, in attach order, whose interval holds the focus line."""
    for placement in placements:
        if placement.contains_line(focus_line):
            return placement
    return None


def is_contiguous(placements: Sequence[Placement]) -> bool:
    """Return whether every visible i, i+1 pair shares its boundary."""
    ordered = sorted(placements, key=lambda item: item.index)
    for upper, lower in zip(ordered, ordered[1:]):
        if lower.index == upper.index + 1 and upper.bottom != lower.top:
            return False
    return True
