"""Pure snap math for settling on the focus line."""

from __future__ import annotations

from picker.ui_runtime.geometry import Placement, distance_to_focus


def snap_distance(placement: Placement, focus_line: int) -> tuple[int, int]:
    """Return (dx, dy) that brings a placement's midpoint onto the focus line."""
    return 0, distance_to_focus(placement, focus_line)
