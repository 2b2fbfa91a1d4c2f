"""Pure picker geometry helpers."""

from picker.ui_runtime.focus_effects import FadeScaleListener, FocusEffect, focus_effect_for_distance
from picker.ui_runtime.geometry import (
    NO_FOCUS,
    ItemSize,
    Placement,
    distance_to_focus,
    focus_line_for,
)
from picker.ui_runtime.list_viewport import find_focused_placement, is_contiguous
from picker.ui_runtime.scroll import ScrollOutcome, clamp_scroll_delta
from picker.ui_runtime.snap import snap_distance

__all__ = [
    "NO_FOCUS",
    "FadeScaleListener",
    "FocusEffect",
    "ItemSize",
    "Placement",
    "ScrollOutcome",
    "clamp_scroll_delta",
    "distance_to_focus",
    "find_focused_placement",
    "focus_effect_for_distance",
    "focus_line_for",
    "is_contiguous",
    "snap_distance",
]
