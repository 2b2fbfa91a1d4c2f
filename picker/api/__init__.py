"""Public picker API contracts."""

from picker.api.layout import (
    DistanceToFocusListener,
    FocusChangedCallback,
    HasDistanceListener,
    ItemRecycler,
    ItemView,
    PickerLayout,
    SnapHelper,
    ViewportAdapter,
    create_picker_layout,
    create_snap_helper,
    resolve_distance_listener,
)
from picker.api.logging import JsonFormatter, PickerLoggingConfig

__all__ = [
    "DistanceToFocusListener",
    "FocusChangedCallback",
    "HasDistanceListener",
    "ItemRecycler",
    "ItemView",
    "JsonFormatter",
    "PickerLayout",
    "PickerLoggingConfig",
    "SnapHelper",
    "ViewportAdapter",
    "create_picker_layout",
    "create_snap_helper",
    "resolve_distance_listener",
]
