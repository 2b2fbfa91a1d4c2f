"""Drum picker layout and snap-scrolling engine."""

from picker.api.layout import create_picker_layout, create_snap_helper
from picker.ui_runtime.geometry import NO_FOCUS

__all__ = ["NO_FOCUS", "create_picker_layout", "create_snap_helper"]
