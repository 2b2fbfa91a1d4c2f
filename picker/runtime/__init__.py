"""Picker runtime implementations."""

from picker.runtime.config import (
    PickerRuntimeConfig,
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    set_runtime_config,
)
from picker.runtime.errors import (
    InconsistentGeometryError,
    InvalidIndexError,
    InvalidStateBlobError,
    PickerError,
    UnknownViewError,
)
from picker.runtime.host import HeadlessItemView, HeadlessPickerHost
from picker.runtime.layout_engine import RuntimePickerLayout
from picker.runtime.layout_state import LayoutState, decode_layout_state, encode_layout_state
from picker.runtime.snap_engine import RuntimeSnapHelper

__all__ = [
    "HeadlessItemView",
    "HeadlessPickerHost",
    "InconsistentGeometryError",
    "InvalidIndexError",
    "InvalidStateBlobError",
    "LayoutState",
    "PickerError",
    "PickerRuntimeConfig",
    "RuntimePickerLayout",
    "RuntimeSnapHelper",
    "UnknownViewError",
    "decode_layout_state",
    "encode_layout_state",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "set_runtime_config",
]
