"""Persisted layout state and its blob codec."""

from __future__ import annotations

from dataclasses import dataclass

import orjson

from picker.diagnostics.json_codec import dumps_bytes, loads
from picker.runtime.errors import InvalidStateBlobError
from picker.ui_runtime.geometry import NO_FOCUS

STATE_BLOB_VERSION = 1


@dataclass(slots=True)
class LayoutState:
    """State that survives layout engine recreation.

    Only ``focused_index`` is persisted. ``pending_scroll_target`` lives for
    the lifetime of one engine and is consumed by the next fill pass.
    """

    pending_scroll_target: int = NO_FOCUS
    focused_index: int = 0

    def reset(self) -> None:
        self.pending_scroll_target = NO_FOCUS
        self.focused_index = NO_FOCUS


def encode_layout_state(state: LayoutState) -> bytes:
    """Serialize the persisted part of a layout state."""
    return dumps_bytes({"version": STATE_BLOB_VERSION, "focused_index": int(state.focused_index)})


def decode_layout_state(blob: bytes | str) -> LayoutState:
    """Decode a blob into a fresh state with no pending target."""
    try:
        payload = loads(blob)
    except orjson.JSONDecodeError as exc:
        raise InvalidStateBlobError(f"layout state blob is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise InvalidStateBlobError("layout state blob must be a JSON object")
    version = payload.get("version")
    if version != STATE_BLOB_VERSION:
        raise InvalidStateBlobError(f"unsupported layout state version: {version!r}")
    focused = payload.get("focused_index")
    if isinstance(focused, bool) or not isinstance(focused, int) or focused < NO_FOCUS:
        raise InvalidStateBlobError(f"invalid focused_index: {focused!r}")
    return LayoutState(pending_scroll_target=NO_FOCUS, focused_index=focused)
