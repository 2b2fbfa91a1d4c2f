"""Picker serialization helpers."""

from picker.diagnostics.json_codec import dumps_bytes, dumps_text, loads

__all__ = ["dumps_bytes", "dumps_text", "loads"]
