from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import pytest

from picker.api.logging import PickerLoggingConfig
from picker.runtime.config import PickerRuntimeConfig
from picker.runtime.debug_config import DebugConfig
from picker.ui_runtime.geometry import NO_FOCUS, ItemSize, Placement


def make_config(*, strict: bool = True, trace: bool = False) -> PickerRuntimeConfig:
    return PickerRuntimeConfig(
        debug=DebugConfig(strict_checks=strict, fill_trace_enabled=trace, log_level="DEBUG"),
        logging=PickerLoggingConfig(level_name="DEBUG"),
    )


class RecordingListener:
    def __init__(self) -> None:
        self.distances: list[int] = []

    def on_distance_to_focus_changed(self, distance: int) -> None:
        self.distances.append(distance)


@dataclass(eq=False)
class FakeView:
    id: int
    index: int = NO_FOCUS
    bounds: Placement | None = None
    distance_listener: RecordingListener | None = field(default_factory=RecordingListener)


class RecordingHost:
    """Viewport + recycler fake that logs every collaborator call."""

    def __init__(
        self,
        *,
        item_count: int = 5,
        viewport_height: int = 500,
        heights: Callable[[int], int] | None = None,
    ) -> None:
        self.count = item_count
        self.height = viewport_height
        self.heights = heights or (lambda _index: 100)
        self.calls: list[tuple[str, int]] = []
        self.recycled: list[FakeView] = []
        self.layout_requests = 0
        self._next_id = 1

    def viewport_height(self) -> int:
        return self.height

    def measure_view(self, view: FakeView) -> ItemSize:
        return ItemSize(width=320, height=self.heights(view.index))

    def layout_view(self, view: FakeView, placement: Placement) -> None:
        view.bounds = placement
        self.calls.append(("layout", view.index))

    def attach_view(self, view: FakeView) -> None:
        self.calls.append(("attach", view.index))

    def detach_view(self, view: FakeView) -> None:
        self.calls.append(("detach", view.index))

    def offset_children_vertical(self, dy: int) -> None:
        self.calls.append(("offset", dy))

    def request_layout(self) -> None:
        self.layout_requests += 1

    def item_count(self) -> int:
        return self.count

    def obtain_view(self, index: int) -> FakeView:
        view = FakeView(id=self._next_id, index=index)
        self._next_id += 1
        self.calls.append(("obtain", index))
        return view

    def recycle_view(self, view: FakeView) -> None:
        self.calls.append(("recycle", view.index))
        self.recycled.append(view)


@pytest.fixture
def strict_config() -> PickerRuntimeConfig:
    return make_config(strict=True)


@pytest.fixture
def lenient_config() -> PickerRuntimeConfig:
    return make_config(strict=False)
