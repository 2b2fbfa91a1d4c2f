"""Headless in-memory host for driving a picker layout without a UI toolkit."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypedDict

from picker.api.layout import FocusChangedCallback
from picker.runtime.config import PickerRuntimeConfig
from picker.runtime.layout_engine import RuntimePickerLayout
from picker.runtime.snap_engine import RuntimeSnapHelper
from picker.ui_runtime.focus_effects import DEFAULT_FALLOFF_PX, FadeScaleListener
from picker.ui_runtime.geometry import NO_FOCUS, ItemSize, Placement
from picker.ui_runtime.list_viewport import is_contiguous

_LOG = logging.getLogger("picker.host")

ItemHeight = int | Callable[[int], int]


class PlacementRow(TypedDict):
    index: int
    top: int
    bottom: int


class HostSnapshot(TypedDict):
    focused_index: int
    focus_line: int
    contiguous: bool
    placements: list[PlacementRow]


class HeadlessItemView:
    """In-memory item view bound to one data index at a time."""

    def __init__(self, view_id: int, falloff: int = DEFAULT_FALLOFF_PX) -> None:
        self.view_id = view_id
        self.index = NO_FOCUS
        self.bounds: Placement | None = None
        self.attached = False
        self.distance_listener = FadeScaleListener(falloff)

    def __repr__(self) -> str:
        return f"HeadlessItemView(id={self.view_id}, index={self.index}, bounds={self.bounds})"


class HeadlessPickerHost:
    """Scroll container stand-in implementing viewport and recycler contracts."""

    def __init__(
        self,
        *,
        item_count: int,
        viewport_height: int,
        item_height: ItemHeight = 100,
        item_width: int = 320,
        config: PickerRuntimeConfig | None = None,
        on_focus_changed: FocusChangedCallback | None = None,
    ) -> None:
        self._item_count = item_count
        self._viewport_height = viewport_height
        self._item_height = item_height
        self._item_width = item_width
        self._config = config
        self._on_focus_changed = on_focus_changed
        self._pool: list[HeadlessItemView] = []
        self._attached: list[HeadlessItemView] = []
        self._next_view_id = 1
        self._layout_pending = False
        self.layout_requests = 0
        self.focus_changes: list[int] = []
        self.layout = self._create_layout()
        self.snap = RuntimeSnapHelper(self.layout)
        self.request_layout()

    # ViewportAdapter

    def viewport_height(self) -> int:
        return self._viewport_height

    def measure_view(self, view: HeadlessItemView) -> ItemSize:
        height = self._item_height(view.index) if callable(self._item_height) else self._item_height
        return ItemSize(width=self._item_width, height=int(height))

    def layout_view(self, view: HeadlessItemView, placement: Placement) -> None:
        view.bounds = placement

    def attach_view(self, view: HeadlessItemView) -> None:
        view.attached = True
        self._attached.append(view)

    def detach_view(self, view: HeadlessItemView) -> None:
        view.attached = False
        if view in self._attached:
            self._attached.remove(view)

    def offset_children_vertical(self, dy: int) -> None:
        for view in self._attached:
            if view.bounds is not None:
                view.bounds = view.bounds.shifted(dy)

    def request_layout(self) -> None:
        self.layout_requests += 1
        self._layout_pending = True

    # ItemRecycler

    def item_count(self) -> int:
        return self._item_count

    def obtain_view(self, index: int) -> HeadlessItemView:
        if self._pool:
            view = self._pool.pop()
        else:
            view = HeadlessItemView(self._next_view_id)
            self._next_view_id += 1
        view.index = index
        return view

    def recycle_view(self, view: HeadlessItemView) -> None:
        view.index = NO_FOCUS
        view.bounds = None
        view.attached = False
        self._pool.append(view)

    # host operations

    @property
    def created_views(self) -> int:
        return self._next_view_id - 1

    @property
    def attached_views(self) -> tuple[HeadlessItemView, ...]:
        return tuple(self._attached)

    def flush_layout(self) -> None:
        """Run the scheduled layout pass, if any."""
        if not self._layout_pending:
            return
        self._layout_pending = False
        self.layout.layout_children()

    def set_item_count(self, item_count: int) -> None:
        self._item_count = max(0, int(item_count))
        self.request_layout()
        self.flush_layout()

    def resize(self, viewport_height: int) -> None:
        self._viewport_height = int(viewport_height)
        self.request_layout()
        self.flush_layout()

    def drag(self, dy: int) -> int:
        """Scroll content by dy and return the delta actually applied."""
        self.flush_layout()
        return self.layout.on_scroll(int(dy))

    def release(self) -> int:
        """Settle on the snap view; return the applied settle delta."""
        self.flush_layout()
        dy = self.snap.settle_offset()
        if dy == 0:
            return 0
        return self.layout.on_scroll(dy)

    def scroll_to(self, index: int) -> None:
        self.layout.request_scroll_to_index(index)
        self.flush_layout()

    def recreate(self) -> None:
        """Tear down the layout engine and rebuild it from its saved state."""
        blob = self.layout.save_state()
        for view in tuple(self._attached):
            self.detach_view(view)
            self.recycle_view(view)
        self.layout = self._create_layout()
        self.snap = RuntimeSnapHelper(self.layout)
        self.layout.restore_state(blob)
        _LOG.debug("layout_recreated blob_bytes=%d", len(blob))
        self.flush_layout()

    def snapshot(self) -> HostSnapshot:
        placements = self.layout.placements()
        return {
            "focused_index": self.layout.focused_index(),
            "focus_line": self.layout.focus_line(),
            "contiguous": is_contiguous(placements),
            "placements": [
                {"index": p.index, "top": p.top, "bottom": p.bottom} for p in placements
            ],
        }

    def _create_layout(self) -> RuntimePickerLayout:
        return RuntimePickerLayout(
            self, self, on_focus_changed=self._record_focus, config=self._config
        )

    def _record_focus(self, index: int) -> None:
        self.focus_changes.append(index)
        if self._on_focus_changed is not None:
            self._on_focus_changed(index)
