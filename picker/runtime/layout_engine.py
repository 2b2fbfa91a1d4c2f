"""Drum picker layout engine: anchor-based fill, recycling and focus tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from picker.api.layout import (
    DistanceToFocusListener,
    FocusChangedCallback,
    ItemRecycler,
    ItemView,
    PickerLayout,
    ViewportAdapter,
    resolve_distance_listener,
)
from picker.runtime.config import PickerRuntimeConfig, get_runtime_config
from picker.runtime.errors import (
    InconsistentGeometryError,
    InvalidIndexError,
    UnknownViewError,
    log_degraded,
)
from picker.runtime.layout_state import LayoutState, decode_layout_state, encode_layout_state
from picker.ui_runtime.geometry import (
    NO_FOCUS,
    ItemSize,
    Placement,
    distance_to_focus,
    focus_line_for,
)
from picker.ui_runtime.list_viewport import find_focused_placement
from picker.ui_runtime.scroll import clamp_scroll_delta

_LOG = logging.getLogger("picker.layout")


@dataclass(slots=True)
class _AttachedChild:
    view: ItemView
    placement: Placement
    listener: DistanceToFocusListener | None


class RuntimePickerLayout(PickerLayout):
    """Vertical list where the item nearest the viewport center is focused.

    The first and last items can reach the focus line but never pass it.
    Every fill pass scraps all attached children, lays out forward then
    backward from one anchor, updates the focused index, notifies every
    touched view of its distance to focus, and reclaims unused scrap.
    """

    def __init__(
        self,
        viewport: ViewportAdapter,
        recycler: ItemRecycler,
        *,
        on_focus_changed: FocusChangedCallback | None = None,
        config: PickerRuntimeConfig | None = None,
    ) -> None:
        self._viewport = viewport
        self._recycler = recycler
        self._on_focus_changed = on_focus_changed
        self._config = config or get_runtime_config()
        self._state = LayoutState()
        self._children: list[_AttachedChild] = []
        self._scrap: list[_AttachedChild] = []

    @property
    def on_focus_changed(self) -> FocusChangedCallback | None:
        return self._on_focus_changed

    @on_focus_changed.setter
    def on_focus_changed(self, callback: FocusChangedCallback | None) -> None:
        self._on_focus_changed = callback

    @property
    def state(self) -> LayoutState:
        return self._state

    def focus_line(self) -> int:
        return focus_line_for(self._viewport.viewport_height())

    def focused_index(self) -> int:
        return self._state.focused_index

    def placements(self) -> tuple[Placement, ...]:
        return tuple(child.placement for child in self._children)

    def attached_views(self) -> tuple[ItemView, ...]:
        return tuple(child.view for child in self._children)

    def placement_of(self, view: ItemView) -> Placement:
        for child in self._children:
            if child.view is view:
                return child.placement
        raise UnknownViewError(f"view is not attached: {view!r}")

    def find_view_in_focus(self) -> ItemView | None:
        focus_line = self.focus_line()
        for child in self._children:
            if child.placement.contains_line(focus_line):
                return child.view
        return None

    def request_scroll_to_index(self, index: int) -> None:
        if index < 0:
            raise InvalidIndexError(index, self._recycler.item_count())
        self._state.pending_scroll_target = index
        self._viewport.request_layout()

    def save_state(self) -> bytes:
        return encode_layout_state(self._state)

    def restore_state(self, blob: bytes) -> None:
        restored = decode_layout_state(blob)
        pending = self._state.pending_scroll_target
        if pending == NO_FOCUS:
            # restore last position
            pending = restored.focused_index
        restored.pending_scroll_target = pending
        self._state = restored
        self._viewport.request_layout()

    def layout_children(self) -> None:
        item_count = self._recycler.item_count()
        if item_count <= 0:
            self._clear()
            return
        self._fill(item_count)

    def on_scroll(self, dy: int) -> int:
        outcome = clamp_scroll_delta(
            dy, self.placements(), self._recycler.item_count(), self.focus_line()
        )
        delta = outcome.applied
        if outcome.clamped and self._config.fill_trace_enabled:
            _LOG.debug("scroll_clamped requested=%d applied=%d", dy, delta)
        if delta != 0:
            self._viewport.offset_children_vertical(-delta)
            for child in self._children:
                child.placement = child.placement.shifted(-delta)
        self.layout_children()
        return delta

    def _clear(self) -> None:
        for child in self._children:
            self._viewport.detach_view(child.view)
            self._recycler.recycle_view(child.view)
        self._children.clear()
        self._state.reset()

    def _fill(self, item_count: int) -> None:
        focus_line = self.focus_line()
        viewport_height = self._viewport.viewport_height()
        anchor = self._select_anchor(item_count, focus_line)
        anchor_top = anchor.placement.top
        anchor_index = anchor.placement.index
        self._scrap_attached()
        self._fill_down(anchor_top, anchor_index, item_count, viewport_height, focus_line)
        self._fill_up(anchor_top, anchor_index, focus_line)
        self._save_focus_position(focus_line)
        for child in self._scrap:
            self._notify_distance(child, focus_line)
        recycled = len(self._scrap)
        self._recycle_scrap()
        if self._config.fill_trace_enabled:
            _LOG.debug(
                "fill_pass anchor=%d anchor_top=%d attached=%d recycled=%d focused=%d",
                anchor_index,
                anchor_top,
                len(self._children),
                recycled,
                self._state.focused_index,
            )

    def _select_anchor(self, item_count: int, focus_line: int) -> _AttachedChild:
        pending = self._state.pending_scroll_target
        if pending != NO_FOCUS:
            self._state.pending_scroll_target = NO_FOCUS
            index = self._checked_index(pending, item_count, source="pending_scroll_target")
            return self._create_anchor(index, focus_line)
        if not self._children:
            return self._create_anchor(0, focus_line)
        first = self._children[0]
        if 0 <= first.placement.index < item_count:
            return first
        index = self._checked_index(first.placement.index, item_count, source="attached_anchor")
        return self._create_anchor(index, focus_line)

    def _create_anchor(self, index: int, focus_line: int) -> _AttachedChild:
        view, _ = self._obtain(index)
        self._viewport.attach_view(view)
        size = self._measure(view, index) or ItemSize(width=0, height=0)
        top = focus_line - size.height // 2
        placement = Placement(index, top, top + size.height, size.width)
        self._viewport.layout_view(view, placement)
        child = _AttachedChild(view, placement, resolve_distance_listener(view))
        self._children.append(child)
        return child

    def _scrap_attached(self) -> None:
        for child in self._children:
            self._viewport.detach_view(child.view)
        self._scrap.extend(self._children)
        self._children = []

    def _fill_down(
        self,
        anchor_top: int,
        anchor_index: int,
        item_count: int,
        viewport_height: int,
        focus_line: int,
    ) -> None:
        top = anchor_top
        index = anchor_index
        while top < viewport_height and index < item_count:
            view, scrapped = self._obtain(index)
            size = self._measure(view, index)
            if size is None:
                self._discard(view, scrapped)
                index += 1
                continue
            self._viewport.attach_view(view)
            placement = Placement(index, top, top + size.height, size.width)
            self._place(view, placement, focus_line)
            top = placement.bottom
            index += 1

    def _fill_up(self, anchor_top: int, anchor_index: int, focus_line: int) -> None:
        bottom = anchor_top
        index = anchor_index - 1
        while index >= 0:
            view, scrapped = self._obtain(index)
            size = self._measure(view, index)
            if size is None:
                self._discard(view, scrapped)
                index -= 1
                continue
            top = bottom - size.height
            if top + size.height < 0:
                # fully above the viewport; never attached
                self._discard(view, scrapped)
                break
            self._viewport.attach_view(view)
            self._place(view, Placement(index, top, bottom, size.width), focus_line)
            bottom = top
            index -= 1

    def _place(self, view: ItemView, placement: Placement, focus_line: int) -> None:
        self._viewport.layout_view(view, placement)
        child = _AttachedChild(view, placement, resolve_distance_listener(view))
        self._children.append(child)
        self._notify_distance(child, focus_line)

    def _obtain(self, index: int) -> tuple[ItemView, _AttachedChild | None]:
        for position, child in enumerate(self._scrap):
            if child.placement.index == index:
                del self._scrap[position]
                return child.view, child
        return self._recycler.obtain_view(index), None

    def _discard(self, view: ItemView, scrapped: _AttachedChild | None) -> None:
        # scrap views still get their final distance before reclaim
        if scrapped is not None:
            self._scrap.append(scrapped)
        else:
            self._recycler.recycle_view(view)

    def _measure(self, view: ItemView, index: int) -> ItemSize | None:
        size = self._viewport.measure_view(view)
        if size.height > 0:
            return size
        if self._config.strict_checks:
            raise InconsistentGeometryError(index, size.height)
        log_degraded(_LOG, "item_skipped_non_positive_height index=%d height=%d", index, size.height)
        return None

    def _checked_index(self, index: int, item_count: int, *, source: str) -> int:
        if 0 <= index < item_count:
            return index
        if self._config.strict_checks:
            raise InvalidIndexError(index, item_count)
        clamped = min(max(index, 0), item_count - 1)
        log_degraded(
            _LOG,
            "anchor_index_clamped source=%s index=%d item_count=%d clamped=%d",
            source,
            index,
            item_count,
            clamped,
        )
        return clamped

    def _save_focus_position(self, focus_line: int) -> None:
        focused = find_focused_placement(self.placements(), focus_line)
        if focused is None:
            return
        previous = self._state.focused_index
        if focused.index == previous:
            return
        self._state.focused_index = focused.index
        _LOG.debug("focus_changed index=%d previous=%d", focused.index, previous)
        if self._on_focus_changed is not None:
            self._on_focus_changed(focused.index)

    def _notify_distance(self, child: _AttachedChild, focus_line: int) -> None:
        if child.listener is not None:
            child.listener.on_distance_to_focus_changed(
                distance_to_focus(child.placement, focus_line)
            )

    def _recycle_scrap(self) -> None:
        for child in self._scrap:
            self._recycler.recycle_view(child.view)
        self._scrap.clear()


PickerLayoutEngine = RuntimePickerLayout
