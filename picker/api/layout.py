"""Public picker layout API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from picker.ui_runtime.geometry import ItemSize, Placement

if TYPE_CHECKING:
    from picker.runtime.config import PickerRuntimeConfig

FocusChangedCallback = Callable[[int], None]


class ItemView(Protocol):
    """Opaque host item view boundary contract."""


@runtime_checkable
class DistanceToFocusListener(Protocol):
    """Optional per-item capability notified with the signed distance to focus."""

    def on_distance_to_focus_changed(self, distance: int) -> None: ...


@runtime_checkable
class HasDistanceListener(Protocol):
    """Item view carrying a distance listener alongside itself."""

    @property
    def distance_listener(self) -> DistanceToFocusListener | None: ...


def resolve_distance_listener(view: ItemView) -> DistanceToFocusListener | None:
    """Return the distance listener a view carries, if any."""
    if isinstance(view, DistanceToFocusListener):
        return view
    if isinstance(view, HasDistanceListener):
        listener = view.distance_listener
        if isinstance(listener, DistanceToFocusListener):
            return listener
    return None


class ViewportAdapter(Protocol):
    """Host container geometry surface consumed by the layout engine."""

    def viewport_height(self) -> int:
        """Return current viewport height in pixels."""

    def measure_view(self, view: ItemView) -> ItemSize:
        """Measure one view and return its decorated size."""

    def layout_view(self, view: ItemView, placement: Placement) -> None:
        """Position a view's decorated bounds."""

    def attach_view(self, view: ItemView) -> None:
        """Attach a view to the container."""

    def detach_view(self, view: ItemView) -> None:
        """Detach a view from the container without reclaiming it."""

    def offset_children_vertical(self, dy: int) -> None:
        """Shift all attached views vertically by dy."""

    def request_layout(self) -> None:
        """Schedule a layout pass on the host."""


class ItemRecycler(Protocol):
    """Host view supply consumed by the layout engine."""

    def item_count(self) -> int:
        """Return total number of data items."""

    def obtain_view(self, index: int) -> ItemView:
        """Return a bound view for index, creating or reusing one."""

    def recycle_view(self, view: ItemView) -> None:
        """Reclaim a view that is no longer needed."""


class PickerLayout(ABC):
    """Public drum picker layout engine contract."""

    @property
    @abstractmethod
    def on_focus_changed(self) -> FocusChangedCallback | None:
        """Return focus change callback."""

    @on_focus_changed.setter
    @abstractmethod
    def on_focus_changed(self, callback: FocusChangedCallback | None) -> None:
        """Set focus change callback."""

    @abstractmethod
    def layout_children(self) -> None:
        """Run one fill pass, or clear everything when there are no items."""

    @abstractmethod
    def on_scroll(self, dy: int) -> int:
        """Clamp, apply and fill for a scroll delta; return the applied delta."""

    @abstractmethod
    def request_scroll_to_index(self, index: int) -> None:
        """Center index on the focus line at the next layout pass."""

    @abstractmethod
    def focused_index(self) -> int:
        """Return focused item index or NO_FOCUS."""

    @abstractmethod
    def focus_line(self) -> int:
        """Return the focus line for the current viewport height."""

    @abstractmethod
    def find_view_in_focus(self) -> ItemView | None:
        """Return the attached view whose interval holds the focus line."""

    @abstractmethod
    def placement_of(self, view: ItemView) -> Placement:
        """Return placement of an attached view."""

    @abstractmethod
    def placements(self) -> tuple[Placement, ...]:
        """Return attached placements in attach order."""

    @abstractmethod
    def save_state(self) -> bytes:
        """Export the persisted layout state blob."""

    @abstractmethod
    def restore_state(self, blob: bytes) -> None:
        """Import a persisted layout state blob and request layout."""


class SnapHelper(ABC):
    """Public snap target contract used by host fling/release logic."""

    @abstractmethod
    def calculate_distance_to_final_snap(self, target_view: ItemView) -> tuple[int, int]:
        """Return (dx, dy) that centers target_view on the focus line."""

    @abstractmethod
    def find_snap_view(self) -> ItemView | None:
        """Return the view to settle on, if any."""

    @abstractmethod
    def find_target_snap_position(self, velocity_x: int, velocity_y: int) -> int:
        """Return preferred target index for a fling, or NO_FOCUS."""


def create_picker_layout(
    viewport: ViewportAdapter,
    recycler: ItemRecycler,
    *,
    on_focus_changed: FocusChangedCallback | None = None,
    config: PickerRuntimeConfig | None = None,
) -> PickerLayout:
    """Create default picker layout engine implementation."""
    from picker.runtime.layout_engine import RuntimePickerLayout

    return RuntimePickerLayout(
        viewport, recycler, on_focus_changed=on_focus_changed, config=config
    )


def create_snap_helper(layout: PickerLayout) -> SnapHelper:
    """Create default snap helper bound to a layout engine."""
    from picker.runtime.snap_engine import RuntimeSnapHelper

    return RuntimeSnapHelper(layout)
