"""Snap target selection for settling a drum picker on its focus line."""

from __future__ import annotations

import logging

from picker.api.layout import ItemView, PickerLayout, SnapHelper
from picker.ui_runtime.geometry import NO_FOCUS
from picker.ui_runtime.snap import snap_distance

_LOG = logging.getLogger("picker.snap")


class RuntimeSnapHelper(SnapHelper):
    """Snap helper that always settles on the item holding the focus line."""

    def __init__(self, layout: PickerLayout) -> None:
        self._layout = layout

    def calculate_distance_to_final_snap(self, target_view: ItemView) -> tuple[int, int]:
        placement = self._layout.placement_of(target_view)
        return snap_distance(placement, self._layout.focus_line())

    def find_snap_view(self) -> ItemView | None:
        return self._layout.find_view_in_focus()

    def find_target_snap_position(self, velocity_x: int, velocity_y: int) -> int:
        # fling velocity never selects a different item
        return NO_FOCUS

    def settle_offset(self) -> int:
        """Return vertical scroll needed to center the snap view, 0 when none."""
        view = self.find_snap_view()
        if view is None:
            return 0
        _, dy = self.calculate_distance_to_final_snap(view)
        _LOG.debug("settle_offset index=%d dy=%d", self._layout.placement_of(view).index, dy)
        return dy


PickerSnapHelper = RuntimeSnapHelper
