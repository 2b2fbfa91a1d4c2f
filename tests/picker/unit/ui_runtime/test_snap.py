from picker.ui_runtime.geometry import Placement
from picker.ui_runtime.snap import snap_distance


def test_snap_distance_is_vertical_only() -> None:
    assert snap_distance(Placement(0, 200, 300), 250) == (0, 0)
    assert snap_distance(Placement(0, 180, 280), 250) == (0, -20)
    assert snap_distance(Placement(0, 260, 360), 250) == (0, 60)
