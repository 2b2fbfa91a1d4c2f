from picker.ui_runtime.geometry import Placement
from picker.ui_runtime.scroll import clamp_scroll_delta


def _column(*indices: int, top: int = 200, height: int = 100) -> list[Placement]:
    return [
        Placement(index, top + offset * height, top + (offset + 1) * height)
        for offset, index in enumerate(indices)
    ]


def test_clamp_stops_first_item_on_focus_line() -> None:
    outcome = clamp_scroll_delta(-1000, _column(0, 1, 2), item_count=5, focus_line=250)
    assert outcome.applied == 0
    assert outcome.clamped


def test_clamp_allows_partial_move_toward_first_item() -> None:
    placements = _column(0, 1, 2, 3, top=50)
    outcome = clamp_scroll_delta(-500, placements, item_count=5, focus_line=250)
    assert outcome.applied == 100 - 250
    assert clamp_scroll_delta(-30, placements, item_count=5, focus_line=250).applied == -30


def test_clamp_stops_last_item_on_focus_line() -> None:
    placements = _column(2, 3, 4, top=0)
    outcome = clamp_scroll_delta(400, placements, item_count=5, focus_line=250)
    assert outcome.applied == 0
    small = clamp_scroll_delta(10, _column(2, 3, 4, top=100), item_count=5, focus_line=250)
    assert small.applied == 10


def test_clamp_passes_delta_through_away_from_ends() -> None:
    placements = _column(3, 4, 5)
    assert clamp_scroll_delta(-75, placements, item_count=10, focus_line=250).applied == -75
    assert clamp_scroll_delta(75, placements, item_count=10, focus_line=250).applied == 75
    assert clamp_scroll_delta(0, _column(0), item_count=1, focus_line=250).applied == 0


def test_clamp_is_noop_without_placements() -> None:
    outcome = clamp_scroll_delta(120, [], item_count=3, focus_line=250)
    assert outcome.applied == 0
    assert outcome.requested == 120
