from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from picker.diagnostics.json_codec import loads
from picker.runtime.host import HeadlessPickerHost, HostSnapshot
from tools.picker_sim import _render_text, main


def test_text_output_lists_each_step(capsys) -> None:
    assert main(["--items", "5", "--viewport", "500", "--drag", "150"]) == 0
    out = capsys.readouterr().out
    assert "[layout] focused=0 focus_line=250 contiguous=True" in out
    assert "[drag 150 applied=150 settle=-50] focused=1" in out


def test_json_output_with_scroll_and_recreate(capsys) -> None:
    code = main(
        ["--items", "40", "--scroll-to", "7", "--drag", "-30", "--recreate", "--format", "json"]
    )
    assert code == 0
    steps = loads(capsys.readouterr().out)
    assert [step["step"] for step in steps][0] == "layout"
    assert steps[1]["focused_index"] == 7
    assert steps[-1]["step"] == "recreate"
    assert steps[-1]["focused_index"] == 7
    assert all(step["contiguous"] for step in steps)


def test_text_render_orders_rows_by_index() -> None:
    host = HeadlessPickerHost(item_count=40, viewport_height=500)
    host.flush_layout()
    host.scroll_to(20)
    snapshot = host.snapshot()
    assert set(snapshot) == HostSnapshot.__required_keys__
    rows = _render_text("scroll_to 20", snapshot).splitlines()[1:]
    assert [int(row.split()[1]) for row in rows] == [17, 18, 19, 20, 21, 22]
    assert rows[0].split()[2:] == ["top=", "-100", "bottom=", "0"]
