from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from picker.diagnostics.json_codec import dumps_text
from picker.runtime.config import load_runtime_config
from picker.runtime.host import HeadlessPickerHost, HostSnapshot
from picker.runtime.logging import setup_picker_logging


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a drum picker in a headless viewport")
    parser.add_argument("--items", type=int, default=40, help="Number of data items")
    parser.add_argument("--item-height", type=int, default=100, help="Height of every item in px")
    parser.add_argument("--viewport", type=int, default=500, help="Viewport height in px")
    parser.add_argument(
        "--drag",
        type=int,
        action="append",
        default=[],
        help="Drag delta in px; repeat for several drags, each followed by a release",
    )
    parser.add_argument("--scroll-to", type=int, default=None, help="Center this index first")
    parser.add_argument("--recreate", action="store_true", help="Recreate the layout at the end")
    parser.add_argument("--format", choices=("text", "json"), default="text")
    return parser.parse_args(argv)


def _render_text(step: str, snapshot: HostSnapshot) -> str:
    lines = [
        f"[{step}] focused={snapshot['focused_index']} focus_line={snapshot['focus_line']} "
        f"contiguous={snapshot['contiguous']}"
    ]
    for item in sorted(snapshot["placements"], key=lambda p: p["index"]):
        lines.append(f"  #{item['index']:>4}  top={item['top']:>6}  bottom={item['bottom']:>6}")
    return "\n".join(lines)


def run_simulation(args: argparse.Namespace) -> list[tuple[str, HostSnapshot]]:
    host = HeadlessPickerHost(
        item_count=args.items,
        viewport_height=args.viewport,
        item_height=args.item_height,
    )
    host.flush_layout()
    steps: list[tuple[str, HostSnapshot]] = [("layout", host.snapshot())]
    if args.scroll_to is not None:
        host.scroll_to(args.scroll_to)
        steps.append((f"scroll_to {args.scroll_to}", host.snapshot()))
    for dy in args.drag:
        applied = host.drag(dy)
        settled = host.release()
        steps.append((f"drag {dy} applied={applied} settle={settled}", host.snapshot()))
    if args.recreate:
        host.recreate()
        steps.append(("recreate", host.snapshot()))
    return steps


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_picker_logging(load_runtime_config())
    steps = run_simulation(args)
    if args.format == "json":
        print(dumps_text([{"step": name, **snapshot} for name, snapshot in steps], pretty=True))
    else:
        for name, snapshot in steps:
            print(_render_text(name, snapshot))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
