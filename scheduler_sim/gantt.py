from __future__ import annotations

from typing import List, Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice
from .palette import terminal_color

DEFAULT_WIDTH = 60


def _segment_widths(slices: Sequence[ScheduledSlice], width: int) -> List[int]:
    # Proportional to duration over the whole span, never narrower than one cell.
    total = slices[-1].end_time - slices[0].start_time
    return [max(1, round(sl.duration * width / total)) for sl in slices]


def _time_marks(slices: Sequence[ScheduledSlice], widths: Sequence[int]) -> str:
    cells = [" "] * (sum(widths) + 6)

    def put(pos: int, value: int) -> None:
        text = str(value)
        end = pos + len(text)
        if pos > 0 and cells[pos - 1] != " ":
            return
        if any(c != " " for c in cells[pos:end]):
            return
        cells[pos:end] = list(text)

    pos = 0
    put(pos, slices[0].start_time)
    for sl, w in zip(slices, widths):
        pos += w
        put(pos, sl.end_time)

    return "".join(cells).rstrip()


def _cursor_offset(
    slices: Sequence[ScheduledSlice], widths: Sequence[int], current_time: int
) -> Optional[int]:
    pos = 0
    for sl, w in zip(slices, widths):
        if sl.start_time <= current_time < sl.end_time:
            return pos + int((current_time - sl.start_time) * w / sl.duration)
        pos += w
    return None


def render_gantt(slices: Sequence[ScheduledSlice], width: int = DEFAULT_WIDTH) -> str:
    """
    Plain-text Gantt chart: ``=`` for execution, ``.`` for idle time.
    """
    if not slices:
        return "(no execution)"

    widths = _segment_widths(slices, width)

    line = "|"
    labels = " "
    for sl, w in zip(slices, widths):
        if sl.is_idle:
            line += "." * w
            labels += " " * w
        else:
            line += "=" * w
            labels += sl.name[:w].ljust(w)
    line += "|"

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels.rstrip(),
            _time_marks(slices, widths),
        ]
    )


def build_rich_gantt(
    slices: Sequence[ScheduledSlice],
    current_time: Optional[int] = None,
    width: int = DEFAULT_WIDTH,
) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.

    When ``current_time`` falls inside the chart, the active slice is
    labelled in bold yellow and a cursor row points at that instant.
    """
    if not slices:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    widths = _segment_widths(slices, width)

    timeline = Text()
    labels = Text()

    for sl, w in zip(slices, widths):
        active = current_time is not None and sl.start_time <= current_time < sl.end_time
        if sl.is_idle:
            timeline.append("." * w, style=terminal_color(sl.color, default="dim"))
            labels.append(" " * w)
            continue

        color = terminal_color(sl.color)
        timeline.append(" " * w, style=f"on {color}")
        labels.append(sl.name[:w].ljust(w), style="bold yellow" if active else "bold")

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    if current_time is not None:
        offset = _cursor_offset(slices, widths, current_time)
        if offset is not None:
            table.add_row(Text(" " * offset + "^", style="bold yellow"))

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, _time_marks(slices, widths)
