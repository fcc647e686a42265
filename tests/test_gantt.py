import io

from rich.console import Console

from scheduler_sim.algorithms import schedule
from scheduler_sim.gantt import build_rich_gantt, render_gantt
from scheduler_sim.models import Process


def _result():
    return schedule(
        "fcfs",
        [
            Process("A", arrival_time=0, burst_time=3),
            Process("B", arrival_time=5, burst_time=2),
        ],
    )


def _render(renderable) -> str:
    buf = io.StringIO()
    Console(file=buf, width=100, color_system=None).print(renderable)
    return buf.getvalue()


def test_render_gantt_empty():
    assert render_gantt([]) == "(no execution)"


def test_render_gantt_proportional_segments():
    text = render_gantt(_result().timeline, width=14)
    lines = text.splitlines()
    assert lines[0] == "Gantt Chart:"
    assert lines[1] == "|======....====|"
    assert lines[2].split() == ["A", "B"]
    assert lines[3].split() == ["0", "3", "5", "7"]


def test_render_gantt_tiny_slices_stay_visible():
    res = schedule(
        "fcfs",
        [
            Process("A", arrival_time=0, burst_time=100),
            Process("B", arrival_time=0, burst_time=1),
        ],
    )
    line = render_gantt(res.timeline, width=20).splitlines()[1]
    assert line == "|" + "=" * 21 + "|"


def test_rich_gantt_empty():
    panel, marks = build_rich_gantt([])
    assert marks == ""
    assert "No execution" in _render(panel)


def test_rich_gantt_cursor():
    panel, marks = build_rich_gantt(_result().timeline, current_time=5, width=14)
    out = _render(panel)
    assert "^" in out
    assert "A" in out and "B" in out
    assert marks.split() == ["0", "3", "5", "7"]


def test_rich_gantt_without_cursor():
    panel, _ = build_rich_gantt(_result().timeline)
    assert "^" not in _render(panel)
