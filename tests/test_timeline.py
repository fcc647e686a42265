from scheduler_sim.models import Process
from scheduler_sim.palette import IDLE_COLOR, PROCESS_COLORS, process_color, terminal_color
from scheduler_sim.queues import PendingArrivals, PriorityReadyQueue, ReadyQueue
from scheduler_sim.timeline import TimelineBuilder


def test_builder_tracks_idle_time():
    builder = TimelineBuilder()
    builder.idle_until(0)
    assert builder.slices == []

    builder.idle_until(2)
    builder.run(Process("A", arrival_time=2, burst_time=3, color="red"), 3)
    builder.idle_until(4)  # already past, no slice
    builder.idle_until(6)

    assert [(s.pid, s.start_time, s.end_time) for s in builder.slices] == [
        ("idle", 0, 2),
        ("A", 2, 5),
        ("idle", 5, 6),
    ]
    assert builder.idle_time == 3
    assert builder.current_time == 6
    assert builder.slices[0].color == IDLE_COLOR


def test_pending_arrivals_order_and_admission():
    pending = PendingArrivals(
        [
            Process("late", arrival_time=5, burst_time=1),
            Process("b", arrival_time=1, burst_time=1),
            Process("a", arrival_time=1, burst_time=1),
        ]
    )
    assert pending.next_arrival() == 1
    assert [p.pid for _, p in pending.admit_until(0)] == []
    assert [(i, p.pid) for i, p in pending.admit_until(4)] == [(1, "b"), (2, "a")]
    assert len(pending) == 1
    assert pending.next_arrival() == 5
    list(pending.admit_until(5))
    assert pending.next_arrival() is None


def test_ready_queue_is_fifo():
    q = ReadyQueue()
    q.push((0, Process("A", 0, 1)))
    q.push((1, Process("B", 0, 1)))
    assert q.pop()[1].pid == "A"
    assert len(q) == 1


def test_priority_ready_queue_breaks_ties_by_position():
    q = PriorityReadyQueue(key=lambda p: (p.priority,))
    q.push((2, Process("C", 0, 1, priority=1)))
    q.push((0, Process("A", 0, 1, priority=2)))
    q.push((1, Process("B", 0, 1, priority=1)))
    assert [q.pop()[1].pid for _ in range(3)] == ["B", "C", "A"]


def test_palette_cycles():
    assert len(PROCESS_COLORS) == 8
    assert process_color(0) == process_color(8) == "red"
    assert process_color(9) == PROCESS_COLORS[1]


def test_terminal_color_rejects_unknown_names():
    assert terminal_color("blue") == "blue"
    assert terminal_color("#ff8800") == "#ff8800"
    assert terminal_color("bg-process-p1") == "white"
    assert terminal_color(None, default="dim") == "dim"
