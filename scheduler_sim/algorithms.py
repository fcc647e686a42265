from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .errors import PreconditionError, UnsupportedAlgorithmError
from .metrics import compute_system_metrics
from .models import Algorithm, Process, ProcessMetrics, ScheduleResult
from .palette import process_color
from .queues import PendingArrivals, PriorityReadyQueue, ReadyQueue
from .timeline import TimelineBuilder

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2


def _prepare(processes: Sequence[Process]) -> List[Process]:
    """
    Check the preconditions every algorithm shares and return private copies
    of the caller's records.
    """
    if not processes:
        raise PreconditionError("At least one process is required")

    seen: set[str] = set()
    for p in processes:
        if p.pid in seen:
            raise PreconditionError(f"Duplicate process id '{p.pid}'")
        seen.add(p.pid)
        if p.burst_time <= 0:
            raise PreconditionError(f"Process '{p.pid}' has non-positive burst time {p.burst_time}")
        if p.arrival_time < 0:
            raise PreconditionError(f"Process '{p.pid}' has negative arrival time {p.arrival_time}")

    return [replace(p) for p in processes]


def _finished(p: Process, start_time: int, finish_time: int) -> ProcessMetrics:
    turnaround_time = finish_time - p.arrival_time
    return ProcessMetrics(
        pid=p.pid,
        name=p.display_name,
        arrival_time=p.arrival_time,
        burst_time=p.burst_time,
        start_time=start_time,
        finish_time=finish_time,
        waiting_time=turnaround_time - p.burst_time,
        turnaround_time=turnaround_time,
        response_time=start_time - p.arrival_time,
        priority=p.priority,
        color=p.color,
    )


def _build_result(
    algorithm: str,
    quantum: Optional[int],
    finished: List[Tuple[int, ProcessMetrics]],
    builder: TimelineBuilder,
) -> ScheduleResult:
    # Report processes in arrival order, ties by input position.
    finished.sort(key=lambda item: (item[1].arrival_time, item[0]))
    result = ScheduleResult(
        algorithm=algorithm,
        quantum=quantum,
        processes=[m for _, m in finished],
        timeline=builder.slices,
    )
    system = compute_system_metrics(result, idle_time=builder.idle_time)
    logger.info(
        "%s scheduled %d processes in %d time units (idle %d)",
        algorithm,
        len(result.processes),
        system.total_execution_time,
        system.idle_time,
    )
    return result


def schedule_fcfs(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.
    """
    jobs = _prepare(processes)
    order = sorted(enumerate(jobs), key=lambda e: (e[1].arrival_time, e[0]))

    builder = TimelineBuilder()
    finished: List[Tuple[int, ProcessMetrics]] = []

    for index, p in order:
        builder.idle_until(p.arrival_time)
        slice_ = builder.run(p, p.burst_time)
        finished.append((index, _finished(p, slice_.start_time, slice_.end_time)))

    return _build_result("FCFS", None, finished, builder)


def _schedule_non_preemptive(
    jobs: List[Process],
    key: Callable[[Process], tuple],
    algorithm: str,
) -> ScheduleResult:
    """
    Arrival-gated non-preemptive loop: admit everything that has arrived,
    run the ready process with the smallest ``key`` to completion, repeat.
    """
    pending = PendingArrivals(jobs)
    ready = PriorityReadyQueue(key)
    builder = TimelineBuilder()
    finished: List[Tuple[int, ProcessMetrics]] = []

    while pending or ready:
        for entry in pending.admit_until(builder.current_time):
            ready.push(entry)

        if not ready:
            builder.idle_until(pending.next_arrival())
            continue

        index, p = ready.pop()
        logger.debug("t=%d: dispatch %s (%d waiting)", builder.current_time, p.pid, len(ready))
        slice_ = builder.run(p, p.burst_time)
        finished.append((index, _finished(p, slice_.start_time, slice_.end_time)))

    return _build_result(algorithm, None, finished, builder)


def schedule_sjf(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and are not yet
    completed, choose the one with the smallest burst time; break ties by
    earlier arrival, then input order.
    """
    jobs = _prepare(processes)
    return _schedule_non_preemptive(
        jobs,
        key=lambda p: (p.burst_time, p.arrival_time),
        algorithm="SJF (non-preemptive)",
    )


def schedule_priority(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority. Among ready
    processes, choose the one with the smallest priority; break ties
    by earlier arrival time, then input order. Arrivals during a run are
    queued but never preempt it.
    """
    jobs = _prepare(processes)
    missing = [p.pid for p in jobs if p.priority is None]
    if missing:
        raise PreconditionError(
            f"Priority scheduling needs a priority for every process (missing: {', '.join(missing)})"
        )

    return _schedule_non_preemptive(
        jobs,
        key=lambda p: (p.priority, p.arrival_time),
        algorithm="Priority (non-preemptive)",
    )


def schedule_rr(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes that arrive while a slice runs (or exactly when it ends) join
    the ready queue ahead of the process that was just preempted.
    """
    if quantum is None:
        quantum = DEFAULT_QUANTUM
    if quantum < 1:
        raise PreconditionError(f"Round Robin requires a quantum of at least 1 (got {quantum})")

    jobs = _prepare(processes)
    pending = PendingArrivals(jobs)
    ready = ReadyQueue()
    builder = TimelineBuilder()

    remaining = {index: p.burst_time for index, p in enumerate(jobs)}
    start_times: Dict[int, int] = {}
    finished: List[Tuple[int, ProcessMetrics]] = []

    while len(finished) < len(jobs):
        for entry in pending.admit_until(builder.current_time):
            ready.push(entry)

        if not ready:
            builder.idle_until(pending.next_arrival())
            continue

        index, p = ready.pop()
        # Response time is measured at first dispatch, not first enqueue.
        start_times.setdefault(index, builder.current_time)

        run_time = min(quantum, remaining[index])
        logger.debug("t=%d: dispatch %s for %d", builder.current_time, p.pid, run_time)
        builder.run(p, run_time)
        remaining[index] -= run_time

        for entry in pending.admit_until(builder.current_time):
            ready.push(entry)

        if remaining[index] > 0:
            ready.push((index, p))
        else:
            finished.append((index, _finished(p, start_times[index], builder.current_time)))

    return _build_result("Round Robin", quantum, finished, builder)


ALGORITHMS: Dict[Algorithm, Callable[..., ScheduleResult]] = {
    Algorithm.FCFS: schedule_fcfs,
    Algorithm.SJF: schedule_sjf,
    Algorithm.ROUND_ROBIN: schedule_rr,
    Algorithm.PRIORITY_NP: schedule_priority,
}


def assign_colors(processes: Sequence[Process]) -> List[Process]:
    """
    Return copies of ``processes`` where every missing color is filled from
    the palette by input position.
    """
    return [replace(p, color=p.color or process_color(i)) for i, p in enumerate(processes)]


def schedule(algorithm, processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm.

    ``algorithm`` may be an :class:`Algorithm` or any name it parses.
    Unrecognised names fall back to FCFS. The quantum only reaches Round
    Robin; other algorithms ignore it.
    """
    selected = Algorithm.parse(algorithm)
    if selected is None:
        logger.warning("Unknown algorithm %r, falling back to FCFS", algorithm)
        selected = Algorithm.FCFS

    func = ALGORITHMS.get(selected)
    if func is None:
        raise UnsupportedAlgorithmError(f"Algorithm '{selected.value}' is not implemented")

    colored = assign_colors(processes)
    if selected is Algorithm.ROUND_ROBIN:
        return func(colored, quantum=quantum)
    return func(colored)
