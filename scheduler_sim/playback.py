from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .models import ScheduleResult, ScheduledSlice


@dataclass
class ExecutionStep:
    """
    Snapshot of the simulated system at the start of one time unit.
    """

    time: int
    active_pid: Optional[str]
    remaining: Dict[str, int] = field(default_factory=dict)
    waiting: List[str] = field(default_factory=list)
    completed: List[str] = field(default_factory=list)


def block_at(timeline: Sequence[ScheduledSlice], time: int) -> Optional[ScheduledSlice]:
    """
    Return the slice covering ``time`` (start inclusive, end exclusive).
    """
    for sl in timeline:
        if sl.start_time <= time < sl.end_time:
            return sl
    return None


def build_execution_steps(result: ScheduleResult) -> List[ExecutionStep]:
    """
    Expand a computed schedule into one step per time unit, for playback.
    """
    if not result.timeline:
        return []

    total = result.timeline[-1].end_time
    remaining = {p.pid: p.burst_time for p in result.processes}
    steps: List[ExecutionStep] = []

    for t in range(total):
        current = block_at(result.timeline, t)
        active = None if current is None or current.is_idle else current.pid

        steps.append(
            ExecutionStep(
                time=t,
                active_pid=active,
                remaining=dict(remaining),
                waiting=[
                    p.pid
                    for p in result.processes
                    if p.arrival_time <= t and remaining[p.pid] > 0 and p.pid != active
                ],
                completed=[p.pid for p in result.processes if remaining[p.pid] == 0],
            )
        )

        if active is not None:
            remaining[active] -= 1

    return steps
