from __future__ import annotations

from typing import List

from .models import IDLE_NAME, IDLE_PID, Process, ScheduledSlice
from .palette import IDLE_COLOR


class TimelineBuilder:
    """
    Owns the simulation clock while an algorithm runs.

    Every slice starts where the previous one ended, so the finished
    timeline covers [0, current_time) without gaps or overlaps. Idle time is
    summed as idle slices are emitted.
    """

    def __init__(self) -> None:
        self.current_time = 0
        self.idle_time = 0
        self.slices: List[ScheduledSlice] = []

    def idle_until(self, time: int) -> None:
        if time <= self.current_time:
            return
        self.slices.append(
            ScheduledSlice(
                pid=IDLE_PID,
                name=IDLE_NAME,
                start_time=self.current_time,
                end_time=time,
                color=IDLE_COLOR,
            )
        )
        self.idle_time += time - self.current_time
        self.current_time = time

    def run(self, process: Process, duration: int) -> ScheduledSlice:
        slice_ = ScheduledSlice(
            pid=process.pid,
            name=process.display_name,
            start_time=self.current_time,
            end_time=self.current_time + duration,
            color=process.color or "",
        )
        self.slices.append(slice_)
        self.current_time = slice_.end_time
        return slice_
