"""
The five-process workload used in class to compare the algorithms.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List

from .models import Process
from .palette import process_color

SAMPLE_PROCESSES = (
    Process("P1", arrival_time=0, burst_time=5, priority=1, color=process_color(0)),
    Process("P2", arrival_time=1, burst_time=3, priority=2, color=process_color(1)),
    Process("P3", arrival_time=2, burst_time=8, priority=1, color=process_color(2)),
    Process("P4", arrival_time=3, burst_time=2, priority=3, color=process_color(3)),
    Process("P5", arrival_time=4, burst_time=4, priority=2, color=process_color(4)),
)


def load_sample() -> List[Process]:
    return [replace(p) for p in SAMPLE_PROCESSES]
