from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

IDLE_PID = "idle"
IDLE_NAME = "Idle"


class Algorithm(Enum):
    FCFS = "FCFS"
    SJF = "SJF"
    ROUND_ROBIN = "RoundRobin"
    PRIORITY_NP = "PriorityNP"
    PRIORITY_P = "PriorityP"

    @classmethod
    def parse(cls, value) -> Optional["Algorithm"]:
        """
        Resolve an enum member, its value or a CLI alias (case-insensitive).

        Returns None for anything unrecognised so the dispatcher can apply
        its FCFS fallback.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        return _ALIASES.get(key)


_ALIASES: Dict[str, Algorithm] = {
    "rr": Algorithm.ROUND_ROBIN,
    "round-robin": Algorithm.ROUND_ROBIN,
    "priority": Algorithm.PRIORITY_NP,
    "priority-np": Algorithm.PRIORITY_NP,
    "priority-p": Algorithm.PRIORITY_P,
}


@dataclass
class Process:
    pid: str
    arrival_time: int
    burst_time: int
    priority: Optional[int] = None
    name: Optional[str] = None
    color: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.pid


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of the Gantt chart: a process run or an idle gap.
    """

    pid: str
    name: str
    start_time: int
    end_time: int
    color: str

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time

    @property
    def is_idle(self) -> bool:
        return self.pid == IDLE_PID


@dataclass
class ProcessMetrics:
    pid: str
    name: str
    arrival_time: int
    burst_time: int
    start_time: int
    finish_time: int
    waiting_time: int
    turnaround_time: int
    response_time: int
    remaining_time: int = 0
    priority: Optional[int] = None
    color: Optional[str] = None


@dataclass
class SystemMetrics:
    average_waiting_time: float
    average_turnaround_time: float
    average_response_time: float
    cpu_utilization: float
    throughput: float
    total_execution_time: int
    idle_time: int
    cpu_busy_time: int


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None

    def process(self, pid: str) -> ProcessMetrics:
        for p in self.processes:
            if p.pid == pid:
                return p
        raise KeyError(pid)
