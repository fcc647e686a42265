"""
CPU scheduling simulator package.

Computes Gantt timelines, per-process timings and aggregate statistics for
classic uniprocessor scheduling algorithms, with a Rich command-line front
end for viewing and comparing them.
"""

from .algorithms import schedule
from .errors import PreconditionError, SchedulerError, UnsupportedAlgorithmError, WorkloadError
from .models import Algorithm, Process, ProcessMetrics, ScheduledSlice, ScheduleResult, SystemMetrics

__all__ = [
    "Algorithm",
    "PreconditionError",
    "Process",
    "ProcessMetrics",
    "ScheduleResult",
    "ScheduledSlice",
    "SchedulerError",
    "SystemMetrics",
    "UnsupportedAlgorithmError",
    "WorkloadError",
    "schedule",
]
