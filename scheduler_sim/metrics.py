from __future__ import annotations

from typing import List

from .models import ProcessMetrics, ScheduleResult, SystemMetrics


def compute_system_metrics(result: ScheduleResult, idle_time: int) -> SystemMetrics:
    """
    Compute the aggregate statistics from populated per-process metrics and
    the idle time accumulated while the timeline was built.

    Callers guarantee at least one process with a positive burst, so the
    total execution time is never zero.
    """
    summary = summarize_process_metrics(result.processes)

    total_execution_time = result.timeline[-1].end_time
    cpu_busy_time = total_execution_time - idle_time

    system = SystemMetrics(
        average_waiting_time=summary["avg_waiting"],
        average_turnaround_time=summary["avg_turnaround"],
        average_response_time=summary["avg_response"],
        cpu_utilization=cpu_busy_time / total_execution_time * 100,
        throughput=len(result.processes) / total_execution_time,
        total_execution_time=total_execution_time,
        idle_time=idle_time,
        cpu_busy_time=cpu_busy_time,
    )
    result.system = system
    return system


def summarize_process_metrics(processes: List[ProcessMetrics]) -> dict:
    """
    Return averages of the key per-process metrics for quick comparison.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0, "avg_response": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
        "avg_response": sum(p.response_time for p in processes) / n,
    }
