from __future__ import annotations


class SchedulerError(ValueError):
    """Base class for everything the simulator raises on bad input."""


class PreconditionError(SchedulerError):
    """The process set or quantum cannot be simulated."""


class UnsupportedAlgorithmError(SchedulerError):
    """The algorithm is declared but has no implementation."""


class WorkloadError(SchedulerError):
    """A workload file could not be turned into processes."""
