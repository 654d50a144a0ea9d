from __future__ import annotations


class SchedulingError(ValueError):
    """Base class for every error raised by the simulator."""


class InvalidInput(SchedulingError):
    """
    The process list cannot be simulated (empty list, duplicate pids,
    negative arrival time, bad priority).
    """


class InvalidQuantum(InvalidInput):
    """Round Robin was requested without a quantum of at least 1."""


class DegenerateProcess(InvalidInput):
    """A process asks for less than one tick of CPU time."""

    def __init__(self, pid: int, burst_time: int) -> None:
        super().__init__(f"Process {pid} has burst_time {burst_time}; burst_time must be >= 1")
        self.pid = pid
        self.burst_time = burst_time


class WorkloadError(SchedulingError):
    """A workload file could not be read or contains malformed entries."""
