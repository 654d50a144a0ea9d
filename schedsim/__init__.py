"""
Schedsim package.

Simulates CPU scheduling policies (FCFS, SJF, SRTF, preemptive and
non-preemptive Priority, Round Robin) over a fixed set of processes and
reports the resulting Gantt chart with turnaround and waiting statistics.
"""

from .errors import DegenerateProcess, InvalidInput, InvalidQuantum, SchedulingError, WorkloadError
from .models import GanttSegment, Process, ProcessStats, ScheduleResult, ScheduleStats, SystemMetrics
from .simulator import compare, simulate

__all__ = [
    "DegenerateProcess",
    "GanttSegment",
    "InvalidInput",
    "InvalidQuantum",
    "Process",
    "ProcessStats",
    "ScheduleResult",
    "ScheduleStats",
    "SchedulingError",
    "SystemMetrics",
    "WorkloadError",
    "compare",
    "simulate",
]
