from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Process:
    pid: int
    name: str
    arrival_time: int
    burst_time: int
    priority: int = 1


@dataclass
class RunningProcess:
    """
    Mutable working copy of a Process, private to a single simulation run.
    """

    process: Process
    remaining: int
    done: bool = False

    @classmethod
    def from_process(cls, process: Process) -> "RunningProcess":
        return cls(process=process, remaining=process.burst_time)

    @property
    def pid(self) -> int:
        return self.process.pid


@dataclass
class GanttSegment:
    """
    One contiguous span of CPU time for a process in the Gantt chart.
    """

    pid: int
    name: str
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass
class ProcessStats:
    pid: int
    name: str
    arrival_time: int
    burst_time: int
    start_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int
    response_time: int


@dataclass
class ScheduleStats:
    processes: Dict[int, ProcessStats] = field(default_factory=dict)
    avg_turnaround: float = 0.0
    avg_waiting: float = 0.0
    avg_response: float = 0.0


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    idle_time: int
    throughput: float
    cpu_utilization: float
    starvation_count: int = 0


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    timeline: List[GanttSegment] = field(default_factory=list)
    stats: ScheduleStats = field(default_factory=ScheduleStats)
    system: Optional[SystemMetrics] = None
