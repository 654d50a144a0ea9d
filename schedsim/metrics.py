from __future__ import annotations

from typing import Dict, List, Sequence

from .models import GanttSegment, Process, ProcessStats, ScheduleStats, SystemMetrics


def process_stats(process: Process, timeline: Sequence[GanttSegment]) -> ProcessStats:
    """
    Derive completion, turnaround, waiting and response times for one
    process from the segments it occupies.
    """
    segments = [s for s in timeline if s.pid == process.pid]
    if not segments:
        # Never scheduled; reported as zeros rather than as an error.
        return ProcessStats(
            pid=process.pid,
            name=process.name,
            arrival_time=process.arrival_time,
            burst_time=process.burst_time,
            start_time=0,
            completion_time=0,
            turnaround_time=0,
            waiting_time=0,
            response_time=0,
        )

    start_time = min(s.start for s in segments)
    completion_time = max(s.end for s in segments)
    turnaround_time = completion_time - process.arrival_time

    return ProcessStats(
        pid=process.pid,
        name=process.name,
        arrival_time=process.arrival_time,
        burst_time=process.burst_time,
        start_time=start_time,
        completion_time=completion_time,
        turnaround_time=turnaround_time,
        waiting_time=turnaround_time - process.burst_time,
        response_time=start_time - process.arrival_time,
    )


def calculate_stats(timeline: Sequence[GanttSegment], processes: Sequence[Process]) -> ScheduleStats:
    """
    Per-process statistics keyed by pid (input order) plus averages over
    every process, including any that never ran.
    """
    per_process: Dict[int, ProcessStats] = {p.pid: process_stats(p, timeline) for p in processes}
    if not per_process:
        return ScheduleStats()

    summary = summarize_process_metrics(list(per_process.values()))
    return ScheduleStats(
        processes=per_process,
        avg_turnaround=summary["avg_turnaround"],
        avg_waiting=summary["avg_waiting"],
        avg_response=summary["avg_response"],
    )


def compute_system_metrics(timeline: Sequence[GanttSegment], stats: ScheduleStats) -> SystemMetrics:
    """
    Compute busy/idle time, throughput and CPU utilization of a timeline.
    """
    if not timeline:
        return SystemMetrics(cpu_busy_time=0, makespan=0, idle_time=0, throughput=0.0, cpu_utilization=0.0)

    makespan = max(s.end for s in timeline)
    cpu_busy_time = sum(s.end - s.start for s in timeline)

    n = len(stats.processes)
    throughput = n / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    # Processes waiting more than twice the average are counted as starved.
    starvation_count = sum(1 for p in stats.processes.values() if p.waiting_time > 2 * stats.avg_waiting)

    return SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        makespan=makespan,
        idle_time=makespan - cpu_busy_time,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
        starvation_count=starvation_count,
    )


def summarize_process_metrics(processes: List[ProcessStats]) -> dict:
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
