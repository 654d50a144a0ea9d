from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Sequence

from .errors import InvalidQuantum
from .models import GanttSegment, Process, RunningProcess

logger = logging.getLogger(__name__)

Timeline = List[GanttSegment]


def _segment(p: Process, start: int, end: int) -> GanttSegment:
    return GanttSegment(pid=p.pid, name=p.name, start=start, end=end)


def _next_arrival(pending: Sequence[RunningProcess]) -> int:
    return min(r.process.arrival_time for r in pending)


def is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_quantum(quantum: Optional[int]) -> int:
    if quantum is None or not is_int(quantum) or quantum < 1:
        raise InvalidQuantum(f"Round Robin requires an integer quantum >= 1, got {quantum!r}")
    return quantum


def schedule_fcfs(processes: Sequence[Process]) -> Timeline:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    sorted() is stable, so processes arriving together keep their input order.
    """
    processes_sorted = sorted(processes, key=lambda p: p.arrival_time)

    time = 0
    timeline: Timeline = []

    for p in processes_sorted:
        if time < p.arrival_time:
            time = p.arrival_time

        timeline.append(_segment(p, time, time + p.burst_time))
        time += p.burst_time

    return timeline


def _run_non_preemptive(
    processes: Sequence[Process],
    key: Callable[[RunningProcess], int],
) -> Timeline:
    """
    Repeatedly pick the best ready process by ``key`` and run it to completion.

    min() keeps the first of several equal candidates, so ties go to the
    earliest entry in ``processes``.
    """
    jobs = [RunningProcess.from_process(p) for p in processes]

    time = 0
    timeline: Timeline = []

    while True:
        pending = [r for r in jobs if not r.done]
        if not pending:
            break

        ready = [r for r in pending if r.process.arrival_time <= time]
        if not ready:
            # CPU idles until the next arrival; idle time gets no segment.
            time = _next_arrival(pending)
            continue

        chosen = min(ready, key=key)
        timeline.append(_segment(chosen.process, time, time + chosen.remaining))
        time += chosen.remaining
        chosen.remaining = 0
        chosen.done = True

    return timeline


def schedule_sjf(processes: Sequence[Process]) -> Timeline:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and have not
    run yet, choose the one with the smallest burst time.
    """
    return _run_non_preemptive(processes, key=lambda r: r.process.burst_time)


def schedule_priority(processes: Sequence[Process]) -> Timeline:
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority. Candidates are
    scanned in arrival order, so among equal priorities the earlier
    arrival wins.
    """
    by_arrival = sorted(processes, key=lambda p: p.arrival_time)
    return _run_non_preemptive(by_arrival, key=lambda r: r.process.priority)


def _run_preemptive(
    processes: Sequence[Process],
    key: Callable[[RunningProcess], int],
) -> Timeline:
    """
    Tick-by-tick preemptive simulation.

    Every tick the best ready process by ``key`` runs for one unit. When the
    same process runs on consecutive ticks its last segment is extended
    instead of a new one being opened.
    """
    jobs = [RunningProcess.from_process(p) for p in processes]

    time = 0
    timeline: Timeline = []
    last_pid: Optional[int] = None

    while True:
        pending = [r for r in jobs if not r.done]
        if not pending:
            break

        ready = [r for r in pending if r.process.arrival_time <= time]
        if not ready:
            time = _next_arrival(pending)
            last_pid = None
            continue

        current = min(ready, key=key)

        if current.pid == last_pid:
            timeline[-1].end += 1
        else:
            if last_pid is not None:
                logger.debug("t=%d: switch from pid %d to %s", time, last_pid, current.process.name)
            timeline.append(_segment(current.process, time, time + 1))

        current.remaining -= 1
        if current.remaining == 0:
            current.done = True

        last_pid = current.pid
        time += 1

    return timeline


def schedule_srtf(processes: Sequence[Process]) -> Timeline:
    """
    Shortest Remaining Time First (preemptive SJF).
    """
    return _run_preemptive(processes, key=lambda r: r.remaining)


def schedule_priority_preemptive(processes: Sequence[Process]) -> Timeline:
    """
    Preemptive Priority scheduling; a newly arrived process with a lower
    priority value takes the CPU at the next tick.
    """
    return _run_preemptive(processes, key=lambda r: r.process.priority)


def schedule_rr(processes: Sequence[Process], quantum: Optional[int] = None) -> Timeline:
    """
    Round Robin scheduling with a fixed time quantum.

    After each slice, processes that arrived while it ran are queued before
    the preempted process goes back to the tail.
    """
    quantum = validate_quantum(quantum)

    jobs = [RunningProcess.from_process(p) for p in sorted(processes, key=lambda p: p.arrival_time)]

    time = 0
    timeline: Timeline = []
    ready: Deque[RunningProcess] = deque()
    queued: set[int] = set()

    def enqueue_new_arrivals(current_time: int, exclude: Optional[RunningProcess] = None) -> None:
        for r in jobs:
            if r is exclude or r.pid in queued:
                continue
            if r.process.arrival_time <= current_time and r.remaining > 0:
                ready.append(r)
                queued.add(r.pid)

    while any(r.remaining > 0 for r in jobs):
        enqueue_new_arrivals(time)

        if not ready:
            time = _next_arrival([r for r in jobs if r.remaining > 0])
            continue

        current = ready.popleft()
        queued.discard(current.pid)

        run_time = min(quantum, current.remaining)
        timeline.append(_segment(current.process, time, time + run_time))
        time += run_time
        current.remaining -= run_time

        enqueue_new_arrivals(time, exclude=current)

        if current.remaining > 0:
            ready.append(current)
            queued.add(current.pid)
        else:
            current.done = True

    return timeline


ALGORITHMS: Dict[str, Callable[..., Timeline]] = {
    "FCFS": schedule_fcfs,
    "SJF": schedule_sjf,
    "SJF-PRE": schedule_srtf,
    "Priority": schedule_priority,
    "Priority-PRE": schedule_priority_preemptive,
    "RR": schedule_rr,
}

ALIASES: Dict[str, str] = {
    "srtf": "SJF-PRE",
    "round-robin": "RR",
}

DESCRIPTIONS: Dict[str, str] = {
    "FCFS": "First-Come First-Serve",
    "SJF": "Shortest Job First (non-preemptive)",
    "SJF-PRE": "Shortest Remaining Time First",
    "Priority": "Priority (non-preemptive)",
    "Priority-PRE": "Priority (preemptive)",
    "RR": "Round Robin",
}


def resolve_algorithm(name: Optional[str]) -> Optional[str]:
    """
    Map a user-supplied policy name onto its canonical key, ignoring case.
    Returns None when the name is not recognised.
    """
    if not name:
        return None
    lowered = name.strip().lower()
    for canonical in ALGORITHMS:
        if canonical.lower() == lowered:
            return canonical
    return ALIASES.get(lowered)
