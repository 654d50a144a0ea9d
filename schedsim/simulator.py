from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .algorithms import ALGORITHMS, is_int, resolve_algorithm, validate_quantum
from .errors import DegenerateProcess, InvalidInput
from .metrics import calculate_stats, compute_system_metrics
from .models import Process, ScheduleResult

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "FCFS"
DEFAULT_QUANTUM = 2


def validate_processes(processes: Sequence[Process]) -> None:
    """
    Reject process lists the algorithms cannot simulate. Runs before any
    timeline is computed so a failed call never yields a partial result.
    """
    if not processes:
        raise InvalidInput("Cannot simulate an empty process list")

    seen: set[int] = set()
    for p in processes:
        for field_name in ("arrival_time", "burst_time", "priority"):
            if not is_int(getattr(p, field_name)):
                raise InvalidInput(f"Process {p.pid}: {field_name} must be an integer")
        if p.pid in seen:
            raise InvalidInput(f"Duplicate process id {p.pid}")
        seen.add(p.pid)
        if p.arrival_time < 0:
            raise InvalidInput(f"Process {p.pid} has negative arrival_time {p.arrival_time}")
        if p.burst_time < 1:
            raise DegenerateProcess(p.pid, p.burst_time)
        if p.priority < 1:
            raise InvalidInput(f"Process {p.pid} has priority {p.priority}; priority must be >= 1")


def simulate(
    processes: Sequence[Process],
    algorithm: Optional[str] = DEFAULT_ALGORITHM,
    quantum: Optional[int] = None,
) -> ScheduleResult:
    """
    Run one scheduling policy over ``processes`` and return the timeline
    together with its statistics.

    Unrecognised policy names fall back to FCFS. The quantum is only used
    (and only validated) for Round Robin.
    """
    validate_processes(processes)

    name = resolve_algorithm(algorithm)
    if name is None:
        logger.warning("Unknown algorithm %r, falling back to %s", algorithm, DEFAULT_ALGORITHM)
        name = DEFAULT_ALGORITHM

    func = ALGORITHMS[name]
    # Algorithms only ever see a private copy of the caller's list.
    procs = list(processes)

    if name == "RR":
        quantum = validate_quantum(quantum)
        timeline = func(procs, quantum=quantum)
    else:
        quantum = None
        timeline = func(procs)

    logger.debug("%s produced %d segments for %d processes", name, len(timeline), len(procs))

    stats = calculate_stats(timeline, procs)
    result = ScheduleResult(algorithm=name, quantum=quantum, timeline=timeline, stats=stats)
    result.system = compute_system_metrics(timeline, stats)
    return result


def compare(
    processes: Sequence[Process],
    algorithms: Optional[Iterable[str]] = None,
    quantum: int = DEFAULT_QUANTUM,
) -> List[ScheduleResult]:
    """
    Run several policies over the same workload, in the order given
    (default: every supported policy).
    """
    names = list(algorithms) if algorithms is not None else list(ALGORITHMS)
    return [simulate(processes, name, quantum=quantum) for name in names]
