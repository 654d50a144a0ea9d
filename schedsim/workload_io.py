from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List

from .errors import WorkloadError
from .models import Process

logger = logging.getLogger(__name__)


def sample_workload() -> List[Process]:
    """
    The four-process demo workload used when no file is given.
    """
    return [
        Process(pid=1, name="P1", arrival_time=0, burst_time=5, priority=2),
        Process(pid=2, name="P2", arrival_time=1, burst_time=3, priority=1),
        Process(pid=3, name="P3", arrival_time=2, burst_time=8, priority=3),
        Process(pid=4, name="P4", arrival_time=3, burst_time=6, priority=2),
    ]


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        raise WorkloadError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.debug("Loaded %d processes from %s", len(processes), path)
    return processes


def _load_json(path: Path) -> List[Process]:
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise WorkloadError(f"Cannot read workload {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            for row in reader:
                processes.append(_process_from_mapping(row))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise WorkloadError(f"Cannot read workload {path}: {exc}") from exc
    return processes


def _as_int(value) -> int:
    # int() would silently truncate 2.7 from JSON; only whole numbers pass.
    if isinstance(value, bool):
        raise TypeError(f"expected an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


def _process_from_mapping(mapping) -> Process:
    try:
        pid = _as_int(mapping["pid"])
        arrival_time = _as_int(mapping["arrival_time"])
        burst_time = _as_int(mapping["burst_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid process entry: {mapping!r}") from exc

    name_val = mapping.get("name")
    name = str(name_val) if name_val not in (None, "") else f"P{pid}"

    priority_val = mapping.get("priority")
    try:
        priority = _as_int(priority_val) if priority_val not in (None, "") else 1
    except (TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid priority in entry: {mapping!r}") from exc

    return Process(
        pid=pid,
        name=name,
        arrival_time=arrival_time,
        burst_time=burst_time,
        priority=priority,
    )
