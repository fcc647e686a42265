from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List

from .errors import WorkloadError
from .models import Process


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise WorkloadError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise WorkloadError(f"{path}: invalid JSON ({exc})") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            processes.append(_process_from_mapping(row))
    return processes


def _optional(mapping, key: str):
    value = mapping.get(key)
    return None if value in (None, "") else value


def _process_from_mapping(mapping) -> Process:
    try:
        pid = mapping.get("pid", mapping.get("id"))
        if pid in (None, ""):
            raise KeyError("pid")
        arrival_time = int(mapping["arrival_time"])
        burst_time = int(mapping["burst_time"])
        priority_val = _optional(mapping, "priority")
        priority = int(priority_val) if priority_val is not None else None
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid process entry: {mapping!r}") from exc

    name = _optional(mapping, "name")
    color = _optional(mapping, "color")

    return Process(
        pid=str(pid),
        arrival_time=arrival_time,
        burst_time=burst_time,
        priority=priority,
        name=None if name is None else str(name),
        color=None if color is None else str(color),
    )
