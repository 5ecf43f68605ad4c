"""Loading processes, resources and actions from comma-separated files."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator

from schedsim.models import Action, Process, Resource, parse_action_type

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse a leading integer, ignoring any trailing characters."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _records(path: str | os.PathLike[str], fields: int, kind: str) -> Iterator[list[str]]:
    """Yield the space-stripped fields of each well-formed line in ``path``.

    The last field takes the rest of the line. Lines with too few fields
    are logged and skipped.
    """
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            parts = line.split(",", fields - 1)
            if len(parts) < fields or not parts[-1]:
                logger.warning("malformed %s line: %s", kind, line)
                continue
            yield [part.replace(" ", "") for part in parts]


def load_processes(path: str | os.PathLike[str]) -> list[Process]:
    """Read ``pid,burst,arrival,priority`` lines."""
    return [
        Process(pid, _to_int(burst), _to_int(arrival), _to_int(priority))
        for pid, burst, arrival, priority in _records(path, 4, "process")
    ]


def load_resources(path: str | os.PathLike[str]) -> list[Resource]:
    """Read ``name,count`` lines."""
    return [
        Resource(name, _to_int(count))
        for name, count in _records(path, 2, "resource")
    ]


def load_actions(path: str | os.PathLike[str]) -> list[Action]:
    """Read ``pid,READ|WRITE,resource,cycle`` lines."""
    return [
        Action(pid, parse_action_type(kind), resource, _to_int(cycle))
        for pid, kind, resource, cycle in _records(path, 4, "action")
    ]