"""Core data types: processes, resources, actions and Gantt events."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum


class ActionType(Enum):
    """Kind of access an action performs on a resource."""

    READ = "READ"
    WRITE = "WRITE"


def parse_action_type(text: str) -> ActionType:
    """Return the action type named by ``text`` (``READ`` or ``WRITE``)."""
    try:
        return ActionType(text)
    except ValueError:
        raise ValueError(f"invalid action type: {text}") from None


@dataclass(frozen=True)
class Action:
    """A process touching a resource at a given cycle."""

    pid: str
    kind: ActionType
    resource: str
    cycle: int


@dataclass
class Process:
    """A process to be scheduled."""

    pid: str
    burst_time: int
    arrival_time: int
    priority: int


@dataclass(frozen=True)
class GanttEvent:
    """A span of CPU time given to one process."""

    pid: str
    start: int
    end: int


class Resource:
    """A counted resource that behaves like a counting semaphore."""

    def __init__(self, name: str, count: int) -> None:
        self.name = name
        self.count = count
        self.available = count
        self._condition = threading.Condition()

    def acquire(self) -> None:
        """Take one unit, blocking while none is available."""
        with self._condition:
            self._condition.wait_for(lambda: self.available != 0)
            self.available -= 1

    def release(self) -> None:
        """Give back one unit and wake any waiters."""
        with self._condition:
            self.available += 1
            self._condition.notify_all()

    def __enter__(self) -> Resource:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        return (
            f"Resource(name={self.name!r}, count={self.count}, "
            f"available={self.available})"
        )