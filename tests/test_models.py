import threading

import pytest

from schedsim.models import (
    Action,
    ActionType,
    GanttEvent,
    Process,
    Resource,
    parse_action_type,
)


@pytest.mark.parametrize(
    "text, expected",
    [("READ", ActionType.READ), ("WRITE", ActionType.WRITE)],
)
def test_parse_action_type(text, expected):
    assert parse_action_type(text) is expected


@pytest.mark.parametrize("text", ["read", "", "DELETE", " READ"])
def test_parse_action_type_rejects_unknown(text):
    with pytest.raises(ValueError):
        parse_action_type(text)


def test_resource_starts_fully_available():
    res = Resource("disk", 3)
    assert res.name == "disk"
    assert res.count == 3
    assert res.available == 3


def test_acquire_and_release_adjust_availability():
    res = Resource("disk", 2)
    res.acquire()
    res.acquire()
    assert res.available == 0
    res.release()
    assert res.available == 1
    assert res.count == 2


def test_context_manager_returns_unit():
    res = Resource("printer", 1)
    with res as held:
        assert held is res
        assert res.available == 0
    assert res.available == 1


def test_acquire_blocks_until_release():
    res = Resource("printer", 1)
    res.acquire()
    acquired = threading.Event()

    def worker():
        res.acquire()
        acquired.set()

    thread = threading.Thread(target=worker)
    thread.start()
    assert not acquired.wait(0.1)
    res.release()
    assert acquired.wait(2)
    thread.join(2)
    assert res.available == 0


def test_action_and_process_fields():
    action = Action("P1", ActionType.WRITE, "disk", 4)
    proc = Process("P1", 5, 0, 2)
    assert (action.pid, action.kind, action.resource, action.cycle) == (
        "P1",
        ActionType.WRITE,
        "disk",
        4,
    )
    assert (proc.burst_time, proc.arrival_time, proc.priority) == (5, 0, 2)


def test_gantt_event_equality():
    assert GanttEvent("P1", 0, 3) == GanttEvent("P1", 0, 3)
    assert GanttEvent("P1", 0, 3) != GanttEvent("P1", 0, 4)