import csv

from schedsim.gantt import save_gantt_csv
from schedsim.models import GanttEvent


def _read_rows(path):
    with open(path, newline="", encoding="utf-8") as handle:
        return list(csv.reader(handle))


def test_header_only_for_no_events(tmp_path):
    path = tmp_path / "gantt.csv"
    save_gantt_csv([], path)
    assert path.read_text(encoding="utf-8") == "Proceso,Inicio,Fin\n"


def test_events_round_trip(tmp_path):
    path = tmp_path / "gantt.csv"
    events = [GanttEvent("P1", 0, 3), GanttEvent("P2", 3, 7), GanttEvent("P1", 7, 9)]
    save_gantt_csv(events, path)
    rows = _read_rows(path)
    assert rows[0] == ["Proceso", "Inicio", "Fin"]
    restored = [GanttEvent(pid, int(start), int(end)) for pid, start, end in rows[1:]]
    assert restored == events


def test_overwrites_existing_file(tmp_path):
    path = tmp_path / "gantt.csv"
    save_gantt_csv([GanttEvent("A", 0, 1), GanttEvent("B", 1, 2)], path)
    save_gantt_csv([GanttEvent("C", 2, 5)], path)
    rows = _read_rows(path)
    assert rows[1:] == [["C", "2", "5"]]


def test_accepts_generator(tmp_path):
    path = tmp_path / "gantt.csv"
    save_gantt_csv((GanttEvent(f"P{n}", n, n + 1) for n in range(3)), path)
    rows = _read_rows(path)
    assert len(rows) == 4
    assert [row[0] for row in rows[1:]] == ["P0", "P1", "P2"]