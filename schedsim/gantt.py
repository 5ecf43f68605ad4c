"""Writing Gantt chart events to CSV."""

from __future__ import annotations

import csv
import os
from collections.abc import Iterable

from schedsim.models import GanttEvent

HEADER = ("Proceso", "Inicio", "Fin")


def save_gantt_csv(events: Iterable[GanttEvent], path: str | os.PathLike[str]) -> None:
    """Write ``events`` to ``path`` as CSV with a header row."""
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(HEADER)
        writer.writerows((event.pid, event.start, event.end) for event in events)