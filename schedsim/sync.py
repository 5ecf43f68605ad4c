"""Demonstrations of a mutex and a binary semaphore shared by three threads."""

from __future__ import annotations

import csv
import os
import sys
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

PathLike = str | os.PathLike[str]

_WORKERS = (1, 2, 3)


@dataclass(frozen=True)
class SyncRecord:
    """When a thread asked for the resource and how long it took, in ms."""

    process: int
    start: int
    duration: int


class _BinarySemaphore:
    """A single-slot resource guarded by a condition variable."""

    def __init__(self, out: TextIO) -> None:
        self._condition = threading.Condition()
        self._available = True
        self._out = out

    def wait(self, worker: int) -> None:
        with self._condition:
            self._condition.wait_for(lambda: self._available)
            self._available = False
            print(f"[Semáforo] Proceso {worker} accede al recurso.", file=self._out)

    def signal(self, worker: int) -> None:
        with self._condition:
            print(f"[Semáforo] Proceso {worker} libera el recurso.", file=self._out)
            self._available = True
            self._condition.notify()


def _run(
    title: str,
    critical: Callable[[int], None],
    csv_path: PathLike | None,
    out: TextIO,
) -> list[SyncRecord]:
    print(f"\n=== Simulación de sincronización con {title} ===", file=out)

    records: list[SyncRecord] = []
    lock = threading.Lock()
    origin = time.monotonic()

    def elapsed_ms() -> int:
        return int((time.monotonic() - origin) * 1000)

    def worker(worker_id: int) -> None:
        start = elapsed_ms()
        critical(worker_id)
        end = elapsed_ms()
        with lock:
            records.append(SyncRecord(worker_id, start, end - start))

    threads = [threading.Thread(target=worker, args=(i,)) for i in _WORKERS]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    if csv_path is not None:
        with open(csv_path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(("Proceso", "Inicio", "Duracion"))
            writer.writerows((r.process, r.start, r.duration) for r in records)

    print("\n--- Resumen ---", file=out)
    print(f"Total de procesos que accedieron al recurso: {len(records)}", file=out)
    return records


def simulate_mutex(
    csv_path: PathLike | None = "mutex_resultado.csv",
    hold: float = 0.5,
    out: TextIO | None = None,
) -> list[SyncRecord]:
    """Three threads take turns holding a mutex for ``hold`` seconds."""
    if out is None:
        out = sys.stdout
    mutex = threading.Lock()

    def critical(worker_id: int) -> None:
        with mutex:
            print(f"[Mutex] Proceso {worker_id} accede al recurso.", file=out)
            time.sleep(hold)

    return _run("mutex", critical, csv_path, out)


def simulate_semaphore(
    csv_path: PathLike | None = "semaforo_resultado.csv",
    hold: float = 0.5,
    out: TextIO | None = None,
) -> list[SyncRecord]:
    """Three threads share a binary semaphore, each holding it ``hold`` seconds."""
    if out is None:
        out = sys.stdout
    semaphore = _BinarySemaphore(out)

    def critical(worker_id: int) -> None:
        semaphore.wait(worker_id)
        time.sleep(hold)
        semaphore.signal(worker_id)

    return _run("semáforo", critical, csv_path, out)