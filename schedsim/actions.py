"""Concurrent simulation of processes reading and writing shared resources."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from schedsim.models import Action, ActionType, Resource


@dataclass
class ActionStats:
    """Counts of the actions that completed during a simulation."""

    total: int = 0
    reads: int = 0
    writes: int = 0
    per_process: dict[str, int] = field(default_factory=dict)

    def record(self, action: Action) -> None:
        """Count one completed action."""
        self.total += 1
        if action.kind is ActionType.READ:
            self.reads += 1
        else:
            self.writes += 1
        self.per_process[action.pid] = self.per_process.get(action.pid, 0) + 1


def _pause(delay: float) -> None:
    if delay > 0:
        time.sleep(delay)


def run_action_simulation(
    actions: Sequence[Action],
    resources: Iterable[Resource],
    max_cycles: int = 20,
    delay: float = 0.5,
    out: TextIO | None = None,
) -> ActionStats:
    """Run every action in its cycle, one thread per action, and report totals.

    Each action holds its resource for ``delay`` seconds, and each cycle is
    followed by a pause of the same length. Actions naming an unknown
    resource are reported on standard error and not counted.
    """
    if out is None:
        out = sys.stdout

    registry: dict[str, Resource] = {}
    for resource in resources:
        registry.setdefault(resource.name, resource)

    stats = ActionStats()
    lock = threading.Lock()

    def emit(message: str) -> None:
        with lock:
            print(message, file=out)

    def perform(action: Action) -> None:
        resource = registry.get(action.resource)
        if resource is None:
            print(f"[ERROR] Recurso no encontrado: {action.resource}", file=sys.stderr)
            return
        verb = "leer" if action.kind is ActionType.READ else "escribir"
        emit(
            f"Proceso {action.pid} intentando {verb} {action.resource} "
            f"en ciclo {action.cycle}"
        )
        with resource:
            emit(
                f"[ACCESED] Proceso {action.pid} accedió a {action.resource} "
                f"({action.kind.value})"
            )
            _pause(delay)
        emit(f"[LIBERADO] Proceso {action.pid} liberó {action.resource}")
        with lock:
            stats.record(action)

    print("\n=== Iniciando simulación ===", file=out)

    for cycle in range(max_cycles + 1):
        emit(f"\n--- Ciclo {cycle} ---")
        threads = [
            threading.Thread(target=perform, args=(action,))
            for action in actions
            if action.cycle == cycle
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        _pause(delay)

    print("\n--- Resumen de métricas ---", file=out)
    print(f"Total de acciones ejecutadas: {stats.total}", file=out)
    print(f"Acciones de lectura (READ): {stats.reads}", file=out)
    print(f"Acciones de escritura (WRITE): {stats.writes}", file=out)
    print("\nAccesos por proceso:", file=out)
    for pid, count in stats.per_process.items():
        print(f" - {pid}: {count} accesos", file=out)
    print("\n=== Simulación finalizada ===", file=out)

    return stats