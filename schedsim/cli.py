"""Interactive menu for the scheduling and synchronisation simulations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from schedsim.models import Process
from schedsim.parser import load_processes
from schedsim.scheduling import (
    simulate_fcfs,
    simulate_priority,
    simulate_round_robin,
    simulate_sjf,
    simulate_srtf,
)
from schedsim.sync import simulate_mutex, simulate_semaphore

DEFAULT_PROCESSES = "../data/procesos.txt"
MAX_CYCLES = 30


def _read_int(prompt: str) -> int | None:
    try:
        line = input(prompt)
    except EOFError:
        return None
    parts = line.split()
    if not parts:
        return None
    try:
        return int(parts[0])
    except ValueError:
        return None


def _load(path: str) -> list[Process]:
    try:
        return load_processes(path)
    except OSError:
        print(f"Error al abrir el archivo: {path}", file=sys.stderr)
        return []


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim", description="CPU scheduling and synchronisation simulator."
    )
    parser.add_argument(
        "--processes",
        default=DEFAULT_PROCESSES,
        help="file of pid,burst,arrival,priority lines",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="seconds to pause per cycle (and to hold resources)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for an algorithm on standard input and run it."""
    args = _build_parser().parse_args(argv)
    processes = _load(args.processes)
    timing = {} if args.delay is None else {"delay": args.delay}

    print("=== Selecciona el algoritmo de planificación ===")
    print("1. FCFS")
    print("2. SJF")
    print("3. Round Robin")
    print("4. SRTF (Shortest Remaining Time First)")
    print("5. Priority")
    print("6. Simulación de sincronización (mutex y semáforo)")
    option = _read_int("Opción: ")

    if option == 1:
        simulate_fcfs(processes, MAX_CYCLES, **timing)
    elif option == 2:
        simulate_sjf(processes, MAX_CYCLES, **timing)
    elif option == 3:
        quantum = _read_int("Ingresa el quantum para Round Robin: ")
        if quantum is None:
            print("Quantum inválido.", file=sys.stderr)
            return 1
        simulate_round_robin(processes, quantum, MAX_CYCLES, **timing)
    elif option == 4:
        simulate_srtf(processes, MAX_CYCLES, **timing)
    elif option == 5:
        simulate_priority(processes, MAX_CYCLES, **timing)
    elif option == 6:
        print("=== Selecciona el tipo de sincronización ===")
        print("1. Mutex")
        print("2. Semáforo")
        kind = _read_int("Opción: ")
        hold = {} if args.delay is None else {"hold": args.delay}
        if kind == 1:
            simulate_mutex(**hold)
        elif kind == 2:
            simulate_semaphore(**hold)
        else:
            print("Opción de sincronización inválida.", file=sys.stderr)
            return 1
    else:
        print("Opción inválida.", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())