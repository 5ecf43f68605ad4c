"""Cycle-by-cycle CPU scheduling simulations with Gantt output and metrics."""

from __future__ import annotations

import math
import os
import sys
import time
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO

from schedsim.gantt import save_gantt_csv
from schedsim.models import GanttEvent, Process

PathLike = str | os.PathLike[str]


@dataclass(frozen=True)
class ProcessMetrics:
    """Waiting and turnaround time of one process."""

    pid: str
    waiting_time: int
    turnaround_time: int


@dataclass
class ScheduleResult:
    """The Gantt events and per-process metrics of a simulation run."""

    gantt: list[GanttEvent] = field(default_factory=list)
    metrics: list[ProcessMetrics] = field(default_factory=list)

    def average_waiting_time(self) -> float:
        """Mean waiting time, or NaN when there are no metrics."""
        if not self.metrics:
            return math.nan
        return sum(m.waiting_time for m in self.metrics) / len(self.metrics)

    def average_turnaround_time(self) -> float:
        """Mean turnaround time, or NaN when there are no metrics."""
        if not self.metrics:
            return math.nan
        return sum(m.turnaround_time for m in self.metrics) / len(self.metrics)


@dataclass(eq=False)
class _Job:
    process: Process
    remaining: int = 0
    start: int = -1
    finish: int = -1
    done: bool = False

    def __post_init__(self) -> None:
        self.remaining = self.process.burst_time

    @property
    def pid(self) -> str:
        return self.process.pid


def _pause(delay: float) -> None:
    if delay > 0:
        time.sleep(delay)


def _fmt(value: float) -> str:
    return f"{value:g}"


def _report(
    result: ScheduleResult,
    name: str,
    out: TextIO,
    *,
    skip_averages_if_empty: bool = False,
) -> None:
    print(f"\n--- Métricas {name} ---", file=out)
    for m in result.metrics:
        print(f"{m.pid} - WT: {m.waiting_time}, TAT: {m.turnaround_time}", file=out)
    if skip_averages_if_empty and not result.metrics:
        return
    print(
        f"\nPromedio WT: {_fmt(result.average_waiting_time())}, "
        f"Promedio TAT: {_fmt(result.average_turnaround_time())}",
        file=out,
    )


def _finish(
    result: ScheduleResult, gantt_path: PathLike | None
) -> ScheduleResult:
    if gantt_path is not None:
        save_gantt_csv(result.gantt, gantt_path)
    return result


def _announce_arrivals(jobs: Sequence[_Job], cycle: int, out: TextIO) -> list[_Job]:
    arrived = [job for job in jobs if job.process.arrival_time == cycle]
    for job in arrived:
        print(f">> Proceso {job.pid} ha llegado al ciclo {cycle}", file=out)
    return arrived


def _metrics_from_jobs(jobs: Sequence[_Job]) -> list[ProcessMetrics]:
    metrics = []
    for job in jobs:
        turnaround = job.finish - job.process.arrival_time
        metrics.append(
            ProcessMetrics(job.pid, turnaround - job.process.burst_time, turnaround)
        )
    return metrics


def simulate_fcfs(
    processes: Sequence[Process],
    max_cycles: int = 30,
    delay: float = 0.3,
    gantt_path: PathLike | None = "gantt_fcfs.csv",
    out: TextIO | None = None,
) -> ScheduleResult:
    """First come, first served: run each arrival to completion in order."""
    out = out if out is not None else sys.stdout
    jobs = [_Job(p) for p in processes]
    ready: deque[_Job] = deque()
    running: _Job | None = None
    gantt: list[GanttEvent] = []

    print("\n=== Simulación FCFS ===", file=out)

    for cycle in range(max_cycles + 1):
        ready.extend(_announce_arrivals(jobs, cycle, out))

        if running is None and ready:
            running = ready.popleft()
            running.start = cycle
            print(f">> Proceso {running.pid} inicia ejecución en ciclo {cycle}", file=out)

        if running is not None:
            print(f"Ciclo {cycle}: ejecutando {running.pid}", file=out)
            running.remaining -= 1
            if running.remaining == 0:
                running.finish = cycle + 1
                print(f">> Proceso {running.pid} finalizó en ciclo {cycle + 1}", file=out)
                gantt.append(GanttEvent(running.pid, running.start, running.finish))
                running = None
        else:
            print(f"Ciclo {cycle}: CPU ociosa", file=out)

        _pause(delay)

    metrics = [
        ProcessMetrics(
            job.pid,
            job.start - job.process.arrival_time,
            job.finish - job.process.arrival_time,
        )
        for job in jobs
    ]
    result = ScheduleResult(gantt, metrics)
    _report(result, "FCFS", out)
    return _finish(result, gantt_path)


def simulate_sjf(
    processes: Sequence[Process],
    max_cycles: int = 30,
    delay: float = 0.0,
    gantt_path: PathLike | None = "gantt_sjf.csv",
    out: TextIO | None = None,
) -> ScheduleResult:
    """Shortest job first, non-preemptive."""
    out = out if out is not None else sys.stdout
    print("\n=== Simulación SJF ===", file=out)

    ready: list[Process] = []
    gantt: list[GanttEvent] = []
    metrics: list[ProcessMetrics] = []
    original_burst: dict[str, int] = {}
    for p in processes:
        original_burst.setdefault(p.pid, p.burst_time)

    current: Process | None = None
    remaining = 0
    started = 0

    for cycle in range(max_cycles + 1):
        for p in processes:
            if p.arrival_time == cycle:
                print(f">> Proceso {p.pid} ha llegado al ciclo {cycle}", file=out)
                ready.append(p)

        if current is None and ready:
            ready.sort(key=lambda p: p.burst_time)
            current = ready.pop(0)
            remaining = current.burst_time
            started = cycle
            print(f">> Proceso {current.pid} inicia ejecución en ciclo {cycle}", file=out)

        if current is not None:
            print(f"Ciclo {cycle}: ejecutando {current.pid}", file=out)
            remaining -= 1
            if remaining == 0:
                end = cycle + 1
                print(f">> Proceso {current.pid} finalizó en ciclo {end}", file=out)
                gantt.append(GanttEvent(current.pid, started, end))
                turnaround = end - current.arrival_time
                metrics.append(
                    ProcessMetrics(
                        current.pid,
                        turnaround - original_burst[current.pid],
                        turnaround,
                    )
                )
                current = None
        else:
            print(f"Ciclo {cycle}: CPU ociosa", file=out)

        _pause(delay)

    result = ScheduleResult(gantt, metrics)
    _report(result, "SJF", out, skip_averages_if_empty=True)
    return _finish(result, gantt_path)


def simulate_round_robin(
    processes: Sequence[Process],
    quantum: int = 2,
    max_cycles: int = 30,
    delay: float = 0.3,
    gantt_path: PathLike | None = "gantt_rr.csv",
    out: TextIO | None = None,
) -> ScheduleResult:
    """Round robin with a fixed time quantum."""
    out = out if out is not None else sys.stdout
    print(f"\n=== Simulación Round Robin (Quantum = {quantum}) ===", file=out)

    jobs = [_Job(p) for p in processes]
    ready: deque[_Job] = deque()
    running: _Job | None = None
    quantum_left = quantum
    slice_start = -1
    gantt: list[GanttEvent] = []

    for cycle in range(max_cycles + 1):
        ready.extend(_announce_arrivals(jobs, cycle, out))

        if running is None and ready:
            running = ready.popleft()
            if running.start == -1:
                running.start = cycle
            quantum_left = min(quantum, running.remaining)
            slice_start = cycle
            print(
                f">> Proceso {running.pid} inicia/reanuda ejecución en ciclo {cycle}",
                file=out,
            )

        if running is not None:
            print(f"Ciclo {cycle}: ejecutando {running.pid}", file=out)
            running.remaining -= 1
            quantum_left -= 1
            if running.remaining == 0:
                running.finish = cycle + 1
                gantt.append(GanttEvent(running.pid, slice_start, cycle + 1))
                print(f">> Proceso {running.pid} finalizó en ciclo {cycle + 1}", file=out)
                running = None
            elif quantum_left == 0:
                gantt.append(GanttEvent(running.pid, slice_start, cycle + 1))
                ready.append(running)
                running = None
        else:
            print(f"Ciclo {cycle}: CPU ociosa", file=out)

        _pause(delay)

    last_end: dict[str, int] = {}
    for event in gantt:
        last_end[event.pid] = max(last_end.get(event.pid, 0), event.end)

    metrics = []
    for p in processes:
        turnaround = last_end.get(p.pid, 0) - p.arrival_time
        metrics.append(ProcessMetrics(p.pid, turnaround - p.burst_time, turnaround))

    result = ScheduleResult(gantt, metrics)
    _report(result, "Round Robin", out)
    return _finish(result, gantt_path)


def simulate_srtf(
    processes: Sequence[Process],
    max_cycles: int = 30,
    delay: float = 0.3,
    gantt_path: PathLike | None = "gantt_srtf.csv",
    out: TextIO | None = None,
) -> ScheduleResult:
    """Shortest remaining time first, preemptive."""
    out = out if out is not None else sys.stdout
    print("\n=== Simulación SRTF ===", file=out)

    jobs = [_Job(p) for p in processes]
    ready: list[_Job] = []
    running: _Job | None = None
    slice_start = -1
    gantt: list[GanttEvent] = []

    for cycle in range(max_cycles + 1):
        ready.extend(_announce_arrivals(jobs, cycle, out))

        if ready:
            ready.sort(key=lambda job: job.remaining)
            if running is None or running.remaining > ready[0].remaining:
                if running is not None and running.remaining > 0:
                    gantt.append(GanttEvent(running.pid, slice_start, cycle))
                    print(
                        f">> Proceso {running.pid} fue interrumpido en ciclo {cycle}",
                        file=out,
                    )
                    ready.append(running)

                running = ready.pop(0)
                if running.start == -1:
                    running.start = cycle
                slice_start = cycle
                print(
                    f">> Proceso {running.pid} inicia/reanuda ejecución en ciclo {cycle}",
                    file=out,
                )

        if running is not None:
            print(f"Ciclo {cycle}: ejecutando {running.pid}", file=out)
            running.remaining -= 1
            if running.remaining == 0:
                running.finish = cycle + 1
                gantt.append(GanttEvent(running.pid, slice_start, cycle + 1))
                print(f">> Proceso {running.pid} finalizó en ciclo {cycle + 1}", file=out)
                running = None
        else:
            print(f"Ciclo {cycle}: CPU ociosa", file=out)

        _pause(delay)

    result = ScheduleResult(gantt, _metrics_from_jobs(jobs))
    _report(result, "SRTF", out)
    return _finish(result, gantt_path)


def simulate_priority(
    processes: Sequence[Process],
    max_cycles: int = 30,
    delay: float = 0.3,
    gantt_path: PathLike | None = "gantt_priority.csv",
    out: TextIO | None = None,
) -> ScheduleResult:
    """Non-preemptive priority scheduling; a lower number is a higher priority."""
    out = out if out is not None else sys.stdout
    print("\n=== Simulación Priority ===", file=out)

    jobs = [_Job(p) for p in processes]
    running: _Job | None = None
    slice_start = -1
    gantt: list[GanttEvent] = []

    for cycle in range(max_cycles + 1):
        _announce_arrivals(jobs, cycle, out)

        if running is None:
            candidates = [
                job
                for job in jobs
                if not job.done and job.process.arrival_time <= cycle
            ]
            if candidates:
                running = min(candidates, key=lambda job: job.process.priority)
                if running.start == -1:
                    running.start = cycle
                slice_start = cycle
                print(
                    f">> Proceso {running.pid} inicia ejecución en ciclo {cycle}",
                    file=out,
                )

        if running is not None:
            print(f"Ciclo {cycle}: ejecutando {running.pid}", file=out)
            running.remaining -= 1
            if running.remaining == 0:
                running.finish = cycle + 1
                running.done = True
                gantt.append(GanttEvent(running.pid, slice_start, cycle + 1))
                print(f">> Proceso {running.pid} finalizó en ciclo {cycle + 1}", file=out)
                running = None
        else:
            print(f"Ciclo {cycle}: CPU ociosa", file=out)

        _pause(delay)

    result = ScheduleResult(gantt, _metrics_from_jobs(jobs))
    _report(result, "Priority", out)
    return _finish(result, gantt_path)