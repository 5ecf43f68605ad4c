# schedsim

schedsim is a small simulator for teaching operating systems. It steps through
CPU scheduling algorithms one cycle at a time, and it shows how a mutex and a
semaphore make threads take turns with a shared resource.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
schedsim [--processes FILE] [--delay SECONDS]
```

- `--processes FILE` is the process list. The default is `../data/procesos.txt`.
  If the file cannot be opened, the command prints an error and goes on with an
  empty list.
- `--delay SECONDS` sets the pause after each cycle. In the synchronization runs
  it sets how long each thread holds the resource. If you leave it out, each
  simulation uses its own default (see below).

The command then reads a menu choice from standard input:

1. FCFS (First Come, First Served)
2. SJF (Shortest Job First, non-preemptive)
3. Round Robin (it also asks for the quantum)
4. SRTF (Shortest Remaining Time First, preemptive)
5. Priority (non-preemptive; a lower number means a higher priority)
6. Synchronization: it then asks for `1` (mutex) or `2` (semaphore)

Every scheduling run covers cycles 0 to 30. It prints what happens in each cycle,
then the waiting time (WT) and turnaround time (TAT) of each process and their
averages. It writes a Gantt chart as CSV with the header `Proceso,Inicio,Fin` to
the current directory:

| Algorithm   | File                 |
|-------------|----------------------|
| FCFS        | `gantt_fcfs.csv`     |
| SJF         | `gantt_sjf.csv`      |
| Round Robin | `gantt_rr.csv`       |
| SRTF        | `gantt_srtf.csv`     |
| Priority    | `gantt_priority.csv` |

The synchronization runs start three threads. Each one writes a line
`Proceso,Inicio,Duracion` (times in milliseconds) to `mutex_resultado.csv` or
`semaforo_resultado.csv`.

An invalid menu choice, an invalid quantum or an invalid synchronization choice
prints a message to standard error, and the command exits with status 1.

## Input files

Processes come one per line as `pid, burst, arrival, priority`:

```
P1, 5, 0, 2
P2, 3, 1, 1
P3, 1, 2, 3
```

Resources come as `name, count`. Resource actions come as
`pid, READ|WRITE, resource, cycle`. The loaders remove every space in a field.
A numeric field is read from its leading integer. A line with too few fields is
logged as a warning and skipped. A field that is not an integer raises
`ValueError`, and so does an action type other than `READ` or `WRITE`.

## Library use

```python
from schedsim.parser import load_processes
from schedsim.scheduling import simulate_round_robin

processes = load_processes("procesos.txt")
result = simulate_round_robin(processes, quantum=2, max_cycles=30, delay=0, gantt_path=None)
for m in result.metrics:
    print(m.pid, m.waiting_time, m.turnaround_time)
print(result.average_waiting_time(), result.average_turnaround_time())
```

`schedsim.scheduling` provides `simulate_fcfs`, `simulate_sjf`,
`simulate_round_robin`, `simulate_srtf` and `simulate_priority`. Each one takes:

- `max_cycles`: default 30.
- `delay`: the pause in seconds after each cycle. The default is 0.3, or 0 for SJF.
- `gantt_path`: where the Gantt CSV goes. The default is the file named in the
  table above. Pass `None` to write nothing.
- `out`: the text stream for the trace. The default is standard output.

Each one returns a `ScheduleResult`. It holds `gantt`, a list of `GanttEvent`
(`pid`, `start`, `end`), and `metrics`, a list of `ProcessMetrics`. The averages
are NaN when there are no metrics. `schedsim.gantt.save_gantt_csv(events, path)`
writes Gantt events to a file.

`schedsim.models` defines `Process`, `Action`, `ActionType`,
`parse_action_type`, `GanttEvent` and `Resource`. A `Resource` is a counting
semaphore. It has `acquire()` and `release()`, and it also works as a context
manager.

### Resource-access simulation

```python
from schedsim.parser import load_actions, load_resources
from schedsim.actions import run_action_simulation

stats = run_action_simulation(load_actions("acciones.txt"), load_resources("recursos.txt"),
                              max_cycles=20, delay=0.5)
print(stats.total, stats.reads, stats.writes, stats.per_process)
```

In each cycle, every action for that cycle runs in its own thread. The thread
holds its resource for `delay` seconds. An action that names an unknown resource
is reported on standard error and is not counted. The function returns an
`ActionStats`.

### Synchronization

`schedsim.sync.simulate_mutex(csv_path, hold, out)` and
`schedsim.sync.simulate_semaphore(csv_path, hold, out)` return one `SyncRecord`
(`process`, `start`, `duration`) for each of the three threads. Pass
`csv_path=None` to skip the CSV file.

## What it does not do

The `schedsim` command has no menu entry for the resource-access simulation.
It does not read resource or action files. Use `run_action_simulation` from
Python for that. The package also draws no charts: Gantt data only goes to CSV
files.