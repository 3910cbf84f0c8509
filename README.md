# tasksched

`tasksched` runs the same randomly generated set of tasks through two
non-preemptive CPU scheduling policies and compares them:

- **Priority scheduling.** Each time the CPU is free, the ready task with the
  lowest priority number runs next. Priority 1 is the most urgent. While no
  task is ready, the clock advances one time unit at a time. The run stops
  when no tasks are left or when the clock passes the time window.
- **Lottery scheduling.** Each ready task holds `11 - priority` tickets, and a
  random draw picks the next task, so urgent tasks are more likely to win.
  While no task is ready, the clock jumps to the next arrival. The run stops
  when no tasks are left or when the clock reaches the time window.

Each task has an id, a generation (arrival) time, an execution time and a
priority. For every task it runs, a scheduler prints the tasks that are ready
and the task it picked, along with that task's waiting time and turnaround
time. The trace is printed in Portuguese. If a log is given, the scheduler
also appends one CSV row for each task it runs.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
tasksched [--seed N] [--tasks N] [--window T] [--log PATH]
```

The command generates a set of random tasks and runs the priority scheduler on
it, then the lottery scheduler on the same tasks. It prints a trace of both
runs and writes the execution log.

| Option     | Default                | Meaning                           |
|------------|------------------------|-----------------------------------|
| `--seed`   | `1024`                 | random seed                       |
| `--tasks`  | `25`                   | number of tasks                   |
| `--window` | `100.0`                | time window                       |
| `--log`    | `results/task_log.csv` | CSV file for the execution log    |

The log file is created or truncated at the start of the run. The command
does not create missing directories. If the log file cannot be created, it
prints `Erro ao criar arquivo de log: <path>` to standard error and goes on
without a log.

The log has these columns:

```
ID,Priority,GenerationTime,StartTime,EndTime,Algorithm
```

The `Algorithm` column is `Prioridade` for the priority scheduler and `Loteria`
for the lottery scheduler.

## Library use

```python
import random
import sys

from tasksched.task import generate_tasks
from tasksched.data_base import TaskLog
from tasksched.priority import run_priority_algorithm
from tasksched.lottery import run_lottery_algorithm

rng = random.Random(1024)
tasks = generate_tasks(25, 100.0, rng)

log = TaskLog("task_log.csv")
log.init()

by_priority = run_priority_algorithm(100.0, tasks, log, sys.stdout)
by_lottery = run_lottery_algorithm(100.0, tasks, rng, log, sys.stdout)

for run in by_priority:
    print(run.task.id, run.start_time, run.end_time, run.wait_time, run.turnaround)

for row in log.read():
    print(row)
```

### `tasksched.task`

- `Task`: a frozen dataclass with the fields `id`, `generation_time`,
  `execution_time` and `priority`.
- `Execution`: a frozen dataclass with the fields `task`, `start_time` and
  `end_time`, and the properties `wait_time` and `turnaround`.
- `generate_tasks(n, max_time, rng)`: makes `n` tasks. Each execution time and
  each priority is a whole number from 1 to 10. Each generation time is a whole
  number from 1 to `max_time - execution_time`. It raises `ValueError` if the
  window is too short for a task.

### `tasksched.task_heap`

`TaskMinHeap` is a binary min-heap keyed on priority.

- `insert_task` adds a task.
- `get_next_task` removes and returns the most urgent task. It raises
  `IndexError` when the heap is empty.
- `show_tasks` writes the tasks in heap order.
- `len()`, truth testing and iteration also work on the heap.

### `tasksched.data_base`

`TaskLog(path)` is the CSV log. The path defaults to `results/task_log.csv`.

- `init()` writes the header.
- `record(task, start_time, end_time, algorithm_name)` appends a row.
- `read()` returns the rows as dictionaries.

### `tasksched.priority` and `tasksched.lottery`

- `run_priority_algorithm(time_window, tasks, log=None, out=None)`
- `run_lottery_algorithm(time_window, tasks, rng=None, log=None, out=None)`

Both functions return the list of `Execution`s in the order the tasks ran,
and neither changes the task list it is given. `out` defaults to standard
output. The lottery raises `ValueError` if the ready tasks hold no tickets,
which happens when every ready task has a priority of 11 or more.

## Limitations

Both schedulers are non-preemptive: once a task starts, it runs to completion.
There is no preemption and no time slicing. Tasks that have not run when the
time window ends are left out of the results. The CSV log is only written; the
package does not analyse or summarise it.