"""Non-preemptive priority scheduling."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .data_base import TaskLog
from .task import Execution, Task
from .task_heap import TaskMinHeap


def run_priority_algorithm(
    time_window: float,
    tasks: Iterable[Task],
    log: TaskLog | None = None,
    out: TextIO | None = None,
) -> list[Execution]:
    """Run tasks most-urgent-first until none remain or time passes the window.

    While nothing is ready the clock advances in steps of one time unit.
    Returns the executions in the order they ran.
    """
    out = out if out is not None else sys.stdout
    pending = list(tasks)
    heap = TaskMinHeap()
    executions: list[Execution] = []
    current_time = 0.0

    print("\n=== ALGORITMO DE PRIORIDADE ===", file=out)

    while True:
        arrived = [t for t in pending if t.generation_time <= current_time]
        pending = [t for t in pending if t.generation_time > current_time]
        for task in arrived:
            heap.insert_task(task)

        if heap:
            print(f"\nTarefas prontas no tempo {current_time:g}:", file=out)
            for task in arrived:
                print(
                    f"  ID: {task.id} | prioridade: {task.priority}"
                    f" | geração: {task.generation_time:g}"
                    f" | execução: {task.execution_time:g}",
                    file=out,
                )

            task = heap.get_next_task()
            run = Execution(task, current_time, current_time + task.execution_time)

            print(
                f"Tarefa executada ID: {task.id} | prioridade: {task.priority}"
                f" | tempo de geração: {task.generation_time:g}"
                f" | tempo_exec: {task.execution_time:g}"
                f" | tempo atual: {current_time:g}",
                file=out,
            )
            print(
                f"→ Tempo de espera: {run.wait_time:g} | Turnaround: {run.turnaround:g}",
                file=out,
            )

            if log is not None:
                log.record(task, run.start_time, run.end_time, "Prioridade")
            executions.append(run)
            current_time = run.end_time
        else:
            current_time += 1.0

        if not ((pending or heap) and current_time <= time_window):
            break

    return executions