"""Lottery scheduling: urgent tasks hold more tickets."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable
from typing import TextIO

from .data_base import TaskLog
from .task import Execution, Task

TICKET_BASE = 11


def run_lottery_algorithm(
    time_window: float,
    tasks: Iterable[Task],
    rng: random.Random | None = None,
    log: TaskLog | None = None,
    out: TextIO | None = None,
) -> list[Execution]:
    """Draw ready tasks by lottery until none remain or the window closes.

    A task of priority ``p`` holds ``11 - p`` tickets. While nothing is ready
    the clock jumps to the next arrival. Returns the executions in order.
    Raises ValueError if the ready tasks hold no tickets at all.
    """
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    pending = list(tasks)
    executions: list[Execution] = []
    current_time = 0.0

    print("\n=== ALGORITMO DE LOTERIA ===", file=out)

    while pending and current_time < time_window:
        ready = [i for i, t in enumerate(pending) if t.generation_time <= current_time]

        if not ready:
            next_arrival = min(
                [time_window] + [t.generation_time for t in pending]
            )
            if next_arrival > current_time:
                current_time = next_arrival
            continue

        print(f"\nTarefas prontas no tempo {current_time:g}:", file=out)
        for index in ready:
            task = pending[index]
            print(
                f"  ID: {task.id} | prioridade: {task.priority}"
                f" | geração: {task.generation_time:g}"
                f" | execução: {task.execution_time:g}",
                file=out,
            )

        ticket_pool = [
            index
            for index in ready
            for _ in range(max(0, TICKET_BASE - pending[index].priority))
        ]
        if not ticket_pool:
            raise ValueError("no ready task holds a lottery ticket")

        winner = ticket_pool[rng.randrange(len(ticket_pool))]
        task = pending[winner]
        run = Execution(task, current_time, current_time + task.execution_time)

        print(
            f"Tarefa sorteada ID: {task.id} | prioridade (tickets): {task.priority}"
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
            log.record(task, run.start_time, run.end_time, "Loteria")
        executions.append(run)
        current_time = run.end_time
        del pending[winner]

    return executions