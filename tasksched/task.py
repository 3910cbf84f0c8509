"""Task records, execution results and random workload generation."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """A unit of work that becomes ready at ``generation_time``.

    A lower ``priority`` value means a more urgent task.
    """

    id: int
    generation_time: float
    execution_time: float
    priority: int


@dataclass(frozen=True)
class Execution:
    """One run of a task by a scheduler."""

    task: Task
    start_time: float
    end_time: float

    @property
    def wait_time(self) -> float:
        """Time the task spent ready but not running."""
        return self.start_time - self.task.generation_time

    @property
    def turnaround(self) -> float:
        """Time from the task's arrival to its completion."""
        return self.end_time - self.task.generation_time


def generate_tasks(n: int, max_time: float, rng: random.Random) -> list[Task]:
    """Create ``n`` random tasks that all finish before ``max_time``.

    Execution times and priorities are whole numbers from 1 to 10; each
    generation time is a whole number from 1 to ``max_time - execution_time``.
    Raises ValueError when ``max_time`` leaves no room for a task.
    """
    tasks = []
    for task_id in range(n):
        exec_time = float(rng.randrange(10) + 1)
        span = int(max_time - exec_time)
        if span <= 0:
            raise ValueError(
                f"time window {max_time:g} is too short for a task of length {exec_time:g}"
            )
        generation_time = float(rng.randrange(span) + 1)
        priority = rng.randrange(10) + 1
        tasks.append(Task(task_id, generation_time, exec_time, priority))
    return tasks