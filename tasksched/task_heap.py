"""Binary min-heap of tasks keyed on priority."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from .task import Task


class TaskMinHeap:
    """Min-heap that yields the task with the smallest priority value first."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def insert_task(self, task: Task) -> None:
        """Add a task to the heap."""
        self._tasks.append(task)
        self._sift_up(len(self._tasks) - 1)

    def get_next_task(self) -> Task:
        """Remove and return the most urgent task.

        Raises IndexError when the heap is empty.
        """
        if not self._tasks:
            raise IndexError("heap is empty")
        top = self._tasks[0]
        last = self._tasks.pop()
        if self._tasks:
            self._tasks[0] = last
            self._sift_down(0)
        return top

    def show_tasks(self, out: TextIO | None = None) -> None:
        """Write every task in heap order, for debugging."""
        out = out if out is not None else sys.stdout
        for task in self._tasks:
            out.write(f"ID: {task.id}, priority: {task.priority}")

    def __len__(self) -> int:
        return len(self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def _sift_up(self, i: int) -> None:
        tasks = self._tasks
        while i > 0:
            parent = (i - 1) // 2
            if tasks[parent].priority <= tasks[i].priority:
                break
            tasks[parent], tasks[i] = tasks[i], tasks[parent]
            i = parent

    def _sift_down(self, i: int) -> None:
        tasks = self._tasks
        size = len(tasks)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and tasks[child].priority < tasks[smallest].priority:
                    smallest = child
            if smallest == i:
                return
            tasks[i], tasks[smallest] = tasks[smallest], tasks[i]
            i = smallest