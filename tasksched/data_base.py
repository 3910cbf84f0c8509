"""CSV log of task executions."""

from __future__ import annotations

import csv
from pathlib import Path

from .task import Task

DEFAULT_LOG_PATH = Path("results") / "task_log.csv"
HEADER = ("ID", "Priority", "GenerationTime", "StartTime", "EndTime", "Algorithm")


class TaskLog:
    """Append-only CSV file that records when each task ran."""

    def __init__(self, path: str | Path = DEFAULT_LOG_PATH) -> None:
        self.path = Path(path)

    def init(self) -> None:
        """Create or truncate the log and write the header row."""
        with self.path.open("w", encoding="utf-8", newline="") as file:
            file.write(",".join(HEADER) + "\n")

    def record(
        self, task: Task, start_time: float, end_time: float, algorithm_name: str
    ) -> None:
        """Append one execution row."""
        fields = (
            str(task.id),
            str(task.priority),
            f"{task.generation_time:g}",
            f"{start_time:g}",
            f"{end_time:g}",
            algorithm_name,
        )
        with self.path.open("a", encoding="utf-8", newline="") as file:
            file.write(",".join(fields) + "\n")

    def read(self) -> list[dict[str, str]]:
        """Return every logged row as a mapping from column name to text."""
        with self.path.open(encoding="utf-8", newline="") as file:
            return list(csv.DictReader(file))