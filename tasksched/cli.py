"""Command line entry point: compare priority and lottery scheduling."""

from __future__ import annotations

import argparse
import random
import sys

from .data_base import DEFAULT_LOG_PATH, TaskLog
from .lottery import run_lottery_algorithm
from .priority import run_priority_algorithm
from .task import generate_tasks


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tasksched",
        description="Run the same random workload through two schedulers.",
    )
    parser.add_argument("--seed", type=int, default=1024, help="random seed")
    parser.add_argument("--tasks", type=int, default=25, help="number of tasks")
    parser.add_argument("--window", type=float, default=100.0, help="time window")
    parser.add_argument(
        "--log", default=str(DEFAULT_LOG_PATH), help="CSV file for the execution log"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Generate tasks, schedule them with both algorithms and log the runs."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    log: TaskLog | None = TaskLog(args.log)
    try:
        log.init()
    except OSError:
        print(f"Erro ao criar arquivo de log: {args.log}", file=sys.stderr)
        log = None

    tasks = generate_tasks(args.tasks, args.window, rng)

    run_priority_algorithm(args.window, tasks, log=log)
    print("-------------------------------")
    run_lottery_algorithm(args.window, tasks, rng, log=log)
    return 0


if __name__ == "__main__":
    sys.exit(main())