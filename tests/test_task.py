import random

import pytest

from tasksched.task import Execution, Task, generate_tasks


def test_generate_tasks_count_and_ids():
    tasks = generate_tasks(25, 100.0, random.Random(1024))
    assert [t.id for t in tasks] == list(range(25))


def test_generate_tasks_ranges():
    for task in generate_tasks(200, 100.0, random.Random(7)):
        assert 1.0 <= task.execution_time <= 10.0
        assert task.execution_time.is_integer()
        assert 1 <= task.priority <= 10
        assert 1.0 <= task.generation_time <= 100.0 - task.execution_time
        assert task.generation_time + task.execution_time <= 100.0


def test_generate_tasks_is_deterministic_for_a_seed():
    first = generate_tasks(30, 50.0, random.Random(3))
    second = generate_tasks(30, 50.0, random.Random(3))
    assert first == second


def test_generate_tasks_zero():
    assert generate_tasks(0, 100.0, random.Random(1)) == []


def test_generate_tasks_window_too_short():
    with pytest.raises(ValueError):
        generate_tasks(5, 1.0, random.Random(1))


def test_execution_times():
    task = Task(0, 2.0, 3.0, 5)
    run = Execution(task, 5.0, 8.0)
    assert run.wait_time == 3.0
    assert run.turnaround == run.wait_time + task.execution_time


def test_execution_without_wait():
    task = Task(1, 4.0, 2.0, 1)
    run = Execution(task, 4.0, 6.0)
    assert run.wait_time == 0.0
    assert run.turnaround == task.execution_time