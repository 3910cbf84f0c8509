import io
import random

import pytest

from tasksched.task import Task
from tasksched.task_heap import TaskMinHeap


def _random_tasks(count, seed):
    rng = random.Random(seed)
    return [Task(i, float(i), 1.0, rng.randint(1, 10)) for i in range(count)]


def test_pops_in_priority_order():
    heap = TaskMinHeap()
    tasks = _random_tasks(50, 11)
    for task in tasks:
        heap.insert_task(task)
    popped = [heap.get_next_task() for _ in range(len(tasks))]
    priorities = [t.priority for t in popped]
    assert priorities == sorted(priorities)
    assert sorted(t.id for t in popped) == list(range(50))


def test_empty_heap_raises():
    heap = TaskMinHeap()
    with pytest.raises(IndexError):
        heap.get_next_task()


def test_len_and_bool():
    heap = TaskMinHeap()
    assert not heap
    assert len(heap) == 0
    heap.insert_task(Task(0, 0.0, 1.0, 4))
    heap.insert_task(Task(1, 0.0, 1.0, 2))
    assert heap
    assert len(heap) == 2
    heap.get_next_task()
    assert len(heap) == 1


def test_iter_yields_all_tasks_with_minimum_first():
    heap = TaskMinHeap()
    tasks = _random_tasks(20, 5)
    for task in tasks:
        heap.insert_task(task)
    contents = list(heap)
    assert sorted(contents, key=lambda t: t.id) == tasks
    assert contents[0].priority == min(t.priority for t in tasks)


def test_show_tasks_format():
    heap = TaskMinHeap()
    heap.insert_task(Task(1, 0.0, 1.0, 3))
    out = io.StringIO()
    heap.show_tasks(out)
    assert out.getvalue() == "ID: 1, priority: 3"


def test_interleaved_insert_and_pop():
    heap = TaskMinHeap()
    heap.insert_task(Task(0, 0.0, 1.0, 5))
    heap.insert_task(Task(1, 0.0, 1.0, 3))
    assert heap.get_next_task().id == 1
    heap.insert_task(Task(2, 0.0, 1.0, 1))
    assert heap.get_next_task().id == 2
    assert heap.get_next_task().id == 0
    assert not heap