import pytest

from simplesched.queue import MAX_PID, QueueEmptyError, QueueFullError, TaskQueue
from simplesched.tasks import Task


def make(n):
    return [Task(f"./prog{k}", pid=100 + k) for k in range(n)]


def test_fifo_order():
    queue = TaskQueue()
    tasks = make(5)
    for task in tasks:
        assert queue.enqueue(task) is task
    assert [queue.dequeue() for _ in tasks] == tasks
    assert queue.is_empty()


def test_dequeue_empty_raises():
    with pytest.raises(QueueEmptyError):
        TaskQueue().dequeue()


def test_default_capacity_is_max_pid():
    queue = TaskQueue()
    for task in make(MAX_PID):
        queue.enqueue(task)
    assert len(queue) == MAX_PID == 20
    with pytest.raises(QueueFullError):
        queue.enqueue(Task("./extra"))
    assert len(queue) == MAX_PID


def test_wraparound_after_full():
    queue = TaskQueue(capacity=3)
    a, b, c, d = make(4)
    for task in (a, b, c):
        queue.enqueue(task)
    assert queue.dequeue() is a
    queue.enqueue(d)
    assert list(queue) == [b, c, d]


def test_iteration_does_not_consume():
    queue = TaskQueue()
    tasks = make(3)
    for task in tasks:
        queue.enqueue(task)
    assert list(queue) == tasks
    assert len(queue) == 3


def test_invalid_capacity():
    with pytest.raises(ValueError):
        TaskQueue(capacity=0)


def test_display_empty():
    assert TaskQueue().display() == "Queue is empty\nsize 0\n\n"


def test_display_lists_pids_and_last_task():
    queue = TaskQueue()
    for task in make(3):
        queue.enqueue(task)
    text = queue.display()
    assert text.startswith("100 101 \n")
    assert "pid of process  ( ./prog2 ) is 102\n" in text
    assert text.endswith("size 3\n\n")


def test_display_single_task():
    queue = TaskQueue()
    queue.enqueue(Task("./only", pid=7))
    assert queue.display() == "\npid of process  ( ./only ) is 7\nsize 1\n\n"