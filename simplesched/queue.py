"""Bounded FIFO queue of tasks used for the ready and running lists."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from simplesched.tasks import Task

MAX_PID = 20


class QueueFullError(Exception):
    """Raised when a task is added to a queue already holding its capacity."""


class QueueEmptyError(Exception):
    """Raised when a task is taken from an empty queue."""


class TaskQueue:
    """First-in first-out queue holding at most ``capacity`` tasks."""

    def __init__(self, capacity: int = MAX_PID) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Task] = deque()

    def enqueue(self, task: Task) -> Task:
        """Append *task* at the rear and return it."""
        if len(self._items) >= self.capacity:
            raise QueueFullError("Queue is full")
        self._items.append(task)
        return task

    def dequeue(self) -> Task:
        """Remove and return the task at the front."""
        if not self._items:
            raise QueueEmptyError("Queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._items))

    def display(self) -> str:
        """Text listing the queued pids, naming the last task, and the size."""
        if not self._items:
            body = "Queue is empty\n"
        else:
            *head, last = self._items
            body = "".join(f"{task.pid} " for task in head)
            body += f"\npid of process  ( {last.file_name} ) is {last.pid}\n"
        return body + f"size {len(self._items)}\n\n"