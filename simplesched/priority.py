"""Ready queues split by priority, served from the highest priority down."""

from __future__ import annotations

from typing import Iterator

from simplesched.queue import MAX_PID, QueueEmptyError, TaskQueue
from simplesched.tasks import Task, TaskState

PRIORITIES = (1, 2, 3, 4)


def parse_priority(token: str) -> int:
    """Read the priority digit, the second-to-last character of *token*."""
    if len(token) < 2:
        raise ValueError(f"malformed priority {token!r}")
    digit = token[-2]
    if not digit.isdigit() or int(digit) not in PRIORITIES:
        raise ValueError(f"priority in {token!r} must be one of 1-4")
    return int(digit)


class ReadyQueues:
    """One FIFO queue per priority level 1-4; level 4 is served first."""

    def __init__(self, capacity: int = MAX_PID) -> None:
        self._queues = {level: TaskQueue(capacity) for level in PRIORITIES}

    def _queue_for(self, task: Task) -> TaskQueue:
        try:
            return self._queues[task.priority]
        except KeyError:
            raise ValueError(
                f"task {task.file_name!r} has invalid priority {task.priority}"
            ) from None

    def enqueue(self, task: Task) -> Task:
        """Add *task* to the queue of its own priority."""
        return self._queue_for(task).enqueue(task)

    def dequeue(self) -> Task:
        """Take the oldest task from the highest non-empty priority level."""
        for level in reversed(PRIORITIES):
            queue = self._queues[level]
            if not queue.is_empty():
                return queue.dequeue()
        raise QueueEmptyError("Queue is empty")

    def is_empty(self) -> bool:
        return all(queue.is_empty() for queue in self._queues.values())

    def __len__(self) -> int:
        return sum(len(queue) for queue in self._queues.values())

    def __iter__(self) -> Iterator[Task]:
        for level in reversed(PRIORITIES):
            yield from self._queues[level]

    def add_waiting_time(self, amount: float) -> None:
        """Charge *amount* of waiting time to every task still ready."""
        for task in self:
            if task.state is TaskState.READY:
                task.waiting_time += amount