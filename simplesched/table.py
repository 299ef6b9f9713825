"""Fixed-size process table holding every task that has not yet finished."""

from __future__ import annotations

from typing import Iterator

from simplesched.queue import MAX_PID
from simplesched.tasks import Task


class TableFullError(Exception):
    """Raised when every slot of the process table is in use."""


class ProcessTable:
    """Slots for live tasks, filled from just after the last slot used."""

    def __init__(self, capacity: int = MAX_PID) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Task | None] = [None] * capacity
        self.top = 0

    def add(self, task: Task) -> int:
        """Store *task* in the first free slot from ``top`` on; return the slot."""
        for offset in range(self.capacity):
            slot = (self.top + offset) % self.capacity
            if self._slots[slot] is None:
                self._slots[slot] = task
                self.top = slot
                return slot
        raise TableFullError("MAX_PID reached . Try again later")

    def remove(self, task: Task) -> int:
        """Free the slot holding *task* and return its index."""
        for slot, held in enumerate(self._slots):
            if held is task:
                self._slots[slot] = None
                return slot
        raise ValueError(f"task {task.file_name!r} is not in the process table")

    def __len__(self) -> int:
        return sum(held is not None for held in self._slots)

    def __iter__(self) -> Iterator[Task]:
        return iter([held for held in self._slots if held is not None])