"""Task records kept by the scheduler and the termination report."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class TaskState(Enum):
    """Lifecycle state of a submitted task."""

    UNUSED = -1
    READY = 0
    RUNNING = 1
    TERMINATED = 2


@dataclass(eq=False)
class Task:
    """A submitted program together with its scheduling bookkeeping.

    Times are seconds since the epoch; waiting time is in milliseconds.
    """

    file_name: str
    pid: int = 0
    priority: int = 1
    waiting_time: float = 0.0
    start_time: float = field(default_factory=time.time)
    termination_time: float | None = None
    state: TaskState = TaskState.READY

    def execution_time_ms(self) -> float:
        """Milliseconds between submission and termination."""
        if self.termination_time is None:
            raise ValueError(f"task {self.file_name!r} has not terminated")
        return (self.termination_time - self.start_time) * 1000.0

    def mark_terminated(self, when: float | None = None) -> None:
        """Record that the task finished at *when* (now by default)."""
        self.termination_time = time.time() if when is None else when
        self.state = TaskState.TERMINATED


def format_report(tasks: Iterable[Task]) -> str:
    """Describe each terminated task: name, waiting time and execution time."""
    blocks = []
    for number, task in enumerate(tasks, start=1):
        blocks.append(
            f"PROCESS {number}  TERMINATION QUEUE\n"
            f"Process {task.file_name}\n"
            f"Waiting Time {task.waiting_time:f}\n"
            f"Execution Time {task.execution_time_ms():f}\n"
            "\n\n"
        )
    return "".join(blocks)