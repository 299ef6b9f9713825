"""Round-robin scheduler that runs submitted programs a time slice at a time."""

from __future__ import annotations

import contextlib
import os
import signal
import subprocess
import threading
import time
from typing import Callable, Protocol

from simplesched.priority import PRIORITIES, ReadyQueues
from simplesched.queue import TaskQueue
from simplesched.table import ProcessTable
from simplesched.tasks import Task, TaskState, format_report

_IDLE_POLL = 0.05


class Launcher(Protocol):
    def start(self, file_name: str) -> int: ...

    def pause(self, pid: int) -> None: ...

    def resume(self, pid: int) -> None: ...

    def poll(self, pid: int) -> bool: ...


class ProcessLauncher:
    """Starts programs stopped, and pauses, resumes and polls them by pid."""

    def __init__(self) -> None:
        self._processes: dict[int, subprocess.Popen] = {}

    def _process(self, pid: int) -> subprocess.Popen:
        try:
            return self._processes[pid]
        except KeyError:
            raise ValueError(f"no process with pid {pid} was started here") from None

    def start(self, file_name: str) -> int:
        """Run *file_name* with no arguments, stop it at once and return its pid."""
        process = subprocess.Popen([file_name])
        with contextlib.suppress(ProcessLookupError):
            os.kill(process.pid, signal.SIGSTOP)
        self._processes[process.pid] = process
        return process.pid

    def pause(self, pid: int) -> None:
        """Stop the process; a process that has already gone is ignored."""
        self._process(pid)
        with contextlib.suppress(ProcessLookupError):
            os.kill(pid, signal.SIGSTOP)

    def resume(self, pid: int) -> None:
        """Let a stopped process continue."""
        self._process(pid)
        with contextlib.suppress(ProcessLookupError):
            os.kill(pid, signal.SIGCONT)

    def poll(self, pid: int) -> bool:
        """Whether the process has exited."""
        return self._process(pid).poll() is not None


class Scheduler:
    """Gives up to ``ncpu`` ready tasks a slice of ``tslice`` seconds each round."""

    def __init__(
        self,
        ncpu: int = 2,
        tslice: float = 4,
        launcher: Launcher | None = None,
    ) -> None:
        if ncpu < 1:
            raise ValueError("ncpu must be at least 1")
        if tslice < 0:
            raise ValueError("tslice must not be negative")
        self.ncpu = ncpu
        self.tslice = tslice
        self.launcher: Launcher = launcher if launcher is not None else ProcessLauncher()
        self.table = ProcessTable()
        self.ready = ReadyQueues()
        self.running = TaskQueue()
        self._terminated: list[Task] = []
        self._lock = threading.RLock()

    def submit(self, file_name: str, priority: int = 1) -> Task:
        """Start *file_name* stopped and queue it as ready at *priority*."""
        if priority not in PRIORITIES:
            raise ValueError(f"priority must be one of 1-4, not {priority}")
        task = Task(file_name, priority=priority)
        with self._lock:
            self.table.add(task)
            try:
                task.pid = self.launcher.start(file_name)
            except BaseException:
                self.table.remove(task)
                raise
            self.ready.enqueue(task)
        return task

    def _dispatch(self) -> None:
        with self._lock:
            for _ in range(self.ncpu):
                if self.ready.is_empty():
                    break
                task = self.ready.dequeue()
                task.state = TaskState.RUNNING
                self.launcher.resume(task.pid)
                self.running.enqueue(task)

    def _preempt(self) -> None:
        with self._lock:
            self.ready.add_waiting_time(self.tslice * 1000.0)
            while not self.running.is_empty():
                task = self.running.dequeue()
                if self.launcher.poll(task.pid):
                    self._retire(task)
                else:
                    self.launcher.pause(task.pid)
                    task.state = TaskState.READY
                    self.ready.enqueue(task)

    def _retire(self, task: Task) -> None:
        task.mark_terminated()
        self.table.remove(task)
        self._terminated.append(task)

    def _slice(self, wait: Callable[[float], object]) -> None:
        self._dispatch()
        wait(self.tslice)
        self._preempt()

    def run_slice(self) -> None:
        """Run one round: dispatch, let the slice elapse, then preempt."""
        self._slice(time.sleep)

    def _idle(self) -> bool:
        with self._lock:
            return self.ready.is_empty() and self.running.is_empty()

    def run(self, stop_event: threading.Event) -> None:
        """Schedule rounds until *stop_event* is set, idling while nothing is ready."""
        while not stop_event.is_set():
            if self._idle():
                stop_event.wait(_IDLE_POLL)
            else:
                self._slice(stop_event.wait)

    def shutdown(self) -> str:
        """Let every remaining task run to its end and return the termination report."""
        with self._lock:
            remaining = list(self.running) + list(self.ready)
            while not self.running.is_empty():
                self.running.dequeue()
            while not self.ready.is_empty():
                self.ready.dequeue()
            for task in remaining:
                task.state = TaskState.RUNNING
                self.launcher.resume(task.pid)
        while remaining:
            still_running = []
            for task in remaining:
                if self.launcher.poll(task.pid):
                    with self._lock:
                        self._retire(task)
                else:
                    still_running.append(task)
            remaining = still_running
            if remaining:
                time.sleep(_IDLE_POLL)
        return format_report(self.terminated())

    def terminated(self) -> list[Task]:
        """Tasks that have finished, in the order they were seen to finish."""
        with self._lock:
            return list(self._terminated)