"""Interactive command shell that hands programs to the scheduler."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import threading
from typing import Sequence, TextIO

from simplesched.priority import parse_priority
from simplesched.queue import QueueFullError
from simplesched.scheduler import Scheduler
from simplesched.table import TableFullError

SUBMIT = "submit"
DEFAULT_PRIORITY = 1
_USAGE = "usage: submit <program> [priority]"


def split_line(line: str) -> list[str]:
    """Split a command line into words separated by spaces."""
    return [word for word in line.rstrip("\n").split(" ") if word]


def parse_submit(args: Sequence[str]) -> tuple[str, int]:
    """Return the program and priority named by a ``submit`` command."""
    if not args or args[0] != SUBMIT:
        raise ValueError("not a submit command")
    if len(args) == 2:
        return args[1], DEFAULT_PRIORITY
    if len(args) == 3:
        return args[1], parse_priority(args[2])
    raise ValueError(_USAGE)


class Shell:
    """Reads commands, submitting programs or running them in the foreground."""

    def __init__(self, scheduler: Scheduler, out: TextIO | None = None) -> None:
        self.scheduler = scheduler
        self.out = out if out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def execute(self, args: Sequence[str]) -> bool:
        """Carry out one command; return whether the shell should keep reading."""
        if not args:
            return True
        if args[0] == SUBMIT:
            self._submit(args)
        else:
            self._run_foreground(args[0])
        return True

    def _submit(self, args: Sequence[str]) -> None:
        try:
            file_name, priority = parse_submit(args)
            task = self.scheduler.submit(file_name, priority)
        except (ValueError, TableFullError, QueueFullError, OSError) as exc:
            self._write(f"submit failed: {exc}\n")
            return
        self._write(
            f"pid of process  ( {task.file_name} ) is {task.pid}, "
            f"priority {task.priority}\n"
        )

    def _run_foreground(self, program: str) -> None:
        try:
            subprocess.run([program], check=False)
        except OSError:
            self._write(f"error in executing file {program}\n")

    def loop(self, stream: TextIO) -> None:
        """Prompt and execute lines from *stream* until it is exhausted."""
        while True:
            self._write(f"CShell> {os.getpid()}\n")
            line = stream.readline()
            if not line:
                break
            if not self.execute(split_line(line)):
                break


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shell with a scheduler in the background; report on exit."""
    parser = argparse.ArgumentParser(
        prog="simplesched",
        description="Shell that schedules submitted programs round-robin.",
    )
    parser.add_argument("ncpu", nargs="?", type=_positive_int, default=2)
    parser.add_argument("tslice", nargs="?", type=_non_negative_float, default=4.0)
    args = parser.parse_args(argv)

    scheduler = Scheduler(args.ncpu, args.tslice)
    stop = threading.Event()
    worker = threading.Thread(target=scheduler.run, args=(stop,), daemon=True)
    worker.start()
    shell = Shell(scheduler, sys.stdout)
    try:
        shell.loop(sys.stdin)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    finally:
        stop.set()
        worker.join()
    sys.stdout.write(scheduler.shutdown())
    sys.stdout.flush()
    return 0