# simplesched

A small interactive shell that runs programs directly or hands them to a
time-sliced scheduler. The scheduler lets up to `ncpu` submitted programs run
at once, stops them when their time slice ends and puts them back in line.
Programs carry a priority from 1 (lowest) to 4 (highest); higher priorities
are always picked first, and programs of equal priority take turns in
submission order.

## Installing

```
pip install .
```

## Using the shell

Start it with:

```
simplesched
```

Two optional arguments set the number of programs run at once (`ncpu`,
default 2, at least 1) and the length of a time slice in seconds (`tslice`,
default 4, not negative):

```
simplesched 3 0.5
```

The shell prints a `CShell> <pid>` prompt before each line it reads.

Any command other than `submit` is run in the foreground and the shell waits
for it to finish. Only the first word is run; further words are ignored:

```
ls
```

To hand a program to the scheduler instead, use `submit`. Without a priority
it goes in at priority 1:

```
submit ./long_job
```

A priority may be given as a third word; the character just before the
word's last character must be a digit from 1 to 4 and is taken as the
priority, so both of these submit at priority 3:

```
submit ./long_job [3]
submit ./long_job p3x
```

A malformed priority, a missing program name, too many words, or a full
process table is reported as `submit failed: ...` and the shell carries on.
On success the shell prints the program's pid and priority.

The shell stops at end of input or on Ctrl+C. It then lets every scheduled
program run to its end and prints a report for each one, numbered in the
order they finished, with its waiting time and its execution time, both in
milliseconds. Waiting time grows by one time slice for each round a program
spent waiting in the ready queues.

## Using it from Python

- `simplesched.tasks`: `Task`, `TaskState` and `format_report`, which builds
  the termination report text. `Task.execution_time_ms()` raises
  `ValueError` for a task that has not terminated.
- `simplesched.queue`: `TaskQueue`, a bounded first-in first-out queue
  (20 tasks by default) that raises `QueueFullError` and `QueueEmptyError`,
  and whose `display()` returns a text listing of its contents.
- `simplesched.table`: `ProcessTable`, the bounded table of live tasks,
  raising `TableFullError` when it has no room.
- `simplesched.priority`: `ReadyQueues`, one queue per priority level, and
  `parse_priority` for reading a priority word.
- `simplesched.scheduler`: `Scheduler`, which runs one round with
  `run_slice()` or keeps going with `run(stop_event)`, and finishes with
  `shutdown()`, returning the report; and `ProcessLauncher`, which starts
  programs stopped and pauses, resumes and polls them. Any object with the
  same four methods can be passed to `Scheduler` as its launcher.
- `simplesched.shell`: `Shell`, `split_line`, `parse_submit` and `main`.

```python
import threading
from simplesched.scheduler import ProcessLauncher, Scheduler

scheduler = Scheduler(ncpu=2, tslice=4, launcher=ProcessLauncher())
scheduler.submit("./long_job", 2)
stop = threading.Event()
worker = threading.Thread(target=scheduler.run, args=(stop,))
worker.start()
# ...
stop.set()
worker.join()
print(scheduler.shutdown())
for task in scheduler.terminated():
    print(task.file_name, task.waiting_time, task.execution_time_ms())
```

## What it does not do

- The scheduler runs as a thread inside the shell's own process; there is no
  separate scheduler process and no state shared between processes.
- Programs are started with no arguments, whether submitted or run in the
  foreground.
- A submitted program is started and then stopped at once, so it may run
  briefly before its first time slice.
- Pausing and resuming rely on POSIX stop and continue signals, so the
  scheduler works on POSIX systems only.