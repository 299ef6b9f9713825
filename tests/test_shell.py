import io
from unittest import mock

import pytest

from simplesched.scheduler import Scheduler
from simplesched.shell import Shell, main, parse_submit, split_line


class FakeLauncher:
    def __init__(self):
        self.started = []
        self._next = 1000

    def start(self, file_name):
        if file_name == "missing":
            raise FileNotFoundError(file_name)
        self._next += 1
        self.started.append((file_name, self._next))
        return self._next

    def pause(self, pid):
        pass

    def resume(self, pid):
        pass

    def poll(self, pid):
        return False


@pytest.fixture
def setup():
    launcher = FakeLauncher()
    scheduler = Scheduler(2, 0, launcher)
    out = io.StringIO()
    return Shell(scheduler, out), scheduler, launcher, out


def test_split_line_drops_extra_spaces_and_newline():
    assert split_line("submit  prog   [2]\n") == ["submit", "prog", "[2]"]


def test_split_line_empty():
    assert split_line("   \n") == []


def test_parse_submit_default_priority():
    assert parse_submit(["submit", "prog"]) == ("prog", 1)


def test_parse_submit_reads_priority():
    assert parse_submit(["submit", "prog", "[4]"]) == ("prog", 4)


@pytest.mark.parametrize(
    "args",
    [["submit"], ["run", "prog"], ["submit", "a", "[1]", "extra"], ["submit", "a", "[9]"]],
)
def test_parse_submit_rejects(args):
    with pytest.raises(ValueError):
        parse_submit(args)


def test_execute_submit_queues_task(setup):
    shell, scheduler, launcher, out = setup
    assert shell.execute(["submit", "prog", "[3]"]) is True
    tasks = list(scheduler.ready)
    assert [(t.file_name, t.priority) for t in tasks] == [("prog", 3)]
    assert launcher.started[0][0] == "prog"
    assert str(tasks[0].pid) in out.getvalue()


def test_execute_bad_priority_reports(setup):
    shell, scheduler, _, out = setup
    assert shell.execute(["submit", "prog", "[7]"]) is True
    assert scheduler.ready.is_empty()
    assert "submit failed" in out.getvalue()


def test_execute_launch_failure_reports(setup):
    shell, scheduler, _, out = setup
    shell.execute(["submit", "missing"])
    assert len(scheduler.table) == 0
    assert "submit failed" in out.getvalue()


def test_execute_table_full_reports(setup):
    shell, scheduler, _, out = setup
    for n in range(21):
        shell.execute(["submit", f"p{n}"])
    assert len(scheduler.table) == scheduler.table.capacity
    assert "MAX_PID reached . Try again later" in out.getvalue()


def test_execute_empty_args_continues(setup):
    shell, scheduler, _, out = setup
    assert shell.execute([]) is True
    assert len(scheduler.ready) == 0


def test_execute_other_command_runs_program_without_args(setup):
    shell, scheduler, _, _ = setup
    with mock.patch("simplesched.shell.subprocess.run") as run:
        result = shell.execute(["ls", "-l"])
    assert result is True
    assert run.call_args.args[0] == ["ls"]
    assert len(scheduler.ready) == 0


def test_execute_unknown_program_reports(setup):
    shell, _, _, out = setup
    shell.execute(["no-such-program-anywhere"])
    assert "error in executing file no-such-program-anywhere" in out.getvalue()


def test_loop_reads_until_eof(setup):
    shell, scheduler, _, out = setup
    shell.loop(io.StringIO("submit a.out\n\nsubmit b.out [2]\n"))
    assert [(t.file_name, t.priority) for t in scheduler.ready] == [
        ("b.out", 2),
        ("a.out", 1),
    ]
    assert out.getvalue().count("CShell> ") == 4


def test_main_with_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "CShell> " in capsys.readouterr().out


def test_main_rejects_zero_cpus():
    with pytest.raises(SystemExit) as info:
        main(["0"])
    assert info.value.code == 2