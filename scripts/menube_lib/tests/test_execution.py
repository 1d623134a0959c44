"""Tests for shell command execution."""

import subprocess

from menube_lib.execution import CommandError, ShellExecutor, SyncExecutor, run_command


class Collector:
    def __init__(self):
        self.results = []

    def __call__(self, err, stdout, stderr):
        self.results.append((err, stdout, stderr))


def test_run_command_success():
    err, stdout, stderr = run_command("echo hello")

    assert err is None
    assert stdout == "hello\n"
    assert stderr == ""


def test_run_command_nonzero_exit():
    err, stdout, stderr = run_command("echo oops >&2; exit 3")

    assert isinstance(err, CommandError)
    assert err.returncode == 3
    assert err.stderr == "oops\n"
    assert stderr == "oops\n"
    assert "exit code 3" in str(err)


def test_run_command_timeout(monkeypatch):
    def fake_run(*args, **kwargs):
        raise subprocess.TimeoutExpired(cmd=args[0], timeout=kwargs["timeout"], output=b"partial")

    monkeypatch.setattr(subprocess, "run", fake_run)

    err, stdout, stderr = run_command("sleep 10", timeout=0.1)

    assert isinstance(err, CommandError)
    assert err.timed_out is True
    assert stdout == "partial"
    assert stderr == ""


def test_run_command_spawn_failure(monkeypatch):
    def fake_run(*args, **kwargs):
        raise FileNotFoundError("no shell")

    monkeypatch.setattr(subprocess, "run", fake_run)

    err, stdout, stderr = run_command("anything")

    assert isinstance(err, FileNotFoundError)
    assert (stdout, stderr) == ("", "")


def test_sync_executor_calls_back_inline():
    collector = Collector()

    SyncExecutor()("echo inline", collector)

    assert collector.results == [(None, "inline\n", "")]


def test_shell_executor_calls_back_from_thread():
    collector = Collector()
    executor = ShellExecutor()

    executor("echo threaded", collector)

    assert executor.wait(timeout=10) is True
    assert collector.results == [(None, "threaded\n", "")]


def test_callback_error_is_logged_not_raised(caplog):
    def broken(err, stdout, stderr):
        raise RuntimeError("callback exploded")

    SyncExecutor()("true", broken)

    assert "callback exploded" in caplog.text
