"""Tests for the entry points' exit codes and cleanup reporting."""

import io

import pytest
from rich.console import Console

from digirain import main
from digirain.keys import VARIANT_A, VARIANT_B


class ScriptedTerminal:
    """Context manager terminal that quits at once, or fails on entry / in the loop."""
    instances = []

    def __init__(self, console, keys=("q",), fail_on_enter=False, fail_on_poll=False):
        self.keys = list(keys)
        self.fail_on_enter = fail_on_enter
        self.fail_on_poll = fail_on_poll
        self.exited = False
        ScriptedTerminal.instances.append(self)

    def __enter__(self):
        if self.fail_on_enter:
            raise OSError("not a tty")
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True
        return False

    def size(self):
        return 10, 10

    def poll_key(self, timeout):
        if self.fail_on_poll:
            raise OSError("terminal went away")
        return self.keys.pop(0)

    read_key = poll_key


@pytest.fixture
def output(monkeypatch):
    buf = io.StringIO()
    monkeypatch.setattr(main, "console", Console(file=buf, width=80))
    ScriptedTerminal.instances = []
    return buf


def test_normal_quit_returns_zero(monkeypatch, output):
    monkeypatch.setattr(main, "Terminal", ScriptedTerminal)
    assert main.run(VARIANT_A) == 0
    assert ScriptedTerminal.instances[0].exited
    assert "Bye" in output.getvalue()


def test_terminal_failure_returns_one(monkeypatch, output):
    monkeypatch.setattr(main, "Terminal", lambda console: ScriptedTerminal(console, fail_on_enter=True))
    assert main.run(VARIANT_A) == 1
    assert "CRITICAL ERROR: not a tty" in output.getvalue()


def test_failure_in_loop_still_cleans_up(monkeypatch, output):
    monkeypatch.setattr(main, "Terminal", lambda console: ScriptedTerminal(console, fail_on_poll=True))
    assert main.run(VARIANT_B) == 1
    assert ScriptedTerminal.instances[0].exited
    assert "terminal went away" in output.getvalue()


def test_keyboard_interrupt_is_a_normal_quit(monkeypatch, output):
    def interrupted(console):
        term = ScriptedTerminal(console)
        def poll_key(timeout):
            raise KeyboardInterrupt
        term.poll_key = poll_key
        return term

    monkeypatch.setattr(main, "Terminal", interrupted)
    assert main.run(VARIANT_A) == 0


def test_entry_points_exit_with_run_result(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "run", lambda variant: calls.append(variant) or 3)
    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 3
    with pytest.raises(SystemExit):
        main.main_classic()
    assert calls == [VARIANT_A, VARIANT_B]
