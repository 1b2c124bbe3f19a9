# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterator

import pytest

from taskpal.connectors.console_connector import run_console_loop
from taskpal.core.state import AppState


def _scripted(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_console_runs_until_bye(state: AppState, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(state, read_line=_scripted(["todo read book", "", "list", "bye", "todo never"]))

    out = capsys.readouterr().out
    assert "thrilled to see you" in out
    assert "1. [T][]read book" in out
    assert "leaving already" in out
    assert [t.description for t in state.task_list] == ["read book"]


def test_console_stops_on_eof(state: AppState, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(state, read_line=_scripted(["todo a"]))

    assert state.task_list.count == 1
    assert "joined the party" in capsys.readouterr().out


def test_console_stops_on_ctrl_c(state: AppState) -> None:
    def interrupted(prompt: str) -> str:
        raise KeyboardInterrupt

    run_console_loop(state, read_line=interrupted)

    assert state.task_list.is_empty()
