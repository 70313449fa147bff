# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterator

import pytest

from focustasks.connectors.console_connector import handle_line, run_console_loop
from focustasks.tasks.task_api import BLANK_TITLE_MESSAGE


def _scripted(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read_line(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_plain_text_adds_task(state) -> None:
    out = handle_line(state, "Water the plants") or ""
    assert "[ ] Water the plants" in out
    assert [t.title for t in state.task_store.list()] == ["Water the plants"]


def test_empty_line_is_ignored(state) -> None:
    assert handle_line(state, "") is None
    assert state.task_store.list() == []


def test_handler_crash_is_reported(state, monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("broken")

    monkeypatch.setattr(state.task_store, "list", boom)
    assert handle_line(state, "/list") == "Internal error while handling a command."


def test_console_loop_session(state, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(
        state,
        read_line=_scripted(["Task one", "Task two", "/toggle 1", "   ", "/stats", "/exit", "never read"]),
    )

    out = capsys.readouterr().out
    assert "FocusTasks 6092" in out
    assert "Active: 1 · Done: 1 · Done %: 50.0%" in out
    assert [(t.title, t.done) for t in state.task_store.list()] == [
        ("Task one", True),
        ("Task two", False),
    ]


def test_console_loop_stops_on_eof(state, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(state, read_line=_scripted(["/add"]))
    assert BLANK_TITLE_MESSAGE in capsys.readouterr().out
    assert state.task_store.list() == []
