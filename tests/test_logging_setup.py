# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from types import SimpleNamespace

import pytest

from focustasks.logging_setup import LOG_FILE_NAME, _ConsoleNoiseFilter, parse_level, setup_logging


@pytest.fixture()
def restore_root_logging() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("focustasks.tasks.task_store", logging.DEBUG, True),
        ("focustasks.cli.commands", logging.INFO, True),
        ("focustasks.storage.kv_store", logging.INFO, False),
        ("focustasks.storage.kv_store", logging.DEBUG, False),
        ("focustasks.storage.kv_store", logging.WARNING, True),
        ("sqlite_helper", logging.WARNING, False),
        ("sqlite_helper", logging.ERROR, True),
        ("py.warnings", logging.WARNING, False),
    ],
)
def test_console_filter(name: str, level: int, shown: bool) -> None:
    assert _ConsoleNoiseFilter().filter(_record(name, level)) is shown


def test_parse_level() -> None:
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" WARNING ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR
    assert parse_level(None) == logging.INFO
    assert parse_level("chatty") == logging.INFO


def test_setup_logging_uses_settings(tmp_path, restore_root_logging: logging.Logger) -> None:
    settings = SimpleNamespace(data_dir=tmp_path / "data", log_level="warning")

    log_file = setup_logging(settings)
    logging.getLogger("focustasks.storage.kv_store").debug("kv set key=demo")

    assert log_file == tmp_path / "data" / LOG_FILE_NAME
    ours = [
        h
        for h in restore_root_logging.handlers
        if getattr(h, "baseFilename", None) == str(log_file)
    ]
    assert len(ours) == 1
    ours[0].flush()
    assert "kv set key=demo" in log_file.read_text("utf-8")

    console = [
        h
        for h in restore_root_logging.handlers
        if type(h) is logging.StreamHandler and h.level == logging.WARNING
    ]
    assert len(console) == 1


def test_setup_logging_twice_does_not_duplicate(tmp_path, restore_root_logging: logging.Logger) -> None:
    before = len(restore_root_logging.handlers)
    settings = SimpleNamespace(data_dir=tmp_path, log_level="INFO")

    setup_logging(settings)
    setup_logging(settings)

    assert len(restore_root_logging.handlers) == before + 2
