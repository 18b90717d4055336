"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path
from typing import Generator, Iterable, Optional

import pytest


class FakeTerm:
    """Terminal double that replays scripted input and records every call."""

    def __init__(self, chars: Iterable[str] = (), lines: Iterable[str] = ()):
        self._chars = iter(chars)
        self._lines = iter(lines)
        self.calls: list[str] = []
        self.output: list[str] = []

    def read_char(self) -> str:
        self.calls.append("read_char")
        try:
            return next(self._chars)
        except StopIteration:
            raise EOFError("no more scripted keystrokes") from None

    def read_line(self) -> str:
        self.calls.append("read_line")
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError("no more scripted lines") from None

    def write_str(self, text: str) -> None:
        self.calls.append("write_str")
        self.output.append(text)

    def write_line(self, text: str) -> None:
        self.calls.append("write_line")
        self.output.append(f"{text}\n")

    def clear_line(self) -> None:
        self.calls.append("clear_line")

    def hide_cursor(self) -> None:
        self.calls.append("hide_cursor")

    def show_cursor(self) -> None:
        self.calls.append("show_cursor")

    def flush(self) -> None:
        self.calls.append("flush")

    def count(self, name: str) -> int:
        return self.calls.count(name)

    def index(self, name: str, start: Optional[int] = None) -> int:
        return self.calls.index(name) if start is None else self.calls.index(name, start)


@pytest.fixture
def make_term():
    """Factory for scripted fake terminals."""
    return FakeTerm


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Isolate tests from actual environment variables."""
    config_keys = [
        "TERMCONFIRM_THEME",
        "TERMCONFIRM_WAIT_FOR_NEWLINE",
        "TERMCONFIRM_SHOW_DEFAULT",
        "TERMCONFIRM_DISABLE_DEFAULT",
        # rich terminal detection overrides
        "FORCE_COLOR",
        "TTY_COMPATIBLE",
        "TTY_INTERACTIVE",
    ]
    for key in config_keys:
        # setenv first so values loaded from .env files are undone too
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
