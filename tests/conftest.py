"""Pytest configuration for local test runs."""

from __future__ import annotations

import asyncio
import inspect
import re
import sys
from collections import deque
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest


def _add_repo_root_to_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_add_repo_root_to_path()

from nano_select.config import configure, reset_defaults  # noqa: E402
from nano_select.terminal import TerminalSession  # noqa: E402
from nano_select.theme import Theme  # noqa: E402

UP = b"\x1b[A"
DOWN = b"\x1b[B"
ENTER = b"\r"
SPACE = b" "

_CSI_RE = re.compile(r"\x1b\[([0-?]*)[ -/]*([@-~])")


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "asyncio: mark async tests to run in an event loop"
    )


def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    test_func = pyfuncitem.obj
    if inspect.iscoroutinefunction(test_func):
        funcargs = {
            name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
        }
        asyncio.run(test_func(**funcargs))
        return True
    # firstresult hook: None lets pytest call sync tests itself
    return None


class FakeTerminal:
    """Scripted terminal: key bytes and lines in, writes recorded.

    read_line() echoes the line and a newline like a canonical-mode tty.
    Reading a byte outside raw mode, or a line inside it, fails the test.
    """

    def __init__(
        self,
        keys: bytes = b"",
        lines: list[str] | None = None,
        tty: bool = True,
        width: int = 80,
    ) -> None:
        self._bytes: deque[int] = deque(keys)
        self._lines: deque[str] = deque(lines or [])
        self.tty = tty
        self.columns = width
        self.writes: list[str] = []
        self.raw = False
        self.mode_log: list[str] = []

    def feed(self, keys: bytes) -> None:
        self._bytes.extend(keys)

    def isatty(self) -> bool:
        return self.tty

    def read_byte(self) -> int:
        assert self.raw, "byte read outside raw mode"
        if not self._bytes:
            raise EOFError("No more scripted keys")
        return self._bytes.popleft()

    def read_line(self) -> str:
        assert not self.raw, "line read in raw mode"
        if not self._lines:
            raise EOFError("No more scripted lines")
        line = self._lines.popleft()
        self.writes.append(line + "\n")
        return line

    def write(self, text: str) -> None:
        self.writes.append(text)

    def flush(self) -> None:
        pass

    def width(self) -> int:
        return self.columns

    def save_mode(self) -> Any:
        return "canonical"

    def set_raw_mode(self) -> None:
        self.raw = True
        self.mode_log.append("raw")

    def restore_mode(self, saved: Any) -> None:
        assert saved == "canonical"
        self.raw = False
        self.mode_log.append("restore")

    @property
    def output(self) -> str:
        return "".join(self.writes)

    @property
    def pending_keys(self) -> int:
        return len(self._bytes)

    @property
    def pending_lines(self) -> int:
        return len(self._lines)


def render_screen(output: str) -> list[str]:
    """Replay output on a minimal screen model and return the visible rows.

    Understands newline, carriage return, cursor up and clear line; other
    escape sequences (colors) are dropped. Trailing blank rows are removed.
    """
    rows: list[str] = [""]
    row = col = 0
    pos = 0
    while pos < len(output):
        match = _CSI_RE.match(output, pos)
        if match:
            params, final = match.groups()
            if final == "A":
                row = max(row - int(params or 1), 0)
            elif final == "K":
                rows[row] = ""
            pos = match.end()
            continue
        ch = output[pos]
        pos += 1
        if ch == "\n":
            row += 1
            col = 0
            while len(rows) <= row:
                rows.append("")
        elif ch == "\r":
            col = 0
        else:
            line = rows[row].ljust(col)
            rows[row] = line[:col] + ch + line[col + 1 :]
            col += 1
    while rows and rows[-1] == "":
        rows.pop()
    return rows


@pytest.fixture(autouse=True)
def _plain_defaults() -> Iterator[None]:
    configure(theme=Theme.plain_theme())
    yield
    reset_defaults()
    TerminalSession._live = None
