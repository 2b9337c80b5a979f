"""Terminal access for interactive prompts.

This module provides:
- ANSI: escape sequences and width-aware string helpers
- Terminal: protocol describing the input/output a prompt needs
- StdioTerminal: Terminal over sys.stdin/sys.stdout using termios
- TerminalSession: scoped raw-mode acquisition with guaranteed restore
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import sys
from typing import IO, Any, ClassVar, Protocol

from wcwidth import wcwidth

from .errors import NotATerminalError

logger = logging.getLogger(__name__)

# Platform-specific imports for raw mode
_HAS_TERMIOS = False
if sys.platform != "win32":
    try:
        import termios
        import tty

        _HAS_TERMIOS = True
    except ImportError:
        pass


class ANSI:
    """ANSI escape sequences and helpers for measuring styled text."""

    ESC = "\033"
    CSI = "\033["
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    CLEAR_LINE = "\033[2K"

    # CSI: ESC [ parameter bytes, intermediate bytes, one final byte (@ to ~)
    _CSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")

    @staticmethod
    def cursor_up(n: int = 1) -> str:
        return f"\033[{n}A" if n > 0 else ""

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        return cls._CSI_RE.sub("", text)

    @staticmethod
    def _char_width(ch: str) -> int:
        # Control characters report -1; they take no columns.
        return max(wcwidth(ch), 0)

    @classmethod
    def visual_len(cls, text: str) -> int:
        """Number of terminal columns the text occupies."""
        return sum(cls._char_width(ch) for ch in cls.strip_ansi(text))

    @classmethod
    def truncate_to_width(cls, text: str, max_width: int, ellipsis: str = "…") -> str:
        """Cut text so it fits in max_width columns, keeping escape codes.

        Text that already fits is returned unchanged. Otherwise the visible
        part is shortened to leave room for the ellipsis, and a reset is
        appended if the text carried any styling.
        """
        if cls.visual_len(text) <= max_width:
            return text

        budget = max(max_width - cls.visual_len(ellipsis), 0)
        out: list[str] = []
        used = 0
        styled = False
        pos = 0
        while pos < len(text):
            match = cls._CSI_RE.match(text, pos)
            if match:
                out.append(match.group())
                styled = True
                pos = match.end()
                continue
            width = cls._char_width(text[pos])
            if used + width > budget:
                break
            out.append(text[pos])
            used += width
            pos += 1

        out.append(ellipsis)
        if styled:
            out.append(cls.RESET)
        return "".join(out)


class Terminal(Protocol):
    """Byte-oriented terminal contract used by prompts."""

    def isatty(self) -> bool:
        """Return True if input comes from an interactive terminal."""
        ...

    def read_byte(self) -> int:
        """Block until one byte of input is available and return it."""
        ...

    def read_line(self) -> str:
        """Read one line in canonical mode, without the line terminator."""
        ...

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...

    def width(self) -> int:
        """Terminal width in columns."""
        ...

    def save_mode(self) -> Any:
        """Return an opaque snapshot of the current input mode."""
        ...

    def set_raw_mode(self) -> None:
        """Disable line buffering and echo."""
        ...

    def restore_mode(self, saved: Any) -> None:
        """Restore a snapshot taken by save_mode()."""
        ...


class StdioTerminal:
    """Terminal backed by the process's standard streams."""

    def __init__(self, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def isatty(self) -> bool:
        if not _HAS_TERMIOS:
            return False
        try:
            return self._stdin.isatty()
        except (AttributeError, ValueError):
            return False

    def _fd(self) -> int:
        return self._stdin.fileno()

    def read_byte(self) -> int:
        data = os.read(self._fd(), 1)
        if not data:
            raise EOFError("End of input")
        return data[0]

    def read_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError("End of input")
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        self._stdout.write(text)

    def flush(self) -> None:
        self._stdout.flush()

    def width(self) -> int:
        return shutil.get_terminal_size().columns

    def save_mode(self) -> Any:
        return termios.tcgetattr(self._fd())

    def set_raw_mode(self) -> None:
        # cbreak keeps ISIG, so Ctrl+C still raises KeyboardInterrupt
        tty.setcbreak(self._fd())

    def restore_mode(self, saved: Any) -> None:
        termios.tcsetattr(self._fd(), termios.TCSADRAIN, saved)


class TerminalSession:
    """Scoped raw-mode session on a terminal.

    Entering the session checks the terminal is interactive, snapshots the
    current mode and switches to raw mode. Exiting always restores the
    snapshot, whether the block returned normally or raised. A session can
    be entered again after it has been exited, but only one session may be
    live in the process at a time.

    Usage:
        session = TerminalSession(StdioTerminal())
        with session:
            key = session.terminal.read_byte()
        # Terminal restored here, even if read_byte() raised
    """

    _live: ClassVar[TerminalSession | None] = None

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal
        self._saved: Any = None

    @property
    def is_raw(self) -> bool:
        return TerminalSession._live is self

    def ensure_interactive(self) -> None:
        if not self.terminal.isatty():
            raise NotATerminalError()

    def acquire(self) -> None:
        if TerminalSession._live is not None:
            raise RuntimeError("Another terminal session is already active")
        self.ensure_interactive()
        self._saved = self.terminal.save_mode()
        try:
            self.terminal.set_raw_mode()
        except BaseException:
            self.terminal.restore_mode(self._saved)
            self._saved = None
            raise
        TerminalSession._live = self
        logger.debug("raw mode acquired")

    def release(self) -> None:
        if TerminalSession._live is not self:
            return
        try:
            self.terminal.restore_mode(self._saved)
        finally:
            TerminalSession._live = None
            self._saved = None
            logger.debug("raw mode released")

    def __enter__(self) -> TerminalSession:
        self.acquire()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is None:
            self.release()
            return
        # Don't let a failed restore mask the exception already in flight
        try:
            self.release()
        except Exception:
            logger.warning("failed to restore terminal mode", exc_info=True)
