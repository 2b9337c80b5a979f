"""In-place frame rendering.

FrameRenderer owns the interactive region at the bottom of the output: it
remembers how many lines it last painted so the next paint can erase exactly
that region before drawing, without touching output above it.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .terminal import ANSI, Terminal
from .theme import Theme


class FrameRenderer:
    """Paints frames and the final commit line.

    The cursor is expected to sit at the start of the line just below the
    region. Erasing walks up one line at a time, clearing each, so the number
    of cursor-up moves always equals the number of lines in the region.

    Attributes:
        line_count: Lines currently in the region (last paint plus any
            lines recorded with account()).
    """

    def __init__(self, terminal: Terminal, theme: Theme | None = None, checkmark: str = "✓") -> None:
        self.terminal = terminal
        self.theme = theme or Theme.plain_theme()
        self.checkmark = checkmark
        self.line_count = 0

    def _fit(self, lines: Sequence[str]) -> list[str]:
        """Split embedded newlines and truncate so each line is one screen row."""
        # Leave the last column free so a full-width line never wraps
        max_width = max(self.terminal.width() - 1, 1)
        fitted: list[str] = []
        for line in lines:
            for part in line.split("\n"):
                fitted.append(ANSI.truncate_to_width(part, max_width))
        return fitted

    def _erase(self) -> None:
        for _ in range(self.line_count):
            self.terminal.write("\r" + ANSI.cursor_up(1) + ANSI.CLEAR_LINE)
        self.line_count = 0

    def account(self, num_lines: int) -> None:
        """Record lines written to the region by someone else (e.g. echoed input)."""
        self.line_count += num_lines

    def rows_for(self, text: str) -> int:
        """Screen rows text takes when written unclipped, newline-terminated."""
        width = max(self.terminal.width(), 1)
        return sum(
            max(1, math.ceil(ANSI.visual_len(segment) / width)) for segment in text.split("\n")
        )

    def account_text(self, text: str) -> None:
        """Record text the terminal echoed into the region, wrapping included."""
        self.account(self.rows_for(text))

    def paint(self, lines: Sequence[str]) -> int:
        """Replace the region with lines and return the new line count."""
        fitted = self._fit(lines)
        self._erase()
        for line in fitted:
            self.terminal.write(line + "\n")
        self.line_count = len(fitted)
        self.terminal.flush()
        return self.line_count

    def clear(self) -> None:
        """Erase the region."""
        self._erase()
        self.terminal.flush()

    def paint_commit(
        self,
        question: str,
        answer: str | Sequence[str],
        separator: str = ", ",
        empty_text: str = "None selected",
    ) -> str:
        """Erase the region and write the persistent answer line.

        Returns:
            The line written (without the newline).
        """
        if isinstance(answer, str):
            answer_text = answer
        else:
            answer_text = separator.join(answer) if answer else empty_text
        parts = [self.theme.success(self.checkmark), self.theme.primary(question)]
        if answer_text:
            parts.append(self.theme.plain(answer_text))
        line = " ".join(parts)
        self._erase()
        self.terminal.write(line + "\n")
        self.terminal.flush()
        return line
