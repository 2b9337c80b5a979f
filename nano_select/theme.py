"""Colors applied to prompt text before it reaches the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.color import ColorSystem
from rich.style import Style


@dataclass(frozen=True)
class Theme:
    """Named styles for the parts of a prompt.

    Each role is a colorize function: ``theme.primary("text")`` returns the
    text wrapped in the escape sequences for that style. A theme with
    ``enabled=False`` returns text untouched.
    """

    primary_style: Style = field(default_factory=lambda: Style(color="cyan"))
    success_style: Style = field(default_factory=lambda: Style(color="green"))
    error_style: Style = field(default_factory=lambda: Style(color="red", bold=True))
    plain_style: Style = field(default_factory=lambda: Style(color="white"))
    muted_style: Style = field(default_factory=lambda: Style(dim=True))
    enabled: bool = True
    color_system: ColorSystem = ColorSystem.STANDARD

    @classmethod
    def plain_theme(cls) -> Theme:
        """Theme that applies no styling (NO_COLOR, tests)."""
        return cls(enabled=False)

    def colorize(self, text: str, style: Style) -> str:
        if not self.enabled or not text:
            return text
        return style.render(text, color_system=self.color_system)

    def primary(self, text: str) -> str:
        return self.colorize(text, self.primary_style)

    def success(self, text: str) -> str:
        return self.colorize(text, self.success_style)

    def error(self, text: str) -> str:
        return self.colorize(text, self.error_style)

    def plain(self, text: str) -> str:
        return self.colorize(text, self.plain_style)

    def muted(self, text: str) -> str:
        return self.colorize(text, self.muted_style)
