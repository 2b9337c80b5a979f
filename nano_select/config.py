"""Process-wide prompt defaults.

Prompts read their terminal, theme and glyphs from here unless the caller
passes overrides. Use configure() once at startup to change them:

    from nano_select import configure
    from nano_select.theme import Theme

    configure(theme=Theme.plain_theme(), max_results=20)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable

from .terminal import StdioTerminal, Terminal
from .theme import Theme


def _default_theme() -> Theme:
    # https://no-color.org: any non-empty value disables color
    if os.environ.get("NO_COLOR"):
        return Theme.plain_theme()
    return Theme()


@dataclass(frozen=True)
class PromptDefaults:
    """Defaults shared by every prompt in the process."""

    terminal_factory: Callable[[], Terminal] = StdioTerminal
    theme: Theme = field(default_factory=_default_theme)
    pointer: str = "❯"
    checked: str = "●"
    unchecked: str = "○"
    checkmark: str = "✓"
    error_mark: str = "❌"
    select_help: str = "(Use ↑/↓ to navigate, Enter to select)"
    multi_select_help: str = "(Use ↑/↓ to navigate, Space to select, Enter to confirm)"
    search_help: str = "↑↓ Navigate • Enter Select • r Search Again • q Quit"
    retry_hint: str = "Press any key to search again..."
    no_results: str = "No results found. Try a different search term."
    none_selected: str = "None selected"
    max_results: int = 10
    min_query_length: int = 1


_defaults = PromptDefaults()


def get_defaults() -> PromptDefaults:
    return _defaults


def configure(**overrides: Any) -> PromptDefaults:
    """Replace selected defaults and return the new set.

    Raises:
        TypeError: If an override names an unknown setting.
    """
    global _defaults
    known = {f.name for f in fields(PromptDefaults)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown prompt settings: {', '.join(sorted(unknown))}")
    _defaults = replace(_defaults, **overrides)
    return _defaults


def reset_defaults() -> PromptDefaults:
    """Restore the built-in defaults (re-reading NO_COLOR)."""
    global _defaults
    _defaults = PromptDefaults()
    return _defaults
