"""nano-select: interactive selection prompts for the terminal.

Prompts redraw in place while the user navigates with the arrow keys and
leave a single answer line behind when they commit:

    ✓ Choose a framework: Vue

Features:
    - select(): one option from a list (Up/Down, Enter)
    - multi_select(): any options from a list (Space toggles)
    - search(): query a list or an async provider, then pick a match
      (r searches again, q quits)
"""

import logging

from .config import PromptDefaults, configure, get_defaults, reset_defaults
from .engine import SelectionEngine
from .errors import (
    CancelledError,
    EmptyResultError,
    NotATerminalError,
    PromptError,
    ValidationError,
)
from .keys import Key, KeyDecoder, KeyEvent
from .models import Arity, PromptSpec, SearchResult, ViewState
from .prompts import (
    multi_select,
    multi_select_async,
    search,
    search_async,
    select,
    select_async,
)
from .renderer import FrameRenderer
from .sources import DynamicSource, OptionsSource, StaticSource
from .terminal import ANSI, StdioTerminal, Terminal, TerminalSession
from .theme import Theme

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Prompts
    "select",
    "select_async",
    "multi_select",
    "multi_select_async",
    "search",
    "search_async",
    # Results and specs
    "SearchResult",
    "PromptSpec",
    "ViewState",
    "Arity",
    # Sources
    "OptionsSource",
    "StaticSource",
    "DynamicSource",
    # Engine parts
    "SelectionEngine",
    "FrameRenderer",
    "KeyDecoder",
    "Key",
    "KeyEvent",
    # Terminal
    "Terminal",
    "StdioTerminal",
    "TerminalSession",
    "ANSI",
    "Theme",
    # Config
    "PromptDefaults",
    "configure",
    "get_defaults",
    "reset_defaults",
    # Errors
    "PromptError",
    "NotATerminalError",
    "ValidationError",
    "EmptyResultError",
    "CancelledError",
]
