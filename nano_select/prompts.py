"""Caller-facing prompt functions.

Each prompt has a coroutine form (``*_async``) for callers already inside an
event loop, and a blocking form that runs it with asyncio.run().

    from nano_select import select, multi_select, search

    index = select("Choose a framework:", ["Flutter", "React", "Vue"])
    picked = multi_select("Toppings:", ["Cheese", "Ham", "Olives"], [0])
    result = search("Package", ["httpx", "rich", "wcwidth"])
    print(result.value, result.index)

All of them raise NotATerminalError when stdin is not a terminal, and
search() raises CancelledError when the user quits. Validation failures are
handled inside the prompt and never reach the caller.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from .config import get_defaults
from .elements import MenuSelect, SearchSelect
from .engine import SelectionEngine
from .models import Arity, PromptSpec, SearchResult, Validator, static_spec
from .sources import OptionsSource, Provider, as_source
from .terminal import Terminal
from .theme import Theme


async def select_async(
    prompt: str,
    options: Sequence[str],
    default_index: int = 0,
    *,
    show_help: bool = False,
    terminal: Terminal | None = None,
    theme: Theme | None = None,
) -> int:
    """Single choice from a fixed list. Returns the chosen index."""
    spec = static_spec(prompt, options, default_index=default_index, help=show_help)
    engine = SelectionEngine(terminal, theme)
    return await engine.run(MenuSelect(spec, theme=engine.theme))


async def multi_select_async(
    prompt: str,
    options: Sequence[str],
    default_indices: Sequence[int] = (),
    *,
    show_help: bool = True,
    separator: str = ", ",
    terminal: Terminal | None = None,
    theme: Theme | None = None,
) -> list[int]:
    """Any number of choices from a fixed list.

    Returns the selected indices in ascending order (possibly empty).
    """
    spec = static_spec(
        prompt,
        options,
        default_indices=tuple(default_indices),
        arity=Arity.MULTIPLE,
        help=show_help,
        separator=separator,
    )
    engine = SelectionEngine(terminal, theme)
    return await engine.run(MenuSelect(spec, theme=engine.theme))


async def search_async(
    prompt: str,
    source: OptionsSource | Sequence[str] | Provider,
    validator: Validator | None = None,
    min_query_length: int | None = None,
    max_results: int | None = None,
    default_index: int | None = None,
    *,
    terminal: Terminal | None = None,
    theme: Theme | None = None,
) -> SearchResult:
    """Search a list or a provider, then pick one of the matches.

    Args:
        source: A list of options (filtered by case-insensitive substring),
            a function ``query -> list`` (sync or async), or an OptionsSource.
        validator: Returns an error message to reject a value, else None.
        min_query_length: Shorter queries find nothing.
        max_results: Cap on results shown.
        default_index: Initially highlighted result.

    Raises:
        CancelledError: If the user pressed q in the result list.
    """
    defaults = get_defaults()
    spec = PromptSpec(
        prompt=prompt,
        source=as_source(source),
        validator=validator,
        default_index=default_index,
        min_query_length=(
            defaults.min_query_length if min_query_length is None else min_query_length
        ),
        max_results=defaults.max_results if max_results is None else max_results,
    )
    engine = SelectionEngine(terminal, theme)
    return await engine.run(SearchSelect(spec, theme=engine.theme))


def select(
    prompt: str,
    options: Sequence[str],
    default_index: int = 0,
    *,
    show_help: bool = False,
    terminal: Terminal | None = None,
    theme: Theme | None = None,
) -> int:
    """Blocking form of select_async()."""
    return asyncio.run(
        select_async(
            prompt, options, default_index, show_help=show_help, terminal=terminal, theme=theme
        )
    )


def multi_select(
    prompt: str,
    options: Sequence[str],
    default_indices: Sequence[int] = (),
    *,
    show_help: bool = True,
    separator: str = ", ",
    terminal: Terminal | None = None,
    theme: Theme | None = None,
) -> list[int]:
    """Blocking form of multi_select_async()."""
    return asyncio.run(
        multi_select_async(
            prompt,
            options,
            default_indices,
            show_help=show_help,
            separator=separator,
            terminal=terminal,
            theme=theme,
        )
    )


def search(
    prompt: str,
    source: OptionsSource | Sequence[str] | Provider,
    validator: Validator | None = None,
    min_query_length: int | None = None,
    max_results: int | None = None,
    default_index: int | None = None,
    *,
    terminal: Terminal | None = None,
    theme: Theme | None = None,
) -> SearchResult:
    """Blocking form of search_async()."""
    return asyncio.run(
        search_async(
            prompt,
            source,
            validator,
            min_query_length,
            max_results,
            default_index,
            terminal=terminal,
            theme=theme,
        )
    )
