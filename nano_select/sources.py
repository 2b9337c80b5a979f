"""Option sources for search prompts.

A source turns a query into an ordered list of matching option strings.
StaticSource filters a fixed list; DynamicSource delegates to a provider
function that may be synchronous or return an awaitable (e.g. a network
lookup).
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Sequence
from typing import Callable, Union

logger = logging.getLogger(__name__)

ProviderResult = Union[Sequence[str], Awaitable[Sequence[str]]]
Provider = Callable[[str], ProviderResult]


class OptionsSource(ABC):
    """Produces search results for a query."""

    @abstractmethod
    async def search(self, query: str, max_results: int) -> list[str]:
        """Return at most max_results options matching query."""
        ...

    def index_of(self, value: str, position: int) -> int:
        """Index to report for a value committed from row position.

        Defaults to the row position in the result snapshot.
        """
        return position


class StaticSource(OptionsSource):
    """Fixed, ordered option list with case-insensitive substring filtering.

    Filtering is deterministic: the same query always yields the same
    results in option-list order.
    """

    def __init__(self, options: Sequence[str]) -> None:
        self.options: tuple[str, ...] = tuple(options)

    def filter(self, query: str, max_results: int) -> list[str]:
        needle = query.lower()
        matches = [opt for opt in self.options if needle in opt.lower()]
        return matches[:max_results]

    async def search(self, query: str, max_results: int) -> list[str]:
        return self.filter(query, max_results)

    def index_of(self, value: str, position: int) -> int:
        # Position in the full catalog, first occurrence for duplicates
        return self.options.index(value)

    def __len__(self) -> int:
        return len(self.options)


class DynamicSource(OptionsSource):
    """Query-driven provider, possibly asynchronous.

    Results are not assumed to be stable between calls, so committed indices
    refer to the result snapshot they were chosen from. Provider failures and
    non-list results (a bare string) are logged and reported as an empty
    result list.
    """

    def __init__(self, provider: Provider) -> None:
        self.provider = provider

    async def search(self, query: str, max_results: int) -> list[str]:
        try:
            result = self.provider(query)
            if inspect.isawaitable(result):
                result = await result
        except Exception:
            logger.warning("options provider failed for query %r", query, exc_info=True)
            return []
        if isinstance(result, (str, bytes)):
            logger.warning(
                "options provider returned a single %s for query %r, expected a list",
                type(result).__name__,
                query,
            )
            return []
        return [str(item) for item in result][:max_results]


def as_source(options: OptionsSource | Sequence[str] | Provider) -> OptionsSource:
    """Wrap a plain list or a provider function in the matching source."""
    if isinstance(options, OptionsSource):
        return options
    if isinstance(options, (str, bytes)):
        raise TypeError("options must be a sequence of strings, not a single string")
    if callable(options):
        return DynamicSource(options)
    return StaticSource(options)
