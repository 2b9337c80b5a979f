"""Search-then-select element.

The user types a query, the prompt's source returns matches, and the user
picks one. Flow per cycle:

    query -> fetch -> 0 results: show error, wait for a key, ask again
                   -> 1 result:  validate; commit, or show error and ask again
                   -> n results: navigate (Enter, r = search again, q = quit)

A validation failure while navigating keeps the user in the result list;
a failure on an auto-selected single result sends them back to the query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from ..errors import CancelledError, EmptyResultError, ValidationError
from ..keys import Key, KeyEvent
from ..models import SearchResult
from .base import ActiveElement

if TYPE_CHECKING:
    from ..engine import SelectionEngine

logger = logging.getLogger(__name__)


class NavSignal(Enum):
    """Non-commit outcomes of result navigation."""

    RESTART = "restart"
    QUIT = "quit"


RESTART_KEY = "r"
QUIT_KEY = "q"

NavOutcome = Union[int, NavSignal]


@dataclass
class SearchSelect(ActiveElement[NavOutcome]):
    """Search prompt with arrow-key navigation over the results.

    Returns a SearchResult from run_async(). Raises CancelledError when the
    user quits from the result list.
    """

    def is_self_managed(self) -> bool:
        return True

    @property
    def header(self) -> str:
        return f"{self.style.primary(self.spec.prompt + ':')} {self.state.query}"

    def get_lines(self) -> list[str]:
        theme = self.style
        lines = [self.header]
        for i, value in enumerate(self.state.results):
            lines.append(self.option_row(value, i == self.state.highlighted))
        lines.append("")
        lines.append(theme.plain(self.defaults.search_help))
        if self.state.error:
            lines.append(theme.error(f"{self.defaults.error_mark} {self.state.error}"))
        return lines

    def handle_input(self, event: KeyEvent) -> tuple[bool, NavOutcome | None]:
        self.state.error = None
        count = len(self.state.results)
        if event.key is Key.ENTER:
            value = self.state.results[self.state.highlighted]
            try:
                self.spec.validate(value)
            except ValidationError as exc:
                logger.debug("validation failed in result list: %s", exc.message)
                self.state.error = exc.message
                return (False, None)
            return (True, self.state.highlighted)
        elif event.key is Key.UP:
            self.state.move(-1, count)
        elif event.key is Key.DOWN:
            self.state.move(1, count)
        elif event.key is Key.COMMAND and event.char == RESTART_KEY:
            return (True, NavSignal.RESTART)
        elif event.key is Key.COMMAND and event.char == QUIT_KEY:
            return (True, NavSignal.QUIT)
        return (False, None)

    def _read_query(self, engine: SelectionEngine) -> str:
        """Ask for a query in canonical mode and account for the echoed line."""
        prompt = f"{self.style.primary(self.spec.prompt)}: "
        engine.terminal.write(prompt)
        engine.terminal.flush()
        raw = engine.terminal.read_line()
        # The terminal echoed prompt + input + newline
        engine.renderer.account_text(prompt + raw)
        return raw.strip()

    async def _fetch(self, query: str) -> list[str]:
        """Fetch results for query.

        Raises:
            EmptyResultError: If the query is too short or nothing matched.
        """
        results: list[str] = []
        if len(query) >= self.spec.min_query_length:
            results = await self.spec.source.search(query, self.spec.max_results)
        logger.debug("query %r returned %d results", query, len(results))
        if not results:
            raise EmptyResultError(query)
        return results

    def _show_problem(self, engine: SelectionEngine, message: str) -> None:
        """Show an error under the query, wait for a key, then erase it all."""
        theme = self.style
        engine.renderer.paint(
            [
                self.header,
                "",
                theme.error(f"{self.defaults.error_mark} {message}"),
                theme.plain(self.defaults.retry_hint),
            ]
        )
        engine.wait_for_key()
        engine.renderer.clear()

    def _commit(self, engine: SelectionEngine, position: int) -> SearchResult:
        value = self.state.results[position]
        engine.renderer.paint_commit(self.spec.prompt, value)
        index = self.spec.source.index_of(value, position)
        return SearchResult(value=value, index=index)

    def _initial_highlight(self) -> int:
        default = self.spec.default_index
        if default is not None and 0 <= default < len(self.state.results):
            return default
        return 0

    async def run_async(self, engine: SelectionEngine) -> SearchResult:  # type: ignore[override]
        while True:
            query = self._read_query(engine)
            if not query:
                engine.renderer.clear()
                continue

            self.state.query = query
            try:
                self.state.results = await self._fetch(query)
            except EmptyResultError:
                self.state.results = []
                self._show_problem(engine, self.defaults.no_results)
                continue

            if len(self.state.results) == 1:
                value = self.state.results[0]
                try:
                    self.spec.validate(value)
                except ValidationError as exc:
                    logger.debug("validation failed for single result: %s", exc.message)
                    self._show_problem(engine, exc.message)
                    continue
                return self._commit(engine, 0)

            self.state.highlighted = self._initial_highlight()
            self.state.error = None
            outcome = engine.navigate(self)

            if outcome is NavSignal.RESTART:
                engine.renderer.clear()
                continue
            if outcome is NavSignal.QUIT:
                engine.renderer.clear()
                raise CancelledError()
            assert isinstance(outcome, int)
            return self._commit(engine, outcome)
