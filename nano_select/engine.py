"""Selection engine that drives prompt elements.

This module provides SelectionEngine which:
- Holds the terminal, its raw-mode session, the renderer and key decoder
- Runs the paint / read key / handle input loop for standard elements
- Hands control to self-managed elements (search) via run_async()
- Paints the commit line when a standard element completes
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .config import get_defaults
from .elements.base import ActiveElement
from .keys import KeyDecoder, KeyEvent
from .renderer import FrameRenderer
from .terminal import Terminal, TerminalSession
from .theme import Theme

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SelectionEngine:
    """Coordinates an element with the terminal for one prompt at a time.

    Args:
        terminal: Terminal to draw on and read from. Defaults to the
            configured terminal factory (stdin/stdout).
        theme: Theme for the commit line. Defaults to the configured theme.
    """

    def __init__(self, terminal: Terminal | None = None, theme: Theme | None = None) -> None:
        defaults = get_defaults()
        self.terminal = terminal if terminal is not None else defaults.terminal_factory()
        self.theme = theme if theme is not None else defaults.theme
        self.session = TerminalSession(self.terminal)
        self.renderer = FrameRenderer(self.terminal, self.theme, defaults.checkmark)
        self.decoder = KeyDecoder(self.terminal.read_byte)
        self._active: ActiveElement[Any] | None = None

    def wait_for_key(self) -> KeyEvent:
        """Read one key press in raw mode, whatever it is."""
        with self.session:
            return self.decoder.decode_next()

    def navigate(self, element: ActiveElement[T]) -> T:
        """Paint and feed keys to element in raw mode until it completes."""
        with self.session:
            self.renderer.paint(element.get_lines())
            while True:
                event = self.decoder.read()
                done, result = element.handle_input(event)
                if done:
                    return result  # type: ignore[return-value]
                self.renderer.paint(element.get_lines())

    async def run(self, element: ActiveElement[T]) -> Any:
        """Run an element until it commits and return its result.

        Raises:
            NotATerminalError: If the terminal is not interactive.
            CancelledError: If the user quit the prompt.
        """
        if self._active:
            raise RuntimeError("Another element is already active")

        self.session.ensure_interactive()
        self._active = element
        element.on_activate()
        logger.debug("running %s for %r", type(element).__name__, element.spec.prompt)

        try:
            # Self-managed elements handle their own flow
            if element.is_self_managed():
                return await element.run_async(self)

            result = self.navigate(element)
            defaults = get_defaults()
            self.renderer.paint_commit(
                element.spec.prompt,
                element.answer_for(result),
                separator=element.spec.separator,
                empty_text=defaults.none_selected,
            )
            return result
        finally:
            element.on_deactivate()
            self._active = None
