"""Base class for interactive prompt elements.

An element owns the state of one prompt and knows how to draw it and how
to react to a key. The SelectionEngine drives it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from ..config import PromptDefaults, get_defaults
from ..keys import KeyEvent
from ..models import PromptSpec, ViewState
from ..theme import Theme

if TYPE_CHECKING:
    from ..engine import SelectionEngine

T = TypeVar("T")


@dataclass
class ActiveElement(ABC, Generic[T]):
    """An interactive prompt with exclusive control of the terminal.

    Lifecycle for standard elements:
        1. on_activate() - setup
        2. get_lines() -> render
        3. handle_input() -> process key, return (done, result)
        4. answer_for(result) -> text for the commit line
        5. on_deactivate() - cleanup

    Self-managed elements (is_self_managed=True) drive the engine themselves
    via run_async() instead.
    """

    spec: PromptSpec
    theme: Theme | None = None
    defaults: PromptDefaults = field(default_factory=get_defaults)
    state: ViewState = field(default_factory=ViewState, init=False)

    def __post_init__(self) -> None:
        if self.theme is None:
            self.theme = self.defaults.theme

    @property
    def style(self) -> Theme:
        assert self.theme is not None
        return self.theme

    def is_self_managed(self) -> bool:
        """Return True if element handles its own I/O."""
        return False

    async def run_async(self, engine: SelectionEngine) -> T:
        """Run self-managed element. Override for custom I/O handling."""
        raise NotImplementedError("Self-managed elements must implement run_async()")

    @abstractmethod
    def get_lines(self) -> list[str]:
        """Return lines of the current frame."""
        ...

    @abstractmethod
    def handle_input(self, event: KeyEvent) -> tuple[bool, T | None]:
        """Handle input event.

        Returns:
            (done, result) - if done=True, element completes with result
        """
        ...

    def answer_for(self, result: T) -> str | Sequence[str]:
        """Text shown after the prompt on the commit line."""
        return str(result)

    def on_activate(self) -> None:
        """Called when element becomes active."""
        pass

    def on_deactivate(self) -> None:
        """Called when element completes."""
        pass

    def option_row(self, label: str, current: bool, mark: str | None = None) -> str:
        """Format one option row with the pointer and optional checkbox mark."""
        theme = self.style
        pointer = theme.primary(self.defaults.pointer) if current else " "
        text = theme.primary(label) if current else label
        if mark is None:
            return f"  {pointer} {text}"
        return f"  {pointer} {mark} {text}"
