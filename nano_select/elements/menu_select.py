"""Menu selection element.

Allows user to select from a fixed list of options using arrow keys.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..keys import Key, KeyEvent
from ..models import Arity
from .base import ActiveElement


@dataclass
class MenuSelect(ActiveElement["int | list[int]"]):
    """Menu selection with arrow keys.

    Up/Down move the highlight, wrapping at both ends.
    - Single-select: Enter commits the highlighted index.
    - Multi-select: Space toggles, Enter commits the selected indices in
      ascending order. An empty selection is a valid answer.
    """

    def on_activate(self) -> None:
        count = len(self.options)
        if self.multi_select:
            self.state.highlighted = 0
            self.state.selected = {i for i in self.spec.default_indices if 0 <= i < count}
        else:
            # Not range-checked: a bad default is the caller's bug
            self.state.highlighted = self.spec.default_index or 0

    @property
    def options(self) -> tuple[str, ...]:
        return self.spec.options

    @property
    def multi_select(self) -> bool:
        return self.spec.arity is Arity.MULTIPLE

    def get_lines(self) -> list[str]:
        theme = self.style
        lines = [theme.primary(self.spec.prompt)]
        if self.spec.help:
            help_text = (
                self.defaults.multi_select_help if self.multi_select else self.defaults.select_help
            )
            lines.append(theme.muted(help_text))
        for i, opt in enumerate(self.options):
            current = i == self.state.highlighted
            if self.multi_select:
                if i in self.state.selected:
                    mark = theme.primary(self.defaults.checked)
                else:
                    mark = self.defaults.unchecked
                lines.append(self.option_row(opt, current, mark))
            else:
                lines.append(self.option_row(opt, current))
        return lines

    def handle_input(self, event: KeyEvent) -> tuple[bool, int | list[int] | None]:
        if event.key is Key.ENTER:
            if self.multi_select:
                return (True, self.state.sorted_selection())
            return (True, self.state.highlighted)
        elif event.key is Key.UP:
            self.state.move(-1, len(self.options))
        elif event.key is Key.DOWN:
            self.state.move(1, len(self.options))
        elif event.key is Key.SPACE and self.multi_select:
            self.state.toggle(self.state.highlighted)
        return (False, None)

    def answer_for(self, result: int | list[int]) -> str | Sequence[str]:
        if isinstance(result, list):
            return [self.options[i] for i in result]
        return self.options[result]
