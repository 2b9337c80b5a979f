"""Tests for single and multi select prompts.

Covers:
- MenuSelect frame contents and key handling
- Highlight wraparound for any Up/Down sequence
- Multi-select toggling and commit order
- Full runs through select()/multi_select() on a scripted terminal
"""

from __future__ import annotations

import random

import pytest

from conftest import DOWN, ENTER, SPACE, UP, FakeTerminal, render_screen
from nano_select import (
    NotATerminalError,
    multi_select,
    multi_select_async,
    select,
    select_async,
)
from nano_select.elements import MenuSelect
from nano_select.keys import Key, KeyEvent
from nano_select.models import Arity, static_spec

FRAMEWORKS = ["Flutter", "React", "Vue"]


def _menu(options: list[str], **kwargs: object) -> MenuSelect:
    menu = MenuSelect(static_spec("Choose:", options, **kwargs))
    menu.on_activate()
    return menu


class TestMenuSelectLines:
    """Tests for MenuSelect.get_lines()."""

    def test_single_select_frame(self) -> None:
        menu = _menu(FRAMEWORKS, default_index=1)
        assert menu.get_lines() == [
            "Choose:",
            "    Flutter",
            "  ❯ React",
            "    Vue",
        ]

    def test_help_line(self) -> None:
        menu = _menu(FRAMEWORKS, help=True)
        lines = menu.get_lines()
        assert len(lines) == len(FRAMEWORKS) + 2
        assert "Enter" in lines[1]

    def test_multi_select_frame(self) -> None:
        menu = _menu(["A", "B", "C"], arity=Arity.MULTIPLE, default_indices=(1,), help=True)
        assert menu.get_lines() == [
            "Choose:",
            "(Use ↑/↓ to navigate, Space to select, Enter to confirm)",
            "  ❯ ○ A",
            "    ● B",
            "    ○ C",
        ]


class TestSingleSelectInput:
    """Tests for single-select key handling."""

    def test_down_wraps_to_top(self) -> None:
        menu = _menu(FRAMEWORKS, default_index=2)
        menu.handle_input(KeyEvent(Key.DOWN))
        assert menu.state.highlighted == 0

    def test_up_wraps_to_bottom(self) -> None:
        menu = _menu(FRAMEWORKS)
        menu.handle_input(KeyEvent(Key.UP))
        assert menu.state.highlighted == 2

    def test_space_and_commands_do_nothing(self) -> None:
        menu = _menu(FRAMEWORKS)
        assert menu.handle_input(KeyEvent(Key.SPACE)) == (False, None)
        assert menu.handle_input(KeyEvent.command("q")) == (False, None)
        assert menu.state.highlighted == 0
        assert menu.state.selected == set()

    def test_enter_commits_highlight(self) -> None:
        menu = _menu(FRAMEWORKS, default_index=1)
        assert menu.handle_input(KeyEvent(Key.ENTER)) == (True, 1)

    @pytest.mark.parametrize("seed", range(8))
    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_highlight_is_net_moves_mod_count(self, seed: int, count: int) -> None:
        """After any Up/Down sequence the highlight is (initial + net) mod n."""
        rng = random.Random(seed)
        options = [f"opt{i}" for i in range(count)]
        initial = rng.randrange(count)
        menu = _menu(options, default_index=initial)
        net = 0
        for _ in range(rng.randrange(40)):
            if rng.random() < 0.5:
                menu.handle_input(KeyEvent(Key.UP))
                net -= 1
            else:
                menu.handle_input(KeyEvent(Key.DOWN))
                net += 1
        assert menu.state.highlighted == (initial + net) % count


class TestMultiSelectInput:
    """Tests for multi-select key handling."""

    def test_moving_keeps_selection(self) -> None:
        menu = _menu(["A", "B", "C"], arity=Arity.MULTIPLE, default_indices=(2,))
        menu.handle_input(KeyEvent(Key.DOWN))
        menu.handle_input(KeyEvent(Key.UP))
        menu.handle_input(KeyEvent(Key.UP))
        assert menu.state.selected == {2}
        assert menu.state.highlighted == 2

    def test_toggle_twice_restores_selection(self) -> None:
        menu = _menu(["A", "B", "C"], arity=Arity.MULTIPLE, default_indices=(0, 2))
        for index in range(3):
            menu.state.highlighted = index
            before = set(menu.state.selected)
            menu.handle_input(KeyEvent(Key.SPACE))
            menu.handle_input(KeyEvent(Key.SPACE))
            assert menu.state.selected == before

    def test_commit_is_ascending_not_toggle_order(self) -> None:
        menu = _menu(["A", "B", "C", "D"], arity=Arity.MULTIPLE)
        for index in (3, 0, 2):
            menu.state.highlighted = index
            menu.handle_input(KeyEvent(Key.SPACE))
        assert menu.handle_input(KeyEvent(Key.ENTER)) == (True, [0, 2, 3])

    def test_out_of_range_defaults_ignored(self) -> None:
        menu = _menu(["A", "B"], arity=Arity.MULTIPLE, default_indices=(1, 5, -1))
        assert menu.state.selected == {1}


class TestSelectRun:
    """Full runs of select() on a scripted terminal."""

    def test_down_down_enter_commits_vue(self) -> None:
        term = FakeTerminal(DOWN + DOWN + ENTER)
        assert select("Choose a framework:", FRAMEWORKS, 0, terminal=term) == 2
        assert render_screen(term.output) == ["✓ Choose a framework: Vue"]

    def test_default_index_starts_highlight(self) -> None:
        term = FakeTerminal(ENTER)
        assert select("Choose:", FRAMEWORKS, 1, terminal=term) == 1

    def test_ignored_input_between_keys(self) -> None:
        term = FakeTerminal(b"x5\x1b[C" + UP + ENTER)
        assert select("Choose:", FRAMEWORKS, terminal=term) == 2

    def test_every_frame_erases_the_previous_one(self) -> None:
        """Redraws never grow the output: each frame replaces the last."""
        term = FakeTerminal(DOWN + DOWN + DOWN + UP + ENTER)
        term.write("above\n")
        select("Choose:", FRAMEWORKS, terminal=term)
        assert render_screen(term.output) == ["above", "✓ Choose: Vue"]
        # Four repaints and the commit, each erasing prompt + 3 options
        assert term.output.count("\033[1A") == 5 * 4

    def test_terminal_restored_after_commit(self) -> None:
        term = FakeTerminal(ENTER)
        select("Choose:", FRAMEWORKS, terminal=term)
        assert term.mode_log == ["raw", "restore"]
        assert not term.raw

    def test_terminal_restored_when_input_ends(self) -> None:
        term = FakeTerminal(DOWN)
        with pytest.raises(EOFError):
            select("Choose:", FRAMEWORKS, terminal=term)
        assert not term.raw

    def test_not_a_terminal(self) -> None:
        term = FakeTerminal(ENTER, tty=False)
        with pytest.raises(NotATerminalError):
            select("Choose:", FRAMEWORKS, terminal=term)
        assert term.writes == []
        assert term.pending_keys == 1

    def test_show_help_adds_help_row(self) -> None:
        term = FakeTerminal()
        with pytest.raises(EOFError):
            select("Choose:", FRAMEWORKS, show_help=True, terminal=term)
        assert render_screen(term.output) == [
            "Choose:",
            "(Use ↑/↓ to navigate, Enter to select)",
            "  ❯ Flutter",
            "    React",
            "    Vue",
        ]

    def test_empty_options_rejected(self) -> None:
        with pytest.raises(ValueError):
            select("Choose:", [], terminal=FakeTerminal(ENTER))

    async def test_select_async(self) -> None:
        term = FakeTerminal(UP + ENTER)
        assert await select_async("Choose:", FRAMEWORKS, terminal=term) == 2


class TestMultiSelectRun:
    """Full runs of multi_select() on a scripted terminal."""

    def test_space_down_down_space_enter(self) -> None:
        term = FakeTerminal(SPACE + DOWN + DOWN + SPACE + ENTER)
        assert multi_select("Pick:", ["A", "B", "C"], [], terminal=term) == [0, 2]
        assert render_screen(term.output) == ["✓ Pick: A, C"]

    def test_empty_selection_is_valid(self) -> None:
        term = FakeTerminal(ENTER)
        assert multi_select("Pick:", ["A", "B", "C"], terminal=term) == []
        assert render_screen(term.output) == ["✓ Pick: None selected"]

    def test_defaults_can_be_unselected(self) -> None:
        term = FakeTerminal(DOWN + SPACE + ENTER)
        assert multi_select("Pick:", ["A", "B", "C"], [1, 2], terminal=term) == [2]

    def test_custom_separator(self) -> None:
        term = FakeTerminal(ENTER)
        multi_select("Pick:", ["A", "B"], [0, 1], separator=" + ", terminal=term)
        assert render_screen(term.output) == ["✓ Pick: A + B"]

    def test_help_line_is_erased(self) -> None:
        term = FakeTerminal(DOWN + ENTER)
        term.write("above\n")
        multi_select("Pick:", ["A", "B"], terminal=term)
        assert render_screen(term.output) == ["above", "✓ Pick: None selected"]

    async def test_multi_select_async(self) -> None:
        term = FakeTerminal(DOWN + SPACE + ENTER)
        assert await multi_select_async("Pick:", ["A", "B"], terminal=term) == [1]
