"""Keyboard decoding.

Turns the terminal's raw byte stream into a closed set of key events:
- Key: the kinds of event a prompt can receive
- KeyEvent: one decoded key press
- KeyDecoder: blocking reader producing KeyEvents from a Terminal
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

ENTER_BYTES = (10, 13)
SPACE = 32
ESC = 27
CSI_INTRO = 91  # '['
ARROW_UP = 65  # 'A'
ARROW_DOWN = 66  # 'B'


class Key(Enum):
    """Kind of a decoded key press."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    SPACE = "space"
    COMMAND = "command"  # single letter, meaning depends on the prompt
    IGNORED = "ignored"  # unrecognized byte or escape sequence


@dataclass(frozen=True)
class KeyEvent:
    """A keyboard input event."""

    key: Key
    char: str | None = None  # Letter for COMMAND events

    @classmethod
    def command(cls, char: str) -> KeyEvent:
        return cls(Key.COMMAND, char)


class KeyDecoder:
    """Blocking decoder over a byte source.

    Decoding table:
        10, 13            -> ENTER
        32                -> SPACE
        27 91 65          -> UP
        27 91 66          -> DOWN
        ASCII letter      -> COMMAND(letter)

    After an escape byte exactly two more bytes are read. Sequences that are
    not an up/down arrow are dropped whole and decoding resumes with the
    byte after them. Everything else is IGNORED.

    Args:
        read_byte: Callable blocking until one byte is available.
    """

    def __init__(self, read_byte: Callable[[], int]) -> None:
        self._read_byte = read_byte

    def decode_next(self) -> KeyEvent:
        """Consume the bytes of one key press, which may decode to IGNORED."""
        byte = self._read_byte()
        if byte in ENTER_BYTES:
            return KeyEvent(Key.ENTER)
        if byte == SPACE:
            return KeyEvent(Key.SPACE)
        if byte == ESC:
            second = self._read_byte()
            third = self._read_byte()
            if second == CSI_INTRO:
                if third == ARROW_UP:
                    return KeyEvent(Key.UP)
                if third == ARROW_DOWN:
                    return KeyEvent(Key.DOWN)
            return KeyEvent(Key.IGNORED)
        char = chr(byte)
        if char.isascii() and char.isalpha():
            return KeyEvent.command(char)
        return KeyEvent(Key.IGNORED)

    def read(self) -> KeyEvent:
        """Block until a key press that isn't IGNORED arrives."""
        while True:
            event = self.decode_next()
            if event.key is not Key.IGNORED:
                return event
