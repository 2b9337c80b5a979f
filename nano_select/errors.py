"""Exceptions raised by interactive prompts."""

from __future__ import annotations


class PromptError(Exception):
    """Base class for all prompt errors."""


class NotATerminalError(PromptError):
    """Input stream is not an interactive terminal."""

    def __init__(self, message: str = "Input is not an interactive terminal") -> None:
        super().__init__(message)


class ValidationError(PromptError):
    """A chosen value was rejected by the prompt's validator.

    Recovered locally by re-prompting; never escapes a prompt.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyResultError(PromptError):
    """A search query produced no results."""

    def __init__(self, query: str) -> None:
        super().__init__(f"No results for {query!r}")
        self.query = query


class CancelledError(PromptError):
    """The user quit the prompt."""

    def __init__(self, message: str = "Search cancelled") -> None:
        super().__init__(message)
