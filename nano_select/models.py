"""Prompt descriptions, per-run view state and results."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, NamedTuple, Optional

from .errors import ValidationError
from .sources import OptionsSource, StaticSource

Validator = Callable[[str], Optional[str]]


class Arity(Enum):
    """How many options a prompt commits."""

    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class PromptSpec:
    """Immutable description of one prompt invocation.

    Attributes:
        prompt: Question shown to the user
        source: Where options come from
        validator: Returns an error message for a rejected value, else None
        default_index: Initially highlighted option
        default_indices: Initially selected options (multi-select)
        arity: Single index or index set
        help: Show the key help line
        min_query_length: Shorter search queries yield no results
        max_results: Cap on search results shown
        separator: Joins answers on the commit line
    """

    prompt: str
    source: OptionsSource
    validator: Validator | None = None
    default_index: int | None = None
    default_indices: tuple[int, ...] = ()
    arity: Arity = Arity.SINGLE
    help: bool = False
    min_query_length: int = 1
    max_results: int = 10
    separator: str = ", "

    def __post_init__(self) -> None:
        if self.max_results < 1:
            raise ValueError("max_results must be at least 1")
        if self.min_query_length < 0:
            raise ValueError("min_query_length must not be negative")

    @property
    def options(self) -> tuple[str, ...]:
        """Options of a static source."""
        if not isinstance(self.source, StaticSource):
            raise TypeError("Only static sources have a fixed option list")
        return self.source.options

    def validate(self, value: str) -> None:
        """Run the validator.

        Raises:
            ValidationError: If the validator rejects value.
        """
        if self.validator is None:
            return
        error = self.validator(value)
        if error is not None:
            raise ValidationError(error)


@dataclass
class ViewState:
    """Mutable state of one prompt run."""

    highlighted: int = 0
    selected: set[int] = field(default_factory=set)
    query: str = ""
    results: list[str] = field(default_factory=list)
    error: str | None = None

    def move(self, delta: int, count: int) -> None:
        """Move the highlight with wraparound in both directions."""
        if count > 0:
            self.highlighted = (self.highlighted + delta) % count

    def toggle(self, index: int) -> None:
        if index in self.selected:
            self.selected.remove(index)
        else:
            self.selected.add(index)

    def sorted_selection(self) -> list[int]:
        return sorted(self.selected)


class SearchResult(NamedTuple):
    """Committed search answer.

    value is the chosen string. index is the value's position in a static
    source's option list, or in the result snapshot for a dynamic source,
    where it has no meaning beyond this commit.
    """

    value: str
    index: int


def static_spec(prompt: str, options: Sequence[str], **kwargs: object) -> PromptSpec:
    """Build a PromptSpec over a fixed option list, rejecting empty lists."""
    if not options:
        raise ValueError("options must not be empty")
    return PromptSpec(prompt=prompt, source=StaticSource(options), **kwargs)  # type: ignore[arg-type]
