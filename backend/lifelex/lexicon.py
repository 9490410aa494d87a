"""Typed representation of a parsed pattern lexicon."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Cell:
    """A live cell of a pattern: ``x`` is the column, ``y`` the row."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Term:
    """One lexicon entry.

    Links to other terms are kept verbatim inside ``description``, enclosed in
    curly braces, e.g. ``"See also {glider}."``.
    """

    name: str
    description: str
    tags: Tuple[str, ...] = ()
    cells: Tuple[Cell, ...] = ()
    width: int = 0
    height: int = 0

    @property
    def has_pattern(self) -> bool:
        return bool(self.height)


@dataclass(frozen=True, slots=True)
class Lexicon:
    terms: Tuple[Term, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def get_term(self, name: str) -> Optional[Term]:
        """Return the first term whose name is exactly ``name``."""

        return lookup(self, name)


def lookup(lexicon: Lexicon, name: str) -> Optional[Term]:
    for term in lexicon.terms:
        if term.name == name:
            return term
    return None
