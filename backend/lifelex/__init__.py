"""Typed access to the Game of Life pattern lexicon."""

from .errors import ArtifactError, GrammarError, LexiconError, ParseError, StructuralError
from .lexicon import Cell, Lexicon, Term, lookup
from .parsing import parse_file, parse_lexicon

__all__ = [
    "ArtifactError",
    "Cell",
    "GrammarError",
    "Lexicon",
    "LexiconError",
    "ParseError",
    "StructuralError",
    "Term",
    "lookup",
    "parse_file",
    "parse_lexicon",
]
