"""Lexicon text parsing helpers."""

from .lines import Header, LineInfo, LineKind, classify_line, parse_header, read_cells_row
from .parser import ParserState, TermBuilder, iter_lines, parse_file, parse_lexicon

__all__ = [
    "Header",
    "LineInfo",
    "LineKind",
    "ParserState",
    "TermBuilder",
    "classify_line",
    "iter_lines",
    "parse_file",
    "parse_header",
    "parse_lexicon",
    "read_cells_row",
]
