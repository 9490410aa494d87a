"""Line-oriented parser turning lexicon text into a :class:`Lexicon`."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from lifelex.errors import GrammarError, StructuralError
from lifelex.lexicon import Cell, Lexicon, Term
from lifelex.parsing.lines import Header, LineKind, classify_line, read_cells_row

LOGGER = logging.getLogger(__name__)

NumberedLine = Tuple[int, str]


class ParserState(str, Enum):
    before_lexicon = "before_lexicon"
    in_lexicon = "in_lexicon"
    done = "done"


class TermBuilder:
    """Accumulates the lines of a single entry until its blank line.

    Once a continuation line follows the first grid row the grid is closed:
    grid rows appearing after that are dropped and do not count towards the
    height.
    """

    def __init__(self, header: Header) -> None:
        self.name = header.name
        self.tags = header.tags
        self.fragments: List[str] = [header.description]
        self.cells: List[Cell] = []
        self.width: Optional[int] = None
        self.rows = 0
        self.grid_closed = False

    @property
    def grid_started(self) -> bool:
        return self.rows > 0

    def add_continuation(self, text: str) -> None:
        if self.grid_started:
            self.grid_closed = True
        self.fragments.append(text)

    def add_grid_row(self, row: str) -> bool:
        if self.grid_closed:
            return False
        if self.width is None:
            self.width = len(row)
        self.cells.extend(read_cells_row(row, self.rows))
        self.rows += 1
        return True

    def build(self) -> Term:
        return Term(
            name=self.name,
            description=" ".join(self.fragments),
            tags=tuple(self.tags),
            cells=tuple(self.cells),
            width=self.width or 0,
            height=self.rows,
        )


def iter_lines(text: str) -> Iterator[NumberedLine]:
    """Yield ``(line_number, line)`` pairs without line terminators.

    Only ``\\n`` and ``\\r\\n`` end a line and a final terminator does not
    produce an extra empty line.
    """

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for number, line in enumerate(lines, start=1):
        yield number, line.removesuffix("\r")


def _read_term(header: Header, header_number: int, lines: Iterator[NumberedLine]) -> Term:
    builder = TermBuilder(header)
    for number, line in lines:
        info = classify_line(line)
        if info.kind is LineKind.terminator:
            return builder.build()
        if info.kind is LineKind.malformed_header:
            raise GrammarError(f"can't parse term name in {line!r}", line_number=number)
        if info.kind is LineKind.continuation:
            builder.add_continuation(info.text or "")
        elif info.kind is LineKind.grid_row:
            if not builder.add_grid_row(info.row or ""):
                LOGGER.debug("Grid row after description in %r dropped (line %d)", builder.name, number)
    raise StructuralError(
        f"unexpected end of input inside term {builder.name!r}",
        line_number=header_number,
    )


def parse_lexicon(text: str) -> Lexicon:
    """Parse the full lexicon text.

    Everything before the first delimiter line and after the second one is
    ignored. Any malformed header or premature end of input aborts the whole
    parse.
    """

    lines = iter_lines(text)
    state = ParserState.before_lexicon
    terms: List[Term] = []

    for number, line in lines:
        info = classify_line(line)
        if state is ParserState.before_lexicon:
            if info.kind is LineKind.delimiter:
                state = ParserState.in_lexicon
            continue

        if info.kind is LineKind.delimiter:
            state = ParserState.done
            break
        if info.kind is LineKind.malformed_header:
            raise GrammarError(f"can't parse term name in {line!r}", line_number=number)
        if info.kind is LineKind.header and info.header is not None:
            terms.append(_read_term(info.header, number, lines))
        elif info.kind is not LineKind.terminator:
            LOGGER.debug("Skipping stray line %d outside of a term", number)

    if state is ParserState.before_lexicon:
        raise StructuralError("no lexicon start found")
    if state is ParserState.in_lexicon:
        raise StructuralError("unexpected end of input, lexicon end delimiter missing")

    LOGGER.info("Parsed %d lexicon terms", len(terms))
    return Lexicon(terms=tuple(terms))


def parse_file(path: str | Path, encoding: str = "utf-8") -> Lexicon:
    with open(path, "r", encoding=encoding, newline="") as fh:
        return parse_lexicon(fh.read())
