"""Classification of single lexicon lines."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from lifelex.lexicon import Cell


DELIMITER_REGEX = re.compile(r"^-{4,}")
HEADER_REGEX = re.compile(r"^:(?P<name>[^:]+): (\((?P<tags>[^)]+)\))?(?P<desc>.*)$")

HEADER_MARKER = ":"
GRID_PREFIX = "\t"
CONTINUATION_PREFIX = "   "
TAG_SEPARATOR = ", "
LIVE_CELL = "*"


class LineKind(str, Enum):
    delimiter = "delimiter"
    header = "header"
    malformed_header = "malformed_header"
    grid_row = "grid_row"
    continuation = "continuation"
    terminator = "terminator"
    ignored = "ignored"


@dataclass(frozen=True, slots=True)
class Header:
    name: str
    tags: Tuple[str, ...]
    description: str


@dataclass(frozen=True, slots=True)
class LineInfo:
    """Role of a line plus whatever payload that role carries.

    ``header`` is set for headers, ``text`` holds the trimmed fragment of a
    continuation line and ``row`` the tab-stripped content of a grid row.
    """

    kind: LineKind
    header: Optional[Header] = None
    text: Optional[str] = None
    row: Optional[str] = None


def parse_header(line: str) -> Optional[Header]:
    match = HEADER_REGEX.match(line)
    if not match:
        return None
    tags_raw = match.group("tags")
    tags = tuple(tags_raw.split(TAG_SEPARATOR)) if tags_raw else ()
    return Header(
        name=match.group("name"),
        tags=tags,
        description=match.group("desc").strip(),
    )


def read_cells_row(row: str, y: int) -> List[Cell]:
    """Live cells of one grid row; ``row`` must already be tab-stripped."""

    return [Cell(x, y) for x, char in enumerate(row) if char == LIVE_CELL]


def classify_line(line: str) -> LineInfo:
    if DELIMITER_REGEX.match(line):
        return LineInfo(LineKind.delimiter)
    if line.startswith(HEADER_MARKER):
        header = parse_header(line)
        if header is None:
            return LineInfo(LineKind.malformed_header)
        return LineInfo(LineKind.header, header=header)
    if line.startswith(GRID_PREFIX):
        return LineInfo(LineKind.grid_row, row=line[len(GRID_PREFIX):])
    if line.startswith(CONTINUATION_PREFIX):
        return LineInfo(LineKind.continuation, text=line.strip())
    if not line:
        return LineInfo(LineKind.terminator)
    return LineInfo(LineKind.ignored)
