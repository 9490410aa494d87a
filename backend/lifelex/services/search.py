from __future__ import annotations

import re
from typing import List

from lifelex.lexicon import Lexicon, Term, lookup

LINK_REGEX = re.compile(r"\{([^{}]+)\}")


def suggest(lexicon: Lexicon, prefix: str, limit: int = 10) -> List[str]:
    """Names starting with ``prefix`` (case-insensitive), in lexicon order."""

    prefix = prefix.strip().casefold()
    if not prefix or limit <= 0:
        return []
    results: List[str] = []
    for term in lexicon.terms:
        if term.name.casefold().startswith(prefix):
            results.append(term.name)
            if len(results) >= limit:
                break
    return results


def terms_with_tag(lexicon: Lexicon, tag: str) -> List[Term]:
    return [term for term in lexicon.terms if tag in term.tags]


def extract_links(description: str) -> List[str]:
    """Cross-referenced term names, e.g. ``["Demonoid"]`` for ``"See {Demonoid}."``."""

    return LINK_REGEX.findall(description)


def render_pattern(term: Term, live: str = "*", dead: str = ".") -> List[str]:
    """Draw the pattern of ``term`` as rows of text.

    Rows are ``width`` characters wide, or wider when a ragged source row put
    cells beyond it.
    """

    if not term.has_pattern:
        return []
    width = max([term.width, *(cell.x + 1 for cell in term.cells)])
    grid = [[dead] * width for _ in range(term.height)]
    for cell in term.cells:
        grid[cell.y][cell.x] = live
    return ["".join(row) for row in grid]


__all__ = ["extract_links", "lookup", "render_pattern", "suggest", "terms_with_tag"]
