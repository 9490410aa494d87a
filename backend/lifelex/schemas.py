from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from lifelex.lexicon import Term
from lifelex.services.search import extract_links, render_pattern


class CellPayload(BaseModel):
    x: int
    y: int


class TermPayload(BaseModel):
    name: str
    description: str
    tags: List[str] = Field(default_factory=list)
    cells: List[CellPayload] = Field(default_factory=list)
    width: int = 0
    height: int = 0
    links: List[str] = Field(default_factory=list, description="Names referenced as {name} in the description.")
    pattern: List[str] = Field(default_factory=list, description="Grid rows, '*' live and '.' dead.")

    @classmethod
    def from_term(cls, term: Term) -> "TermPayload":
        return cls(
            name=term.name,
            description=term.description,
            tags=list(term.tags),
            cells=[CellPayload(x=cell.x, y=cell.y) for cell in term.cells],
            width=term.width,
            height=term.height,
            links=extract_links(term.description),
            pattern=render_pattern(term),
        )


class TermSummary(BaseModel):
    name: str
    tags: List[str]


class LexiconInfo(BaseModel):
    terms: int


class SyncResponse(BaseModel):
    stored: int
