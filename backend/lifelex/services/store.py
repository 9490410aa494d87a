from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.orm import Session

from lifelex.lexicon import Cell, Lexicon, Term
from lifelex.models import TermRecord

LOGGER = logging.getLogger(__name__)


def _record_to_term(record: TermRecord) -> Term:
    return Term(
        name=record.name,
        description=record.description,
        tags=tuple(record.tags or []),
        cells=tuple(Cell(x, y) for x, y in record.cells or []),
        width=record.width,
        height=record.height,
    )


class LexiconStore:
    """Database copy of a parsed lexicon, one row per term."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def replace(self, lexicon: Lexicon) -> int:
        self.session.execute(delete(TermRecord))
        payload = [
            {
                "position": position,
                "name": term.name,
                "description": term.description,
                "tags": list(term.tags),
                "cells": [[cell.x, cell.y] for cell in term.cells],
                "width": term.width,
                "height": term.height,
            }
            for position, term in enumerate(lexicon.terms)
        ]
        if payload:
            self.session.execute(insert(TermRecord), payload)
        self.session.flush()
        LOGGER.info("Stored %d terms", len(payload))
        return len(payload)

    def load(self) -> Lexicon:
        records = self.session.execute(
            select(TermRecord).order_by(TermRecord.position)
        ).scalars()
        return Lexicon(terms=tuple(_record_to_term(record) for record in records))

    def get_term(self, name: str) -> Optional[Term]:
        record = self.session.execute(
            select(TermRecord)
            .where(TermRecord.name == name)
            .order_by(TermRecord.position)
            .limit(1)
        ).scalar_one_or_none()
        if record is None:
            return None
        return _record_to_term(record)

    def search(self, prefix: str, limit: int = 10) -> List[str]:
        prefix = prefix.strip()
        if not prefix:
            return []
        escaped = prefix.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        stmt = (
            select(TermRecord.name)
            .where(func.lower(TermRecord.name).like(f"{escaped}%", escape="\\"))
            .order_by(TermRecord.position)
            .limit(limit)
        )
        return list(self.session.execute(stmt).scalars())

    def count(self) -> int:
        return int(self.session.execute(select(func.count(TermRecord.id))).scalar_one())
