from __future__ import annotations

from typing import List

from sqlalchemy import JSON, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifelex.database import Base


class TermRecord(Base):
    __tablename__ = "terms"
    __table_args__ = (
        Index("ix_terms_name", "name"),
        Index("ix_terms_position", "position"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Order of the term in the source lexicon; names are not unique.
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    cells: Mapped[List[List[int]]] = mapped_column(JSON, nullable=False, default=list)
    width: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    height: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
