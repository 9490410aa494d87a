import logging
from typing import Annotated, List

from fastapi import Depends, FastAPI, HTTPException, Query

from lifelex import admin
from lifelex.config import get_settings
from lifelex.database import init_db
from lifelex.lexicon import Lexicon, lookup
from lifelex.schemas import LexiconInfo, TermPayload, TermSummary
from lifelex.services.artifact import load_default_lexicon
from lifelex.services.search import suggest as suggest_names
from lifelex.services.search import terms_with_tag

LOGGER = logging.getLogger(__name__)

app = FastAPI(
    title="lifelex API",
    description="Lookup service for Game of Life lexicon patterns",
    version="0.1.0",
)

app.include_router(admin.router)


@app.on_event("startup")
def on_startup() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(levelname)s %(name)s %(message)s",
    )
    init_db()
    lexicon = load_default_lexicon()
    LOGGER.info("Lexicon ready with %d terms", len(lexicon))


LexiconDep = Annotated[Lexicon, Depends(load_default_lexicon)]


@app.get("/", response_model=LexiconInfo)
def read_root(lexicon: LexiconDep) -> LexiconInfo:
    return LexiconInfo(terms=len(lexicon))


@app.get("/terms/{name:path}", response_model=TermPayload)
def get_term(name: str, lexicon: LexiconDep) -> TermPayload:
    term = lookup(lexicon, name)
    if term is None:
        raise HTTPException(status_code=404, detail=f"Term {name!r} not found")
    return TermPayload.from_term(term)


@app.get("/suggest", response_model=List[str])
def suggest(
    prefix: Annotated[str, Query(min_length=1)],
    lexicon: LexiconDep,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
) -> List[str]:
    return suggest_names(lexicon, prefix, limit=limit)


@app.get("/tags/{tag:path}", response_model=List[TermSummary])
def get_tagged_terms(tag: str, lexicon: LexiconDep) -> List[TermSummary]:
    return [
        TermSummary(name=term.name, tags=list(term.tags))
        for term in terms_with_tag(lexicon, tag)
    ]
