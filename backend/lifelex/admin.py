from __future__ import annotations

import logging
import threading

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from lifelex.config import get_settings
from lifelex.database import get_session
from lifelex.errors import LexiconError
from lifelex.lexicon import Lexicon
from lifelex.schemas import LexiconInfo, SyncResponse
from lifelex.services.artifact import compile_lexicon, load_default_lexicon
from lifelex.services.store import LexiconStore

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

_compile_lock = threading.Lock()


@router.post("/compile", response_model=LexiconInfo)
def trigger_compile() -> LexiconInfo:
    settings = get_settings()
    if not settings.source_path.exists():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Lexicon source {settings.source_path} not found.",
        )
    if not _compile_lock.acquire(blocking=False):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Compilation is already running.",
        )
    try:
        lexicon = compile_lexicon(settings.source_path, settings.artifact_path)
    except LexiconError as exc:
        LOGGER.error("Lexicon compilation failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    finally:
        _compile_lock.release()
    load_default_lexicon.cache_clear()
    return LexiconInfo(terms=len(lexicon))


@router.post("/sync", response_model=SyncResponse)
def sync_database(
    lexicon: Lexicon = Depends(load_default_lexicon),
    session: Session = Depends(get_session),
) -> SyncResponse:
    stored = LexiconStore(session).replace(lexicon)
    return SyncResponse(stored=stored)


@router.get("/stats", response_model=LexiconInfo)
def database_stats(session: Session = Depends(get_session)) -> LexiconInfo:
    return LexiconInfo(terms=LexiconStore(session).count())
