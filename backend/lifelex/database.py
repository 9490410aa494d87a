from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from lifelex.config import get_settings


Base = declarative_base()


def _database_url() -> str:
    return get_settings().database_url


def _create_engine(url: str) -> Engine:
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:"):
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(
        url,
        echo=False,
        future=True,
        pool_pre_ping=True,
    )


engine = _create_engine(_database_url())

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    future=True,
)


def get_session() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(bind: Engine = engine) -> None:
    # Import models for side-effects so SQLAlchemy registers them with the metadata
    from lifelex import models  # noqa: F401

    Base.metadata.create_all(bind=bind)
