from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parent.parent
PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"

DEFAULT_SOURCE_PATH = PACKAGE_DATA_DIR / "lexicon.txt"
DEFAULT_ARTIFACT_PATH = PACKAGE_DATA_DIR / "lexicon.bin"
DEFAULT_DATABASE_URL = f"sqlite:///{BACKEND_DIR / 'data' / 'lifelex.db'}"


def _resolve_path(env_name: str, default: Path) -> Path:
    env_value = os.getenv(env_name)
    if not env_value:
        return default
    candidate = Path(env_value).expanduser()
    if not candidate.is_absolute():
        candidate = BACKEND_DIR / candidate
    return candidate.resolve()


@dataclass(frozen=True)
class Settings:
    source_path: Path
    artifact_path: Path
    database_url: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    return Settings(
        source_path=_resolve_path("LIFELEX_SOURCE_PATH", DEFAULT_SOURCE_PATH),
        artifact_path=_resolve_path("LIFELEX_ARTIFACT_PATH", DEFAULT_ARTIFACT_PATH),
        database_url=os.getenv("LIFELEX_DATABASE_URL", DEFAULT_DATABASE_URL),
        log_level=os.getenv("LIFELEX_LOG_LEVEL", "INFO").upper(),
    )
