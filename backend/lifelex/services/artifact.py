"""Compiled lexicon artifact: compact, deterministic and round-trippable."""

from __future__ import annotations

import json
import logging
import zlib
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from lifelex.config import get_settings
from lifelex.errors import ArtifactError
from lifelex.lexicon import Cell, Lexicon, Term
from lifelex.parsing import parse_file

LOGGER = logging.getLogger(__name__)

MAGIC = b"LLX1"
FORMAT_VERSION = 1


def term_to_dict(term: Term) -> Dict[str, Any]:
    return {
        "name": term.name,
        "description": term.description,
        "tags": list(term.tags),
        "cells": [[cell.x, cell.y] for cell in term.cells],
        "width": term.width,
        "height": term.height,
    }


def _list_field(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ArtifactError(f"Malformed artifact payload: {key!r} must be a list")
    return value


def term_from_dict(data: Dict[str, Any]) -> Term:
    return Term(
        name=str(data["name"]),
        description=str(data["description"]),
        tags=tuple(str(tag) for tag in _list_field(data, "tags")),
        cells=tuple(Cell(int(x), int(y)) for x, y in _list_field(data, "cells")),
        width=int(data.get("width") or 0),
        height=int(data.get("height") or 0),
    )


def lexicon_to_dict(lexicon: Lexicon) -> Dict[str, Any]:
    return {
        "version": FORMAT_VERSION,
        "terms": [term_to_dict(term) for term in lexicon.terms],
    }


def lexicon_from_dict(data: Dict[str, Any]) -> Lexicon:
    version = data.get("version")
    if version != FORMAT_VERSION:
        raise ArtifactError(f"Unsupported artifact version: {version!r}")
    try:
        terms: List[Term] = [term_from_dict(item) for item in data["terms"]]
    except ArtifactError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise ArtifactError(f"Malformed artifact payload: {exc}") from exc
    return Lexicon(terms=tuple(terms))


def serialize_lexicon(lexicon: Lexicon) -> bytes:
    payload = json.dumps(
        lexicon_to_dict(lexicon),
        ensure_ascii=False,
        sort_keys=True,
        separators=(",", ":"),
    )
    return MAGIC + zlib.compress(payload.encode("utf-8"), 9)


def deserialize_lexicon(data: bytes) -> Lexicon:
    if not data.startswith(MAGIC):
        raise ArtifactError("Not a lexicon artifact (bad magic)")
    try:
        payload = zlib.decompress(data[len(MAGIC):]).decode("utf-8")
        decoded = json.loads(payload)
    except (zlib.error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ArtifactError(f"Corrupt lexicon artifact: {exc}") from exc
    if not isinstance(decoded, dict):
        raise ArtifactError("Malformed artifact payload: expected an object")
    return lexicon_from_dict(decoded)


def write_artifact(lexicon: Lexicon, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = serialize_lexicon(lexicon)
    path.write_bytes(data)
    LOGGER.info("Wrote %d terms to %s (%d bytes)", len(lexicon), path, len(data))


def read_artifact(path: Path) -> Lexicon:
    lexicon = deserialize_lexicon(path.read_bytes())
    LOGGER.debug("Loaded %d terms from %s", len(lexicon), path)
    return lexicon


def compile_lexicon(source_path: Path, artifact_path: Path) -> Lexicon:
    """Parse the text lexicon at ``source_path`` and store it as an artifact."""

    LOGGER.info("Reading lexicon %s", source_path)
    lexicon = parse_file(source_path)
    write_artifact(lexicon, artifact_path)
    return lexicon


@lru_cache(maxsize=1)
def load_default_lexicon() -> Lexicon:
    """Load the configured lexicon once per process.

    The compiled artifact is preferred; when it has not been built yet the
    text source is parsed instead.
    """

    settings = get_settings()
    if settings.artifact_path.exists():
        return read_artifact(settings.artifact_path)
    LOGGER.info("No artifact at %s, parsing %s", settings.artifact_path, settings.source_path)
    return parse_file(settings.source_path)
