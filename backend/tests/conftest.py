import os
import tempfile
from pathlib import Path

import pytest

# Keep the module-level engine away from the real data directory.
_DB_DIR = tempfile.mkdtemp(prefix="lifelex-tests-")
os.environ.setdefault("LIFELEX_DATABASE_URL", f"sqlite:///{Path(_DB_DIR) / 'lifelex.db'}")

from lifelex.config import DEFAULT_SOURCE_PATH  # noqa: E402
from lifelex.parsing import parse_lexicon  # noqa: E402


DELIMITER = "-" * 20


def make_lexicon_text(*entries: str, intro: str = "Introduction text.") -> str:
    """Wrap entry blocks between the opening and closing delimiters."""

    body = "\n\n".join(entry.strip("\n") for entry in entries)
    if body:
        body += "\n\n"
    return f"{intro}\n\n{DELIMITER}\n\n{body}{DELIMITER}\n\nTrailer.\n"


@pytest.fixture
def sample_text() -> str:
    return Path(DEFAULT_SOURCE_PATH).read_text(encoding="utf-8")


@pytest.fixture
def sample_lexicon(sample_text):
    return parse_lexicon(sample_text)


@pytest.fixture
def make_text():
    return make_lexicon_text
