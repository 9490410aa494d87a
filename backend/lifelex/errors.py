from __future__ import annotations

from typing import Optional


class LexiconError(ValueError):
    """Base class for every error raised by lifelex."""


class ParseError(LexiconError):
    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(f"Parse error: {message}")


class StructuralError(ParseError):
    """Input ended while a delimiter, header or terminator was still expected."""


class GrammarError(ParseError):
    """A header line does not follow ``:name: (tags) description``."""


class ArtifactError(LexiconError):
    """A compiled lexicon artifact cannot be decoded."""
