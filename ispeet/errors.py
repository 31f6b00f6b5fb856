"""Exceptions raised while parsing deck values from text."""

from __future__ import annotations

from enum import Enum

__all__ = ["ParseErrorKind", "ParseError", "ParseSuitError", "ParseRankError"]


class ParseErrorKind(str, Enum):
    """Which value type failed to parse."""

    SUIT = "Suit"
    RANK = "Rank"


class ParseError(ValueError):
    """Base class for text that does not name a suit or rank.

    ``text`` holds the offending input exactly as the caller supplied it.
    """

    kind: ParseErrorKind

    def __init__(self, text: str) -> None:
        super().__init__(f"cannot parse {text!r} into {self.kind.value}")
        self.text = text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind is other.kind and self.text == other.text

    def __hash__(self) -> int:
        return hash((self.kind, self.text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"


class ParseSuitError(ParseError):
    """Raised when text does not name one of the four suits."""

    kind = ParseErrorKind.SUIT


class ParseRankError(ParseError):
    """Raised when text does not name one of the thirteen ranks."""

    kind = ParseErrorKind.RANK
