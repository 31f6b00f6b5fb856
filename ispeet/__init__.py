"""Top-level package for the French-suited deck model."""

from . import cards, encoding, errors, render, sampling
from .cards import Card, FormatStyle, Ordering, Rank, Suit
from .errors import ParseError, ParseRankError, ParseSuitError

__all__ = [
    "cards",
    "encoding",
    "errors",
    "render",
    "sampling",
    "Card",
    "FormatStyle",
    "Ordering",
    "Rank",
    "Suit",
    "ParseError",
    "ParseRankError",
    "ParseSuitError",
]
