"""Suits, ranks and cards of the standard French-suited deck.

The standard deck comprises thirteen ranks in each of the four suits: clubs (♣),
diamonds (♦), hearts (♥) and spades (♠). Each suit holds three court cards
(King, Queen and Jack) and ten numeral cards from Ace to Ten. Jokers are not
represented.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import total_ordering
from typing import Final, Iterator

from .errors import ParseRankError, ParseSuitError

__all__ = [
    "FormatStyle",
    "Ordering",
    "Suit",
    "Rank",
    "Card",
    "iter_cards",
    "parse_suit",
    "parse_rank",
    "format_value",
    "partial_cmp",
]


class FormatStyle(str, Enum):
    """Pretty printing styles shared by suits, ranks and cards."""

    COMPACT = "compact"
    VERBOSE = "verbose"


class Ordering(IntEnum):
    """Result of comparing two comparable values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _split_format_spec(spec: str) -> tuple[FormatStyle, str]:
    # A leading "#" selects the verbose style; the remainder is a plain str spec.
    if spec.startswith("#"):
        return FormatStyle.VERBOSE, spec[1:]
    return FormatStyle.COMPACT, spec


class Suit(Enum):
    """The four suits, declared in canonical order."""

    CLUBS = "c"
    DIAMONDS = "d"
    HEARTS = "h"
    SPADES = "s"

    @classmethod
    def all(cls) -> tuple["Suit", ...]:
        """Return every suit in canonical order."""

        return _ALL_SUITS

    @classmethod
    def parse(cls, text: str) -> "Suit":
        """Parse a suit from a case-insensitive glyph, letter or name.

        Both the filled (♣) and the outline (♧) glyphs are accepted, as are the
        singular and plural names.
        """

        try:
            return _SUIT_LOOKUP[text.lower()]
        except KeyError:
            raise ParseSuitError(text) from None

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    @property
    def words(self) -> str:
        return _SUIT_WORDS[self]

    def format(self, style: FormatStyle | str = FormatStyle.COMPACT) -> str:
        """Return the suit glyph (compact) or its English name (verbose)."""

        style = FormatStyle(style)
        if style is FormatStyle.VERBOSE:
            return self.words
        return self.symbol

    def __str__(self) -> str:
        return self.symbol

    def __format__(self, spec: str) -> str:
        style, rest = _split_format_spec(spec)
        return format(self.format(style), rest)


@total_ordering
class Rank(Enum):
    """The thirteen ranks; values are ordinals with Ace high."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def all(cls) -> tuple["Rank", ...]:
        """Return every rank from Two to Ace."""

        return _ALL_RANKS

    @classmethod
    def parse(cls, text: str) -> "Rank":
        """Parse a rank from a case-insensitive number, letter or name.

        Single letters: A (Ace), D (deuce), T, J, Q, K. Both "1" and "14" name
        the Ace; "deuce", "trey" and "knave" are accepted as synonyms.
        """

        try:
            return _RANK_LOOKUP[text.lower()]
        except KeyError:
            raise ParseRankError(text) from None

    @property
    def ordinal(self) -> int:
        return self.value

    @property
    def words(self) -> str:
        return self.name.capitalize()

    def is_face_card(self) -> bool:
        """Return ``True`` for court cards. Only Jack, Queen and King qualify."""

        return 10 < self.value <= 13

    def format(self, style: FormatStyle | str = FormatStyle.COMPACT) -> str:
        """Return the number or initial (compact) or the English name (verbose)."""

        style = FormatStyle(style)
        if style is FormatStyle.VERBOSE:
            return self.words
        if self.value <= 10:
            return str(self.value)
        return self.words[0]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.format()

    def __format__(self, spec: str) -> str:
        style, rest = _split_format_spec(spec)
        return format(self.format(style), rest)


_ALL_SUITS: Final[tuple[Suit, ...]] = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
_ALL_RANKS: Final[tuple[Rank, ...]] = tuple(Rank)

_SUIT_SYMBOLS: Final[dict[Suit, str]] = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}
_SUIT_OUTLINES: Final[dict[Suit, str]] = {
    Suit.CLUBS: "♧",
    Suit.DIAMONDS: "♢",
    Suit.HEARTS: "♡",
    Suit.SPADES: "♤",
}
_SUIT_WORDS: Final[dict[Suit, str]] = {
    Suit.CLUBS: "Clubs",
    Suit.DIAMONDS: "Diamonds",
    Suit.HEARTS: "Hearts",
    Suit.SPADES: "Spades",
}


def _suit_aliases(suit: Suit) -> tuple[str, ...]:
    plural = _SUIT_WORDS[suit].lower()
    return (_SUIT_SYMBOLS[suit], _SUIT_OUTLINES[suit], suit.value, plural[:-1], plural)


_SUIT_LOOKUP: Final[dict[str, Suit]] = {
    alias: suit for suit in _ALL_SUITS for alias in _suit_aliases(suit)
}

_RANK_SYNONYMS: Final[dict[Rank, tuple[str, ...]]] = {
    Rank.TWO: ("d", "deuce"),
    Rank.THREE: ("trey",),
    Rank.TEN: ("t",),
    Rank.JACK: ("j", "knave"),
    Rank.QUEEN: ("q",),
    Rank.KING: ("k",),
    Rank.ACE: ("1", "one", "a"),
}


def _rank_aliases(rank: Rank) -> tuple[str, ...]:
    return (str(rank.value), rank.words.lower()) + _RANK_SYNONYMS.get(rank, ())


_RANK_LOOKUP: Final[dict[str, Rank]] = {
    alias: rank for rank in _ALL_RANKS for alias in _rank_aliases(rank)
}


@dataclass(frozen=True, slots=True)
class Card:
    """A single card, identified by its rank and suit.

    The constructor accepts the two components in either order, so
    ``Card(Rank.SEVEN, Suit.HEARTS) == Card(Suit.HEARTS, Rank.SEVEN)``.
    Cards of the same suit compare by rank; cards of different suits are
    incomparable and every ordering operator returns ``False`` for them.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        rank, suit = _sort_components(self.rank, self.suit)
        object.__setattr__(self, "rank", rank)
        object.__setattr__(self, "suit", suit)

    @classmethod
    def of(cls, first: Rank | Suit, second: Rank | Suit) -> "Card":
        return cls(*_sort_components(first, second))

    @classmethod
    def from_pair(cls, pair: tuple[Rank | Suit, Rank | Suit]) -> "Card":
        """Build a card from a ``(rank, suit)`` or ``(suit, rank)`` tuple."""

        first, second = pair
        return cls.of(first, second)

    def is_face_card(self) -> bool:
        return self.rank.is_face_card()

    def format(self, style: FormatStyle | str = FormatStyle.COMPACT) -> str:
        """Return e.g. ``"♥7"`` (compact) or ``"Seven of Hearts"`` (verbose)."""

        style = FormatStyle(style)
        if style is FormatStyle.VERBOSE:
            return f"{self.rank.words} of {self.suit.words}"
        return f"{self.suit.symbol}{self.rank.format(FormatStyle.COMPACT)}"

    def partial_cmp(self, other: "Card") -> Ordering | None:
        """Compare by rank within a suit; ``None`` when the suits differ."""

        if self.suit is not other.suit:
            return None
        if self.rank is other.rank:
            return Ordering.EQUAL
        return Ordering.LESS if self.rank < other.rank else Ordering.GREATER

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.partial_cmp(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.partial_cmp(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.partial_cmp(other) in (Ordering.GREATER, Ordering.EQUAL)

    def __str__(self) -> str:
        return self.format()

    def __format__(self, spec: str) -> str:
        style, rest = _split_format_spec(spec)
        return format(self.format(style), rest)


def _sort_components(first: object, second: object) -> tuple[Rank, Suit]:
    if isinstance(first, Rank) and isinstance(second, Suit):
        return first, second
    if isinstance(first, Suit) and isinstance(second, Rank):
        return second, first
    raise TypeError(f"expected one Rank and one Suit, got {first!r} and {second!r}")


def iter_cards() -> Iterator[Card]:
    """Yield each of the 52 distinct card values, suit by suit."""

    for suit in _ALL_SUITS:
        for rank in _ALL_RANKS:
            yield Card(rank, suit)


def parse_suit(text: str) -> Suit:
    return Suit.parse(text)


def parse_rank(text: str) -> Rank:
    return Rank.parse(text)


def format_value(value: Suit | Rank | Card, style: FormatStyle | str = FormatStyle.COMPACT) -> str:
    """Format a suit, rank or card in the requested style."""

    if not isinstance(value, (Suit, Rank, Card)):
        raise TypeError(f"cannot format {value!r}")
    return value.format(style)


def partial_cmp(left: Card, right: Card) -> Ordering | None:
    return left.partial_cmp(right)
