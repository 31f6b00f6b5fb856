"""Card identifier encoding utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Iterable

import numpy as np

from .cards import Card, Rank, Suit

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from numpy.typing import NDArray

    UInt16Array = NDArray[np.uint16]

RANKS: Final[tuple[Rank, ...]] = Rank.all()
SUITS: Final[tuple[Suit, ...]] = Suit.all()
RANK_TO_IDX: Final[dict[Rank, int]] = {rank: idx for idx, rank in enumerate(RANKS)}
SUIT_TO_IDX: Final[dict[Suit, int]] = {suit: idx for idx, suit in enumerate(SUITS)}
CARD_COUNT: Final[int] = len(RANKS) * len(SUITS)
ALL_CARD_IDS: Final[range] = range(CARD_COUNT)


@dataclass(frozen=True, slots=True)
class CardDecoding:
    """Typed container describing a decoded card identifier."""

    rank_idx: int
    suit_idx: int


def _validate_card_identifier(card_identifier: int) -> None:
    if card_identifier < 0 or card_identifier >= CARD_COUNT:
        raise ValueError(f"card identifier {card_identifier} out of range")


def card_id(card: Card) -> int:
    """Encode ``card`` as ``suit_idx * 13 + rank_idx``."""

    return SUIT_TO_IDX[card.suit] * len(RANKS) + RANK_TO_IDX[card.rank]


def decode_id(card_identifier: int) -> CardDecoding:
    """Decode a card identifier into its rank and suit indices."""

    _validate_card_identifier(card_identifier)
    suit_idx, rank_idx = divmod(card_identifier, len(RANKS))
    return CardDecoding(rank_idx, suit_idx)


def card_from_id(card_identifier: int) -> Card:
    decoded = decode_id(card_identifier)
    return Card(RANKS[decoded.rank_idx], SUITS[decoded.suit_idx])


def encode_cards(cards: Iterable[Card]) -> UInt16Array:
    """Pack ``cards`` into a ``uint16`` array of identifiers."""

    return np.array([card_id(card) for card in cards], dtype=np.uint16)


def decode_cards(identifiers: Iterable[int]) -> list[Card]:
    """Return the cards named by ``identifiers`` (any iterable of ints)."""

    return [card_from_id(int(identifier)) for identifier in identifiers]
