from __future__ import annotations

import numpy as np
import pytest

from ispeet import encoding
from ispeet.cards import Card, Rank, Suit, iter_cards


def test_card_ids_follow_canonical_order() -> None:
    assert encoding.CARD_COUNT == 52
    assert [encoding.card_id(card) for card in iter_cards()] == list(encoding.ALL_CARD_IDS)
    assert encoding.card_id(Card(Rank.TWO, Suit.CLUBS)) == 0
    assert encoding.card_id(Card(Rank.ACE, Suit.SPADES)) == 51


def test_decode_id_splits_indices() -> None:
    decoded = encoding.decode_id(encoding.card_id(Card(Rank.SEVEN, Suit.HEARTS)))
    assert decoded.rank_idx == 5
    assert decoded.suit_idx == 2
    assert encoding.card_from_id(31) == Card(Suit.HEARTS, Rank.SEVEN)


@pytest.mark.parametrize("identifier", [-1, 52, 106])
def test_decode_id_rejects_out_of_range(identifier: int) -> None:
    with pytest.raises(ValueError):
        encoding.decode_id(identifier)


def test_encode_cards_packs_uint16_array() -> None:
    hand = [Card(Rank.ACE, Suit.SPADES), Card(Rank.TWO, Suit.CLUBS), Card(Rank.TEN, Suit.DIAMONDS)]
    packed = encoding.encode_cards(hand)
    assert packed.dtype == np.uint16
    assert packed.tolist() == [51, 0, 21]
    assert encoding.decode_cards(packed) == hand


def test_encode_cards_handles_empty_input() -> None:
    packed = encoding.encode_cards([])
    assert packed.shape == (0,)
    assert encoding.decode_cards(packed) == []
