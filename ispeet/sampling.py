"""Uniform random sampling of suits, ranks and cards."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Sequence, TypeVar

from .cards import Card, Rank, Suit

__all__ = [
    "SamplingConfig",
    "make_rng",
    "sample_suit",
    "sample_rank",
    "sample_card",
    "sample_cards",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class SamplingConfig:
    """Configuration values for building a sampling random source."""

    seed: int | None = None


def make_rng(config: SamplingConfig | None = None) -> random.Random:
    """Return a ``random.Random`` seeded from ``config``.

    An unseeded generator is returned when no seed is configured.
    """

    seed = config.seed if config is not None else None
    logger.debug("creating sampling rng with seed=%s", seed)
    return random.Random(seed)


def _uniform_choice(values: Sequence[T], rng: Any) -> T:
    # Accepts random.Random, numpy.random.Generator or the random module itself.
    if rng is None:
        rng = random
    if hasattr(rng, "integers") and callable(rng.integers):
        index = int(rng.integers(len(values)))
    else:
        index = rng.randrange(len(values))
    return values[index]


def sample_suit(rng: Any = None) -> Suit:
    """Draw one of the four suits uniformly."""

    return _uniform_choice(Suit.all(), rng)


def sample_rank(rng: Any = None) -> Rank:
    """Draw one of the thirteen ranks uniformly."""

    return _uniform_choice(Rank.all(), rng)


def sample_card(rng: Any = None) -> Card:
    """Draw a card from independent uniform rank and suit draws.

    This samples with replacement: repeated calls can return the same card.
    """

    rank = sample_rank(rng)
    suit = sample_suit(rng)
    return Card(rank, suit)


def sample_cards(count: int, rng: Any = None) -> list[Card]:
    """Return ``count`` independent card draws."""

    if count < 0:
        raise ValueError("count must be non-negative")
    return [sample_card(rng) for _ in range(count)]
