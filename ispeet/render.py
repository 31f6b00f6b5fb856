"""Rich rendering helpers for cards."""

from __future__ import annotations

from typing import Iterable

from rich import box
from rich.table import Table
from rich.text import Text

from .cards import Card, FormatStyle, Suit

_SUIT_COLORS = {
    Suit.CLUBS: "green",
    Suit.DIAMONDS: "magenta",
    Suit.HEARTS: "red",
    Suit.SPADES: "cyan",
}


def card_markup(card: Card, style: FormatStyle = FormatStyle.COMPACT) -> str:
    """Return a Rich markup label for ``card`` coloured by suit."""

    color = _SUIT_COLORS[card.suit]
    return f"[{color}]{card.format(style)}[/{color}]"


def card_text(card: Card, style: FormatStyle = FormatStyle.COMPACT) -> Text:
    return Text(card.format(style), style=_SUIT_COLORS[card.suit])


def cards_table(cards: Iterable[Card], *, title: str = "Cards") -> Table:
    """Return a table listing each card in both styles."""

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Card", justify="left", style="bold")
    table.add_column("Name", justify="left")
    table.add_column("Face", justify="center")
    for card in cards:
        table.add_row(
            card_text(card),
            card.format(FormatStyle.VERBOSE),
            "yes" if card.is_face_card() else "no",
        )
    return table
