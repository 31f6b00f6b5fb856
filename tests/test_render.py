from __future__ import annotations

import io

from rich.console import Console

from ispeet.cards import Card, FormatStyle, Rank, Suit
from ispeet.render import card_markup, card_text, cards_table


def _console() -> Console:
    return Console(file=io.StringIO(), record=True, width=80, color_system=None)


def test_card_markup_colours_by_suit() -> None:
    card = Card(Rank.SEVEN, Suit.HEARTS)
    assert card_markup(card) == "[red]♥7[/red]"
    assert card_markup(card, FormatStyle.VERBOSE) == "[red]Seven of Hearts[/red]"
    assert card_markup(Card(Rank.KING, Suit.SPADES)) == "[cyan]♠K[/cyan]"


def test_card_text_carries_style() -> None:
    text = card_text(Card(Rank.QUEEN, Suit.CLUBS))
    assert text.plain == "♣Q"
    assert str(text.style) == "green"


def test_cards_table_lists_both_styles() -> None:
    console = _console()
    table = cards_table([Card(Rank.SEVEN, Suit.HEARTS), Card(Rank.JACK, Suit.DIAMONDS)], title="Hand")
    console.print(table)
    output = console.export_text()

    assert "Hand" in output
    assert "♥7" in output
    assert "Seven of Hearts" in output
    assert "Jack of Diamonds" in output
    assert "yes" in output
    assert "no" in output
    assert "—" not in output
