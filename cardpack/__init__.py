"""Playing-card deck primitives: build a deck, then sort, shuffle or extend it with options."""

from .cards import (
    abs_rank,
    build_deck,
    cards_to_labels,
    deal,
    deck_options,
    decks,
    default_sort,
    filter_cards,
    jokers,
    less,
    new,
    seeded_shuffle,
    shuffle,
    sort,
)
from .models import MAX_RANK, MIN_RANK, STANDARD_SUITS, Card, DeckConfig, Rank, Suit

__all__ = [
    "Card",
    "DeckConfig",
    "MAX_RANK",
    "MIN_RANK",
    "Rank",
    "STANDARD_SUITS",
    "Suit",
    "abs_rank",
    "build_deck",
    "cards_to_labels",
    "deal",
    "deck_options",
    "decks",
    "default_sort",
    "filter_cards",
    "jokers",
    "less",
    "new",
    "seeded_shuffle",
    "shuffle",
    "sort",
]
