from __future__ import annotations

import functools
import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from .models import MAX_RANK, MIN_RANK, STANDARD_SUITS, Card, DeckConfig, Suit

# Deck building is a fold: start from the 52 standard cards, then hand the list
# to each option in turn. Options may mutate and return the same list or
# return a new one; new() just keeps whatever comes back.

Option = Callable[[List[Card]], List[Card]]
LessFunc = Callable[[int, int], bool]

logger = logging.getLogger(__name__)


def new(*options: Option) -> List[Card]:
    """Build a fresh deck, then apply ``options`` in the order given."""
    cards = [Card(suit, rank) for suit in STANDARD_SUITS for rank in range(MIN_RANK, MAX_RANK + 1)]
    for option in options:
        logger.debug("Applying deck option %s to %d cards", _option_name(option), len(cards))
        cards = option(cards)
    return cards


def abs_rank(card: Card) -> int:
    return int(card.suit) * int(MAX_RANK) + int(card.rank)


def _sort_key(card: Card) -> Tuple[int, int]:
    # Joker 0 shares abs_rank 52 with the King of Hearts; the suit breaks the tie.
    return abs_rank(card), int(card.suit)


def less(cards: Sequence[Card]) -> LessFunc:
    """Index-based comparison used by ``default_sort``; pass it to ``sort`` to reuse it."""

    def _less(i: int, j: int) -> bool:
        return _sort_key(cards[i]) < _sort_key(cards[j])

    return _less


def default_sort(cards: List[Card]) -> List[Card]:
    cards.sort(key=_sort_key)
    return cards


def sort(less_factory: Callable[[List[Card]], LessFunc]) -> Option:
    """Return an option sorting the deck in place with a caller-built predicate.

    ``less_factory`` receives the whole deck and returns ``less(i, j)`` over
    positions in it. The predicate is evaluated against the deck as it was
    handed in; the result is written back into the same list afterwards.
    A predicate that is not a strict weak ordering yields some permutation of
    the input rather than an error.
    """

    def _sort(cards: List[Card]) -> List[Card]:
        is_less = less_factory(cards)

        def compare(i: int, j: int) -> int:
            if is_less(i, j):
                return -1
            if is_less(j, i):
                return 1
            return 0

        order = sorted(range(len(cards)), key=functools.cmp_to_key(compare))
        snapshot = list(cards)
        cards[:] = [snapshot[idx] for idx in order]
        return cards

    return _sort


def _permute(cards: Sequence[Card], rng: random.Random) -> List[Card]:
    perm = list(range(len(cards)))
    rng.shuffle(perm)
    return [cards[idx] for idx in perm]


def shuffle(cards: List[Card]) -> List[Card]:
    """Return a shuffled copy of ``cards``; the input list is left alone.

    Every call builds its own generator seeded from OS entropy, so two
    shuffles in the same second do not repeat each other.
    """
    return _permute(cards, random.Random())


def seeded_shuffle(seed: Optional[int] = None) -> Option:
    """Like ``shuffle`` but reproducible: equal seeds give equal permutations."""

    def _shuffle(cards: List[Card]) -> List[Card]:
        return _permute(cards, random.Random(seed))

    return _shuffle


def jokers(count: int) -> Option:
    """Append ``count`` jokers indexed 0..count-1. Negative counts add nothing."""
    if count < 0:
        logger.warning("Negative joker count %d treated as zero", count)
        count = 0

    def _add_jokers(cards: List[Card]) -> List[Card]:
        cards.extend(Card(Suit.JOKER, idx) for idx in range(count))
        return cards

    return _add_jokers


def filter_cards(predicate: Callable[[Card], bool]) -> Option:
    """Drop every card for which ``predicate`` is true."""

    def _filter(cards: List[Card]) -> List[Card]:
        return [card for card in cards if not predicate(card)]

    return _filter


def decks(count: int) -> Option:
    """Repeat the incoming cards ``count`` times, e.g. to build a blackjack shoe."""

    def _repeat(cards: List[Card]) -> List[Card]:
        return list(cards) * max(count, 0)

    return _repeat


def deal(cards: List[Card], count: int) -> List[Card]:
    if count < 0:
        raise ValueError(f"Invalid deal count: {count}")
    if len(cards) < count:
        raise ValueError("Not enough cards left in deck")
    dealt = cards[:count]
    del cards[:count]
    return dealt


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]


def deck_options(config: DeckConfig) -> List[Option]:
    # Jokers go in before sorting so the sort places them after the hearts.
    options: List[Option] = []
    if config.jokers:
        options.append(jokers(config.jokers))
    if config.decks != 1:
        options.append(decks(config.decks))
    if config.sort:
        options.append(default_sort)
    if config.shuffle:
        options.append(shuffle if config.seed is None else seeded_shuffle(config.seed))
    return options


def build_deck(config: Optional[DeckConfig] = None) -> List[Card]:
    return new(*deck_options(config or DeckConfig()))


def _option_name(option: Option) -> str:
    return getattr(option, "__qualname__", None) or repr(option)
