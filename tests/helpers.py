from __future__ import annotations

from collections import Counter
from typing import Callable, List, Sequence

from cardpack.cards import abs_rank, less
from cardpack.models import Card


def same_cards(left: Sequence[Card], right: Sequence[Card]) -> bool:
    """Multiset comparison; order is ignored."""
    return Counter(left) == Counter(right)


def is_default_sorted(cards: Sequence[Card]) -> bool:
    return all(abs_rank(a) <= abs_rank(b) for a, b in zip(cards, cards[1:]))


def reverse_less(cards: List[Card]) -> Callable[[int, int], bool]:
    """Mirror image of the default ordering: hearts first, aces last, jokers up front."""
    forward = less(cards)
    return lambda i, j: forward(j, i)
