from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, Union


class Suit(IntEnum):
    SPADE = 0
    DIAMOND = 1
    CLUB = 2
    HEART = 3
    JOKER = 4

    @property
    def label(self) -> str:
        return SUIT_LABELS[self]

    @property
    def code(self) -> str:
        return SUIT_CODES[self]


class Rank(IntEnum):
    ACE = 1
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

    @property
    def label(self) -> str:
        return RANK_LABELS[self]

    @property
    def code(self) -> str:
        return RANK_CODES[self]


SUIT_LABELS = {
    Suit.SPADE: "Spade",
    Suit.DIAMOND: "Diamond",
    Suit.CLUB: "Club",
    Suit.HEART: "Heart",
    Suit.JOKER: "Joker",
}
SUIT_CODES = {Suit.SPADE: "S", Suit.DIAMOND: "D", Suit.CLUB: "C", Suit.HEART: "H", Suit.JOKER: "*"}

RANK_LABELS = {
    Rank.ACE: "Ace",
    Rank.TWO: "Two",
    Rank.THREE: "Three",
    Rank.FOUR: "Four",
    Rank.FIVE: "Five",
    Rank.SIX: "Six",
    Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight",
    Rank.NINE: "Nine",
    Rank.TEN: "Ten",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
}
RANK_CODES = {rank: code for rank, code in zip(Rank, "A23456789TJQK")}

# Suits dealt into a fresh deck, in sort order. Jokers are added by option only.
STANDARD_SUITS: Tuple[Suit, ...] = (Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART)
MIN_RANK = Rank.ACE
MAX_RANK = Rank.KING


@dataclass(frozen=True, order=True)
class Card:
    """A single playing card.

    Standard cards carry a ``Rank``. Jokers reuse ``rank`` as a plain index
    (0, 1, 2, ...) that only tells otherwise identical jokers apart.
    Cards order by suit, then rank, which agrees with the default deck sort.
    """

    suit: Suit
    rank: Union[Rank, int]

    def __post_init__(self) -> None:
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise ValueError(f"Invalid suit: {self.suit!r}") from None
        object.__setattr__(self, "suit", suit)

        if suit is Suit.JOKER:
            if not isinstance(self.rank, int) or self.rank < 0:
                raise ValueError(f"Invalid joker index: {self.rank!r}")
            object.__setattr__(self, "rank", int(self.rank))
            return
        try:
            rank = Rank(self.rank)
        except ValueError:
            raise ValueError(f"Invalid rank: {self.rank!r}") from None
        object.__setattr__(self, "rank", rank)

    @property
    def is_joker(self) -> bool:
        return self.suit is Suit.JOKER

    @property
    def label(self) -> str:
        if self.is_joker:
            return f"{self.suit.code}{self.rank}"
        return f"{self.rank.code}{self.suit.code}"

    def __str__(self) -> str:
        if self.is_joker:
            return self.suit.label
        return f"{self.rank.label} of {self.suit.label}s"


@dataclass
class DeckConfig:
    jokers: int = 0
    decks: int = 1
    sort: bool = False
    shuffle: bool = False
    seed: Optional[int] = None
