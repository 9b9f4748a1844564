"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > T > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank constants and ordering (numeric values 2-14)
- Suit definitions
- Card representation and token parsing ("AH", "TD", "2c")
- Rank counting helpers
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List


class PokerHandError(ValueError):
    """Base class for errors caused by malformed card or hand input."""

    pass


class InvalidCardError(PokerHandError):
    """Raised when a card token has an unknown rank or suit character."""

    pass


class Rank(IntEnum):
    """Card ranks; the value is the numeric strength used for comparison."""

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
    ACE = 14  # Counts as 1 only inside the A-2-3-4-5 straight


class Suit(IntEnum):
    """Card suits. Only equality matters; suits never order hands."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3


RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
    Suit.SPADE: "S",
}

# Symbol to enum mappings (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# Value the ace takes in the lowest straight
WHEEL_ACE_VALUE = 1
WHEEL_RANKS = frozenset([Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE])


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first (for sorting hands), then by suit.
    Immutable and hashable.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @property
    def value(self) -> int:
        """Numeric value of the card, 2-14."""
        return int(self.rank)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a two-character token like 'AH' or '9d'.

        Args:
            s: Rank character followed by suit character

        Returns:
            Card object

        Raises:
            InvalidCardError: If the token cannot be parsed
        """
        if not isinstance(s, str) or len(s) != 2:
            raise InvalidCardError(f"Invalid card token: {s!r}")

        rank_char, suit_char = s[0].upper(), s[1].upper()

        if rank_char not in SYMBOL_TO_RANK:
            raise InvalidCardError(f"Invalid rank character {s[0]!r} in card {s!r}")
        if suit_char not in SYMBOL_TO_SUIT:
            raise InvalidCardError(f"Invalid suit character {s[1]!r} in card {s!r}")

        return cls(rank=SYMBOL_TO_RANK[rank_char], suit=SYMBOL_TO_SUIT[suit_char])


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a collection of cards.

    Args:
        cards: Card objects

    Returns:
        Dict mapping Rank to count
    """
    counts: Dict[Rank, int] = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by rank (ascending), then by suit."""
    return sorted(cards)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "3H 4D 5C 6S 7H".

    Args:
        s: Space-separated card tokens

    Returns:
        List of Card objects
    """
    return [Card.from_string(token) for token in s.split()]
