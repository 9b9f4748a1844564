"""Total ordering of five-card hands.

Comparison rules:
- Higher category wins outright
- Same category: untie keys are compared position by position and the first
  differing value decides
- Identical untie keys are a genuine tie (split pot)
"""

from enum import Enum
from typing import Tuple

from .hands import Hand


class Comparison(Enum):
    """Three-way comparison result, seen from the first hand."""

    GREATER = 1
    LESS = -1
    EQUAL = 0

    def __int__(self) -> int:
        return self.value

    @property
    def inverse(self) -> "Comparison":
        """The same result seen from the other hand."""
        return Comparison(-self.value)


def compare_hands(hand1: Hand, hand2: Hand) -> Comparison:
    """Compare two hands.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        GREATER if hand1 wins, LESS if hand2 wins, EQUAL on a complete tie
    """
    if hand1.category != hand2.category:
        return Comparison.GREATER if hand1.category > hand2.category else Comparison.LESS

    # Same category keys always have the same length
    for v1, v2 in zip(hand1.untie_key, hand2.untie_key):
        if v1 > v2:
            return Comparison.GREATER
        if v2 > v1:
            return Comparison.LESS

    return Comparison.EQUAL


def hands_equal(hand1: Hand, hand2: Hand) -> bool:
    """Check if two hands tie (different cards may still tie)."""
    return compare_hands(hand1, hand2) is Comparison.EQUAL


def can_beat(hand1: Hand, hand2: Hand) -> bool:
    """Check if hand1 strictly beats hand2."""
    return compare_hands(hand1, hand2) is Comparison.GREATER


def sort_key(hand: Hand) -> Tuple[int, ...]:
    """Key for sorted()/max() that agrees with compare_hands."""
    return (int(hand.category), *hand.untie_key)
