"""Hand category detection and untie keys.

Categories (weakest to strongest):
- High card, one pair, two pairs, three of a kind
- Straight: five consecutive values (A-2-3-4-5 counts the ace as 1)
- Flush: five cards of one suit
- Full house, four of a kind
- Straight flush, royal flush (T-J-Q-K-A of one suit)

Detection walks CATEGORY_RULES top to bottom and the first matching rule
wins, so a straight that is also a flush is never reported as a plain flush.

Untie keys:
- Straights and flushes: every card value, highest first
- Grouped categories: distinct values ordered by group size, then value,
  so the quad/trio/top pair is compared before any kicker
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import cached_property
from typing import Callable, Dict, Sequence, Tuple, Union

from .ranks import (
    Card,
    Rank,
    PokerHandError,
    WHEEL_ACE_VALUE,
    WHEEL_RANKS,
    get_rank_counts,
)


HAND_SIZE = 5

ROYAL_VALUES = (10, 11, 12, 13, 14)


class InvalidHandSizeError(PokerHandError):
    """Raised when a hand is built from anything other than five cards."""

    pass


class Category(IntEnum):
    """Hand categories; the value is the category rank (higher is stronger)."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIRS = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def key(self) -> str:
        """Snake-case tag used in reports, e.g. 'full_house'."""
        return self.name.lower()

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Full House'."""
        return self.name.replace("_", " ").title()


# Categories decided by raw card order, without grouping
UNGROUPED_CATEGORIES = frozenset(
    [Category.STRAIGHT, Category.FLUSH, Category.STRAIGHT_FLUSH, Category.ROYAL_FLUSH]
)


@dataclass(frozen=True)
class Hand:
    """An immutable five-card poker hand.

    Cards are stored sorted, so two hands holding the same cards compare
    equal regardless of input order. Derived values are computed on first
    access and cached on the instance.

    Attributes:
        cards: The five cards, sorted by rank then suit
    """

    cards: Tuple[Card, ...]

    def __post_init__(self):
        cards = tuple(self.cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandSizeError(
                f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}"
            )
        object.__setattr__(self, "cards", tuple(sorted(cards)))

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    @classmethod
    def from_strings(cls, tokens: Sequence[str]) -> "Hand":
        """Build a hand from card tokens such as ["AH", "KD", "9C", "9S", "2H"]."""
        return cls(tuple(Card.from_string(t) for t in tokens))

    @cached_property
    def is_wheel(self) -> bool:
        """True for the A-2-3-4-5 rank set, where the ace plays low."""
        return {c.rank for c in self.cards} == WHEEL_RANKS

    @cached_property
    def values(self) -> Tuple[int, ...]:
        """Card values in ascending order, with the ace as 1 in a wheel."""
        if self.is_wheel:
            return tuple(
                sorted(WHEEL_ACE_VALUE if c.rank == Rank.ACE else c.value for c in self.cards)
            )
        return tuple(sorted(c.value for c in self.cards))

    @cached_property
    def value_counts(self) -> Dict[int, int]:
        """Mapping of card value to number of cards holding it."""
        return {int(rank): count for rank, count in get_rank_counts(self.cards).items()}

    @cached_property
    def is_flush(self) -> bool:
        return len({c.suit for c in self.cards}) == 1

    @cached_property
    def is_straight(self) -> bool:
        values = self.values
        return len(set(values)) == HAND_SIZE and values[-1] - values[0] == HAND_SIZE - 1

    @cached_property
    def category(self) -> Category:
        return evaluate_category(self)

    @cached_property
    def untie_key(self) -> Tuple[int, ...]:
        return untie_key(self)


def _count_of_counts(hand: Hand, times: int) -> int:
    """Number of distinct values appearing exactly `times` times."""
    return sum(1 for count in hand.value_counts.values() if count == times)


def _is_royal_flush(hand: Hand) -> bool:
    return hand.is_flush and hand.values == ROYAL_VALUES


def _is_straight_flush(hand: Hand) -> bool:
    return hand.is_flush and hand.is_straight


def _is_four_of_a_kind(hand: Hand) -> bool:
    return _count_of_counts(hand, 4) > 0


def _is_full_house(hand: Hand) -> bool:
    return _count_of_counts(hand, 3) > 0 and _count_of_counts(hand, 2) > 0


def _is_flush(hand: Hand) -> bool:
    return hand.is_flush


def _is_straight(hand: Hand) -> bool:
    return hand.is_straight


def _is_three_of_a_kind(hand: Hand) -> bool:
    return _count_of_counts(hand, 3) > 0


def _is_two_pairs(hand: Hand) -> bool:
    return _count_of_counts(hand, 2) == 2


def _is_one_pair(hand: Hand) -> bool:
    return _count_of_counts(hand, 2) == 1


def _is_high_card(hand: Hand) -> bool:
    return True


# Priority table: first matching predicate decides the category
CATEGORY_RULES: Tuple[Tuple[Callable[[Hand], bool], Category], ...] = (
    (_is_royal_flush, Category.ROYAL_FLUSH),
    (_is_straight_flush, Category.STRAIGHT_FLUSH),
    (_is_four_of_a_kind, Category.FOUR_OF_A_KIND),
    (_is_full_house, Category.FULL_HOUSE),
    (_is_flush, Category.FLUSH),
    (_is_straight, Category.STRAIGHT),
    (_is_three_of_a_kind, Category.THREE_OF_A_KIND),
    (_is_two_pairs, Category.TWO_PAIRS),
    (_is_one_pair, Category.ONE_PAIR),
    (_is_high_card, Category.HIGH_CARD),
)


def evaluate_category(hand: Hand) -> Category:
    """Classify a hand into its category.

    Args:
        hand: Hand to classify

    Returns:
        The first Category in CATEGORY_RULES whose predicate holds
    """
    for predicate, category in CATEGORY_RULES:
        if predicate(hand):
            return category
    # _is_high_card always matches
    raise AssertionError("no category rule matched")


def group_values(hand: Hand) -> Tuple[Tuple[int, int], ...]:
    """Group card values as (value, count) pairs.

    Pairs are sorted by count descending, then value descending.

    Example:
        2 2 5 5 9 -> ((5, 2), (2, 2), (9, 1))
    """
    return tuple(
        sorted(hand.value_counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    )


def untie_key(hand: Hand) -> Tuple[int, ...]:
    """Build the sequence used to break ties between hands of one category.

    - Straight, flush, straight flush, royal flush: all five values,
      highest first (a paired card in a flush appears twice).
    - Everything else: each distinct value once, ordered by group size then
      value. Full house 2 2 2 5 5 -> (2, 5); two pairs 2 2 3 3 5 -> (3, 2, 5).
    """
    if hand.category in UNGROUPED_CATEGORIES:
        return tuple(sorted(hand.values, reverse=True))
    return tuple(value for value, _ in group_values(hand))


def parse_hand(cards: Union[str, Sequence[str]]) -> Hand:
    """Parse a hand from "AH KH QH JH TH" or a sequence of card tokens.

    Raises:
        InvalidCardError: If a token is malformed
        InvalidHandSizeError: If there are not exactly five tokens
    """
    tokens = cards.split() if isinstance(cards, str) else list(cards)
    return Hand.from_strings(tokens)
