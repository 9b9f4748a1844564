"""Poker hand rules.

This module provides:
- Card and rank definitions (ranks.py)
- Hand category detection and untie keys (hands.py)
- Hand comparison (compare.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    PokerHandError,
    InvalidCardError,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    WHEEL_RANKS,
    get_rank_counts,
    sort_cards,
    make_cards_from_string,
)

from .hands import (
    Category,
    Hand,
    InvalidHandSizeError,
    CATEGORY_RULES,
    HAND_SIZE,
    evaluate_category,
    group_values,
    untie_key,
    parse_hand,
)

from .compare import (
    Comparison,
    compare_hands,
    hands_equal,
    can_beat,
    sort_key,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "PokerHandError",
    "InvalidCardError",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "WHEEL_RANKS",
    "get_rank_counts",
    "sort_cards",
    "make_cards_from_string",
    # Hands
    "Category",
    "Hand",
    "InvalidHandSizeError",
    "CATEGORY_RULES",
    "HAND_SIZE",
    "evaluate_category",
    "group_values",
    "untie_key",
    "parse_hand",
    # Comparison
    "Comparison",
    "compare_hands",
    "hands_equal",
    "can_beat",
    "sort_key",
]
