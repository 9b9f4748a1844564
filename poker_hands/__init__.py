"""Poker Hands - five-card poker hand ranking.

Classifies five-card hands into their categories and orders any two hands,
breaking same-category ties down to the deciding card.
"""

__version__ = "0.1.0"

from poker_hands.rules import Category, Comparison, Hand, compare_hands, parse_hand
from poker_hands.utils.seeding import set_seed

__all__ = [
    "__version__",
    "Category",
    "Comparison",
    "Hand",
    "compare_hands",
    "parse_hand",
    "set_seed",
]
