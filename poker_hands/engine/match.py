"""Head-to-head matches between two five-card hands.

A deal is one line of ten card tokens: the first five belong to player 1,
the last five to player 2. This module decides the winner of each deal and
tallies results across many deals.
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from poker_hands.rules import (
    Comparison,
    Hand,
    HAND_SIZE,
    InvalidHandSizeError,
    compare_hands,
    parse_hand,
)


DRAW = "draw"
TOKENS_PER_DEAL = 2 * HAND_SIZE


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a single deal.

    Attributes:
        winner: 1 or 2 for the winning player, None on a draw
        category: Winning hand's category tag ("flush", ...), or "draw"
    """

    winner: int | None
    category: str

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def play_match(hand1: Hand, hand2: Hand) -> MatchResult:
    """Decide the winner between player 1's and player 2's hands."""
    result = compare_hands(hand1, hand2)
    if result is Comparison.GREATER:
        return MatchResult(winner=1, category=hand1.category.key)
    if result is Comparison.LESS:
        return MatchResult(winner=2, category=hand2.category.key)
    return MatchResult(winner=None, category=DRAW)


def parse_match_line(line: str) -> tuple[Hand, Hand]:
    """Split a deal line into player 1's and player 2's hands.

    Raises:
        InvalidHandSizeError: If the line does not hold exactly ten tokens
        InvalidCardError: If a token is malformed
    """
    tokens = line.split()
    if len(tokens) != TOKENS_PER_DEAL:
        raise InvalidHandSizeError(
            f"A deal needs exactly {TOKENS_PER_DEAL} cards, got {len(tokens)}"
        )
    return parse_hand(tokens[:HAND_SIZE]), parse_hand(tokens[HAND_SIZE:])


@dataclass
class MatchStats:
    """Running tally of deal outcomes.

    Attributes:
        player1_wins: Deals won by player 1
        player2_wins: Deals won by player 2
        draws: Deals ending in a complete tie
        wins_by_category: Winning category tag -> number of deals won with it
    """

    player1_wins: int = 0
    player2_wins: int = 0
    draws: int = 0
    wins_by_category: dict[str, int] = field(default_factory=lambda: defaultdict(int))

    @property
    def total(self) -> int:
        return self.player1_wins + self.player2_wins + self.draws

    def record(self, result: MatchResult) -> None:
        """Record the outcome of one deal."""
        if result.is_draw:
            self.draws += 1
            return

        if result.winner == 1:
            self.player1_wins += 1
        else:
            self.player2_wins += 1
        self.wins_by_category[result.category] += 1

    def summary(self) -> str:
        """Generate the summary block printed after a run."""
        lines = [
            "---",
            f"Player 1 wins: {self.player1_wins}",
            f"Player 2 wins: {self.player2_wins}",
            f"Draws: {self.draws}",
            "---",
        ]
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "player1_wins": self.player1_wins,
            "player2_wins": self.player2_wins,
            "draws": self.draws,
            "wins_by_category": dict(sorted(self.wins_by_category.items())),
        }


def play_matches(lines: Iterable[str]) -> MatchStats:
    """Play every non-blank deal line and return the tally."""
    stats = MatchStats()
    for line in lines:
        if not line.strip():
            continue
        stats.record(play_match(*parse_match_line(line)))
    return stats
