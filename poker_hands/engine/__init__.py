"""Match engine: deciding and tallying head-to-head deals."""

from .match import (
    DRAW,
    TOKENS_PER_DEAL,
    MatchResult,
    MatchStats,
    play_match,
    play_matches,
    parse_match_line,
)

__all__ = [
    "DRAW",
    "TOKENS_PER_DEAL",
    "MatchResult",
    "MatchStats",
    "play_match",
    "play_matches",
    "parse_match_line",
]
