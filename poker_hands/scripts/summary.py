#!/usr/bin/env python
"""Tally head-to-head deals read from a text file.

Each non-blank line of the input holds ten cards: five for player 1 followed
by five for player 2, e.g.

    8C TS KC 9H 4S 7D 2S 5D 3S AC

Usage:
    python -m poker_hands.scripts.summary poker.txt
    python -m poker_hands.scripts.summary poker.txt --verbose
    python -m poker_hands.scripts.summary poker.txt --json results.json
    python -m poker_hands.scripts.summary --help
"""

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path

from poker_hands.engine.match import MatchStats, play_match, parse_match_line
from poker_hands.rules import PokerHandError


@dataclass
class SummaryConfig:
    """Summary run configuration."""

    input_path: Path
    json_path: Path | None = None
    verbose: bool = False


def summarize(config: SummaryConfig) -> MatchStats:
    """Play every deal in the input file and print the summary.

    Args:
        config: Run configuration

    Returns:
        The collected statistics

    Raises:
        PokerHandError: If a line holds a malformed deal (message carries
            the line number)
    """
    stats = MatchStats()

    with config.input_path.open() as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                hand1, hand2 = parse_match_line(line)
            except PokerHandError as e:
                raise type(e)(f"line {line_no}: {e}") from e

            result = play_match(hand1, hand2)
            stats.record(result)

            if config.verbose:
                outcome = "draw" if result.is_draw else f"player {result.winner} ({result.category})"
                print(f"  {line_no:>5}: {hand1} | {hand2} -> {outcome}")

    print(stats.summary())

    if config.json_path is not None:
        config.json_path.write_text(json.dumps(stats.to_dict(), indent=2))
        print(f"Results written to {config.json_path}")

    return stats


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the summary script."""
    parser = argparse.ArgumentParser(
        description="Count wins for two players over a file of poker deals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_hands.scripts.summary poker.txt
  python -m poker_hands.scripts.summary poker.txt --verbose
  python -m poker_hands.scripts.summary poker.txt --json results.json
        """,
    )

    parser.add_argument("input", type=str, help="Text file with one deal (10 cards) per line")

    parser.add_argument(
        "--json",
        type=str,
        default=None,
        help="Also write the results as JSON to this path",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Print the result of every deal"
    )

    args = parser.parse_args(argv)

    config = SummaryConfig(
        input_path=Path(args.input),
        json_path=Path(args.json) if args.json else None,
        verbose=args.verbose,
    )

    if not config.input_path.is_file():
        print(f"Error: input file '{config.input_path}' does not exist")
        sys.exit(1)

    try:
        summarize(config)
    except PokerHandError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
