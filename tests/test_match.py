"""Tests for head-to-head matches and the summary script.

Tests cover:
- Winner and winning category of a single deal
- Deal line parsing (ten tokens, first five are player 1)
- Tallying many deals and the summary text
- Summary script output, JSON export and error exit
"""

import json

import pytest

from poker_hands.engine.match import (
    DRAW,
    MatchResult,
    MatchStats,
    play_match,
    play_matches,
    parse_match_line,
)
from poker_hands.rules import InvalidCardError, InvalidHandSizeError, parse_hand
from poker_hands.scripts.summary import SummaryConfig, main, summarize


DEALS = [
    "9H 9C 7C 2H 3H 3H 2C 7S 9S 9D",  # draw
    "5H 4H 2H AH 9H 3H 3H 8H 9H 4H",  # player 1, flush
    "4H AD 2S 3H 5H 3S 2H 5S 4H 6H",  # player 2, straight
    "9H 9D 4C 4D 4S 4C 4D 4S TS TD",  # player 2, full house
]


class TestPlayMatch:
    """Tests for deciding a single deal."""

    def test_complete_draw(self):
        result = play_match(parse_hand("9H 9C 7C 2H 3H"), parse_hand("3H 2C 7S 9S 9D"))
        assert result == MatchResult(winner=None, category=DRAW)
        assert result.is_draw

    def test_player_one_wins(self):
        result = play_match(parse_hand("5H 4H 2H AH 9H"), parse_hand("3H 3H 8H 9H 4H"))
        assert result == MatchResult(winner=1, category="flush")
        assert not result.is_draw

    def test_player_two_wins(self):
        result = play_match(parse_hand("4H AD 2S 3H 5H"), parse_hand("3S 2H 5S 4H 6H"))
        assert result == MatchResult(winner=2, category="straight")

    def test_winner_category_is_winning_hand(self):
        result = play_match(parse_hand("9H 9H 7H 2H 3H"), parse_hand("7H KC 7S 7S 7D"))
        assert result == MatchResult(winner=2, category="four_of_a_kind")


class TestParseMatchLine:
    """Tests for splitting a deal line."""

    def test_splits_first_five_for_player_one(self):
        hand1, hand2 = parse_match_line("8C TS KC 9H 4S 7D 2S 5D 3S AC\n")
        assert hand1 == parse_hand("8C TS KC 9H 4S")
        assert hand2 == parse_hand("7D 2S 5D 3S AC")

    @pytest.mark.parametrize(
        "line", ["8C TS KC 9H 4S 7D 2S 5D 3S", "8C TS KC 9H 4S 7D 2S 5D 3S AC AD", ""]
    )
    def test_wrong_token_count(self, line):
        with pytest.raises(InvalidHandSizeError):
            parse_match_line(line)

    def test_bad_card(self):
        with pytest.raises(InvalidCardError):
            parse_match_line("8C TS KC 9H 4S 7D 2S 5D 3S 1C")


class TestMatchStats:
    """Tests for tallying deals."""

    def test_empty_stats(self):
        stats = MatchStats()
        assert stats.total == 0
        assert stats.to_dict()["wins_by_category"] == {}

    def test_record(self):
        stats = MatchStats()
        stats.record(MatchResult(winner=1, category="flush"))
        stats.record(MatchResult(winner=2, category="flush"))
        stats.record(MatchResult(winner=2, category="one_pair"))
        stats.record(MatchResult(winner=None, category=DRAW))

        assert stats.player1_wins == 1
        assert stats.player2_wins == 2
        assert stats.draws == 1
        assert stats.total == 4
        assert dict(stats.wins_by_category) == {"flush": 2, "one_pair": 1}

    def test_play_matches_skips_blank_lines(self):
        stats = play_matches(DEALS[:2] + ["", "   \n"] + DEALS[2:])
        assert stats.total == 4
        assert (stats.player1_wins, stats.player2_wins, stats.draws) == (1, 2, 1)

    def test_summary_text(self):
        stats = play_matches(DEALS)
        assert stats.summary() == (
            "---\n" "Player 1 wins: 1\n" "Player 2 wins: 2\n" "Draws: 1\n" "---"
        )

    def test_to_dict(self):
        assert play_matches(DEALS).to_dict() == {
            "total": 4,
            "player1_wins": 1,
            "player2_wins": 2,
            "draws": 1,
            "wins_by_category": {"flush": 1, "full_house": 1, "straight": 1},
        }


class TestSummaryScript:
    """Tests for the command line summary."""

    @pytest.fixture
    def deals_file(self, tmp_path):
        path = tmp_path / "poker.txt"
        path.write_text("\n".join(DEALS) + "\n")
        return path

    def test_summarize_prints_summary(self, deals_file, capsys):
        stats = summarize(SummaryConfig(input_path=deals_file))
        out = capsys.readouterr().out

        assert stats.total == 4
        assert out == "---\nPlayer 1 wins: 1\nPlayer 2 wins: 2\nDraws: 1\n---\n"

    def test_verbose_prints_every_deal(self, deals_file, capsys):
        summarize(SummaryConfig(input_path=deals_file, verbose=True))
        out = capsys.readouterr().out

        assert "-> draw" in out
        assert "-> player 1 (flush)" in out
        assert "-> player 2 (full_house)" in out

    def test_json_output(self, deals_file, tmp_path, capsys):
        json_path = tmp_path / "results.json"
        main([str(deals_file), "--json", str(json_path)])

        data = json.loads(json_path.read_text())
        assert data["player1_wins"] == 1
        assert data["player2_wins"] == 2
        assert data["draws"] == 1
        assert "Results written to" in capsys.readouterr().out

    def test_malformed_line_exits(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text(DEALS[0] + "\n" + "8C TS KC 9H 4S 7D 2S 5D 3S\n")

        with pytest.raises(SystemExit) as exc_info:
            main([str(path)])

        assert exc_info.value.code == 1
        assert "Error: line 2:" in capsys.readouterr().out

    def test_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.txt")])

        assert exc_info.value.code == 1
        assert "does not exist" in capsys.readouterr().out
