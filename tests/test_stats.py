"""Tests for standings and console reports."""

import math

from rps_arena.engine import Move
from rps_arena.players import PlayerIdentity
from rps_arena.records import PlayerRecord
from rps_arena.stats import (
    compute_standings,
    format_distribution,
    format_ratio,
    print_player_report,
    print_ratio_summary,
    print_records,
)
from rps_arena.tournament import new_records, run_tournament

R, P, S = Move.ROCK, Move.PAPER, Move.SCISSORS


class TestFormatting:

    def test_format_ratio(self):
        assert format_ratio(1.5) == "1.50"
        assert format_ratio(math.inf) == "inf"
        assert format_ratio(math.nan) == "nan"

    def test_format_distribution(self):
        text = format_distribution({R: 2, P: 0, S: 5}, "Wins")
        assert text == "Wins [Rock 2x, Paper 0x, Scissors 5x]"


class TestStandings:

    def _records(self, record_factory):
        records = new_records()
        records[PlayerIdentity.PLAYER_1] = record_factory(wins=[R], losses=[P, P])
        records[PlayerIdentity.PLAYER_2] = record_factory(wins=[R, R], losses=[P])
        records[PlayerIdentity.PLAYER_3] = record_factory(wins=[S])
        records[PlayerIdentity.PLAYER_4] = record_factory(draws=2)
        records[PlayerIdentity.PLAYER_5] = record_factory(wins=[R, R, R, R], losses=[P, P])
        return records

    def test_sorted_by_ratio_then_wins(self, record_factory):
        order = [e.player for e in compute_standings(self._records(record_factory))]
        assert order == [
            PlayerIdentity.PLAYER_3,
            PlayerIdentity.PLAYER_5,
            PlayerIdentity.PLAYER_2,
            PlayerIdentity.PLAYER_1,
            PlayerIdentity.PLAYER_4,
        ]

    def test_entry_to_dict(self, record_factory):
        entry = compute_standings(self._records(record_factory))[0]
        data = entry.to_dict()
        assert data["name"] == "Loser Larry"
        assert data["win_loss_ratio"] is None
        assert data["win_loss_ratio_display"] == "inf"
        assert data["win_pct"] == 100.0

    def test_empty_records(self):
        standings = compute_standings(new_records())
        assert len(standings) == 5
        assert all(e.win_pct == 0.0 for e in standings)


class TestReports:

    def test_player_report(self, capsys, record_factory):
        print_player_report(PlayerIdentity.PLAYER_2, record_factory(wins=[S, S], losses=[R], draws=1))
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Scissor Sally is heavily weighted to scissors and otherwise random:",
            "Wins/Losses/Draws: 2/1/1, W/L = 2.00",
            "Wins [Rock 0x, Paper 0x, Scissors 2x]",
            "Losses [Rock 1x, Paper 0x, Scissors 0x]",
            "Total Plays [Rock 1x, Paper 0x, Scissors 2x]",
        ]

    def test_report_tolerates_non_finite_ratio(self, capsys):
        print_player_report(PlayerIdentity.PLAYER_1, PlayerRecord())
        assert "W/L = nan" in capsys.readouterr().out

    def test_full_report_lists_every_player(self, capsys):
        result = run_tournament(rounds=50, seed=4)
        print_records(result)
        print_ratio_summary(result)
        out = capsys.readouterr().out
        for name in ("Random Ramsy", "Scissor Sally", "Loser Larry", "Groovy Garth", "Copycat Candice"):
            assert f"{name} W/L:" in out
