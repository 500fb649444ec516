"""Tests for JSON and CSV export."""

import csv
import json

from rps_arena.export import export_csv, export_json, tournament_to_dict
from rps_arena.tournament import run_tournament


class TestTournamentToDict:

    def test_structure(self):
        data = tournament_to_dict(run_tournament(rounds=20, seed=6))
        assert data["rounds"] == 20
        assert set(data["records"]) == {"PLAYER_1", "PLAYER_2", "PLAYER_3", "PLAYER_4", "PLAYER_5"}
        assert len(data["standings"]) == 5
        assert len(data["matches"]) == 20

    def test_matches_optional(self):
        data = tournament_to_dict(run_tournament(rounds=20, seed=6), include_matches=False)
        assert "matches" not in data

    def test_zero_rounds_serialises_nan_as_null(self):
        data = tournament_to_dict(run_tournament(rounds=0))
        # Must survive strict JSON encoding
        json.dumps(data, allow_nan=False)
        assert all(r["win_loss_ratio"] is None for r in data["records"].values())


class TestExportFiles:

    def test_export_json(self, tmp_path, capsys):
        out = tmp_path / "nested" / "result.json"
        export_json(run_tournament(rounds=30, seed=2), str(out))
        data = json.loads(out.read_text())
        assert data["rounds"] == 30
        assert "exported" in capsys.readouterr().out

    def test_export_csv(self, tmp_path):
        out = tmp_path / "standings.csv"
        export_csv(run_tournament(rounds=30, seed=2), str(out))
        with open(out, newline="") as f:
            rows = list(csv.DictReader(f))
        assert [row["rank"] for row in rows] == ["1", "2", "3", "4", "5"]
        assert sum(int(row["games_played"]) for row in rows) == 60
