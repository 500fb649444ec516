"""Export tournament results to JSON or CSV."""

import json
import csv
from pathlib import Path

from .stats import compute_standings
from .tournament import TournamentResult


def tournament_to_dict(result: TournamentResult, include_matches: bool = True) -> dict:
    standings = compute_standings(result.records)
    data = {
        "rounds": result.rounds,
        "records": {player.name: record.to_dict() for player, record in result.records.items()},
        "standings": [e.to_dict() for e in standings],
    }
    if include_matches:
        data["matches"] = [m.to_dict() for m in result.matches]
    return data


def export_json(result: TournamentResult, path: str, include_matches: bool = True):
    """Export records, standings and (optionally) match history to a JSON file."""
    data = tournament_to_dict(result, include_matches=include_matches)

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w") as f:
        json.dump(data, f, indent=2)
    print(f"  ✓ Results exported to {out}")


def export_csv(result: TournamentResult, path: str):
    """Export standings to a CSV file."""
    standings = compute_standings(result.records)

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "rank", "player", "name", "wins", "losses", "draws",
        "games_played", "win_loss_ratio", "win_loss_ratio_display", "win_pct",
    ]

    with open(out, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for i, entry in enumerate(standings, 1):
            row = entry.to_dict()
            row["rank"] = i
            writer.writerow(row)
    print(f"  ✓ Standings exported to {out}")
