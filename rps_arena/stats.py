"""Standings computation and pretty-printing for a finished tournament."""

import math
from dataclasses import dataclass

from .engine import Move, MOVES
from .players import PlayerIdentity, get_strategy
from .records import PlayerRecord
from .tournament import TournamentResult

RULE = "=" * 75


def format_ratio(ratio: float) -> str:
    """Two-decimal ratio; inf and nan are printed as-is."""
    return f"{ratio:.2f}"


def format_distribution(distribution: dict[Move, int], preamble: str) -> str:
    counts = ", ".join(f"{m.name.capitalize()} {distribution[m]}x" for m in MOVES)
    return f"{preamble} [{counts}]"


@dataclass
class StandingsEntry:
    """One player's line in the final standings."""
    player: PlayerIdentity
    record: PlayerRecord

    @property
    def name(self) -> str:
        return get_strategy(self.player).name

    @property
    def ratio(self) -> float:
        return self.record.win_loss_ratio()

    @property
    def win_pct(self) -> float:
        played = self.record.games_played
        return (self.record.wins / played * 100) if played else 0.0

    def to_dict(self) -> dict:
        ratio = self.ratio
        return {
            "player": self.player.name,
            "name": self.name,
            "wins": self.record.wins,
            "losses": self.record.losses,
            "draws": self.record.draws,
            "games_played": self.record.games_played,
            "win_loss_ratio": ratio if math.isfinite(ratio) else None,
            "win_loss_ratio_display": format_ratio(ratio),
            "win_pct": round(self.win_pct, 2),
        }


def _standings_key(entry: StandingsEntry):
    ratio = entry.ratio
    if math.isnan(ratio):
        return (2, 0.0, -entry.record.wins)
    if math.isinf(ratio):
        return (0, 0.0, -entry.record.wins)
    return (1, -ratio, -entry.record.wins)


def compute_standings(records: dict[PlayerIdentity, PlayerRecord]) -> list[StandingsEntry]:
    """Players sorted by W/L ratio (unbeaten first, undecided last), then wins."""
    entries = [StandingsEntry(player, record) for player, record in records.items()]
    return sorted(entries, key=_standings_key)


# ---------------------------------------------------------------------------
# Pretty-printing
# ---------------------------------------------------------------------------

def print_player_report(player: PlayerIdentity, record: PlayerRecord):
    """Print one player's record and move histograms."""
    print(f"{get_strategy(player).description}:")
    print(f"Wins/Losses/Draws: {record.wins}/{record.losses}/{record.draws}, "
          f"W/L = {format_ratio(record.win_loss_ratio())}")
    print(format_distribution(record.winning_distribution, "Wins"))
    print(format_distribution(record.losing_distribution, "Losses"))
    print(format_distribution(record.total_distribution, "Total Plays"))


def print_records(result: TournamentResult, players=None):
    """Print the report block for each of ``players`` (default: everyone)."""
    print(RULE)
    for player in players or list(PlayerIdentity):
        print_player_report(player, result.records[player])
        print(RULE)


def print_ratio_summary(result: TournamentResult):
    """Print just the W/L per player to make it easy to find."""
    for player in PlayerIdentity:
        ratio = result.records[player].win_loss_ratio()
        print(f"{get_strategy(player).name} W/L: {format_ratio(ratio)}")


def print_standings(standings: list[StandingsEntry]):
    """Print a formatted standings table."""
    print()
    print(RULE)
    print(f"  {'#':>3s}  {'Player':<18s} {'W':>6s} {'L':>6s} {'D':>6s} {'W/L':>7s} {'Win%':>7s}")
    print("-" * 75)
    for i, e in enumerate(standings, 1):
        print(f"  {i:>3d}  {e.name:<18s} {e.record.wins:>6d} {e.record.losses:>6d} "
              f"{e.record.draws:>6d} {format_ratio(e.ratio):>7s} {e.win_pct:>6.1f}%")
    print(RULE)
    print()


def print_matches(result: TournamentResult):
    for match in result.matches:
        print(match.describe())
