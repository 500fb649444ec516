"""Per-player running record of outcomes and move history."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .engine import Move, MOVES

# Only the most recent losses are considered when looking for a habit
LOSS_WINDOW = 100


def _move_counts(moves) -> np.ndarray:
    """Count occurrences of each move, indexed by ordinal in MOVES."""
    indices = np.fromiter((MOVES.index(m) for m in moves), dtype=np.intp)
    return np.bincount(indices, minlength=len(MOVES))


@dataclass
class PlayerRecord:
    """Wins, losses and draws for one player plus the moves behind them.

    Draws only bump the counter: the move thrown in a drawn round is not
    appended to any history, so ``most_recent_move`` skips draw rounds.
    """
    wins: int = 0
    losses: int = 0
    draws: int = 0
    winning_moves: list = field(default_factory=list)
    losing_moves: list = field(default_factory=list)
    moves: list = field(default_factory=list)

    def win(self, move: Move):
        self.wins += 1
        self.winning_moves.append(move)
        self.moves.append(move)

    def lose(self, move: Move):
        self.losses += 1
        self.losing_moves.append(move)
        self.moves.append(move)

    def draw(self):
        self.draws += 1

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.draws

    def most_recent_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def most_recent_winning_move(self) -> Optional[Move]:
        return self.winning_moves[-1] if self.winning_moves else None

    def most_common_losing_move(self) -> Optional[Move]:
        """Most frequent move among the last LOSS_WINDOW losses.

        Ties go to the lowest ordinal (Rock, then Paper, then Scissors).
        """
        if not self.losing_moves:
            return None
        counts = _move_counts(self.losing_moves[-LOSS_WINDOW:])
        # argmax returns the first maximum, which gives the ordinal tie-break
        return MOVES[int(np.argmax(counts))]

    def win_loss_ratio(self) -> float:
        """Wins over losses; inf with no losses, nan with no games decided."""
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(self.wins) / np.float64(self.losses))

    @staticmethod
    def move_distribution(moves) -> dict[Move, int]:
        counts = _move_counts(moves)
        return {move: int(counts[i]) for i, move in enumerate(MOVES)}

    @property
    def winning_distribution(self) -> dict[Move, int]:
        return self.move_distribution(self.winning_moves)

    @property
    def losing_distribution(self) -> dict[Move, int]:
        return self.move_distribution(self.losing_moves)

    @property
    def total_distribution(self) -> dict[Move, int]:
        return self.move_distribution(self.moves)

    def to_dict(self) -> dict:
        ratio = self.win_loss_ratio()
        return {
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "games_played": self.games_played,
            "win_loss_ratio": ratio if np.isfinite(ratio) else None,
            "win_loss_ratio_display": f"{ratio:.2f}",
            "winning_distribution": {m.value: c for m, c in self.winning_distribution.items()},
            "losing_distribution": {m.value: c for m, c in self.losing_distribution.items()},
            "total_distribution": {m.value: c for m, c in self.total_distribution.items()},
        }
