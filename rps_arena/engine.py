"""Core game model for Rock-Paper-Scissors rounds."""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .players import PlayerIdentity


class Move(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


# Ordinal order; ties in move counts are broken toward the earlier entry
MOVES = [Move.ROCK, Move.PAPER, Move.SCISSORS]

# What each move beats
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}

# What beats each move
BEATEN_BY = {v: k for k, v in BEATS.items()}


class Outcome(Enum):
    FIRST_WINS = "first_wins"
    SECOND_WINS = "second_wins"
    DRAW = "draw"


# Pre-computed winner table: (first, second) → outcome
_WINNER_TABLE = {
    (Move.ROCK, Move.ROCK): Outcome.DRAW,
    (Move.ROCK, Move.PAPER): Outcome.SECOND_WINS,
    (Move.ROCK, Move.SCISSORS): Outcome.FIRST_WINS,
    (Move.PAPER, Move.ROCK): Outcome.FIRST_WINS,
    (Move.PAPER, Move.PAPER): Outcome.DRAW,
    (Move.PAPER, Move.SCISSORS): Outcome.SECOND_WINS,
    (Move.SCISSORS, Move.ROCK): Outcome.SECOND_WINS,
    (Move.SCISSORS, Move.PAPER): Outcome.FIRST_WINS,
    (Move.SCISSORS, Move.SCISSORS): Outcome.DRAW,
}


def determine_winner(first: Move, second: Move) -> Outcome:
    """Resolve a single throw between two moves."""
    return _WINNER_TABLE[first, second]


@dataclass(frozen=True)
class Match:
    """One round between two players and the moves they threw.

    The outcome is derived from the moves on demand, never stored.
    """
    player_1: "PlayerIdentity"
    player_2: "PlayerIdentity"
    player_1_move: Move
    player_2_move: Move

    @property
    def outcome(self) -> Outcome:
        return determine_winner(self.player_1_move, self.player_2_move)

    @property
    def winner(self) -> Optional["PlayerIdentity"]:
        """The winning player, or None for a draw."""
        outcome = self.outcome
        if outcome is Outcome.FIRST_WINS:
            return self.player_1
        if outcome is Outcome.SECOND_WINS:
            return self.player_2
        return None

    def describe(self) -> str:
        winner = self.winner
        result = winner.name if winner is not None else "Draw"
        return f"Match: {self.player_1.name} vs {self.player_2.name} => {result}"

    def to_dict(self) -> dict:
        winner = self.winner
        return {
            "player_1": self.player_1.name,
            "player_2": self.player_2.name,
            "player_1_move": self.player_1_move.value,
            "player_2_move": self.player_2_move.value,
            "outcome": self.outcome.value,
            "winner": winner.name if winner is not None else None,
        }
