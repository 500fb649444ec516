"""The five fixed players and the strategy each one follows."""

from abc import ABC, abstractmethod
from enum import Enum

from .engine import Move, MOVES, BEATEN_BY
from .records import PlayerRecord


class PlayerIdentity(Enum):
    PLAYER_1 = 0
    PLAYER_2 = 1
    PLAYER_3 = 2
    PLAYER_4 = 3
    PLAYER_5 = 4


class Strategy(ABC):
    """Base class for a player's decision policy.

    Strategies hold no state of their own: everything they know comes from
    the two records and the random source passed to ``choose``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        ...

    @abstractmethod
    def choose(self, rng, my_record: PlayerRecord, opp_record: PlayerRecord) -> Move:
        ...

    def __repr__(self):
        return f"<{self.name}>"


def _random_move(rng) -> Move:
    return rng.choice(MOVES)


# ---------------------------------------------------------------------------
# 1: Uniform random
# ---------------------------------------------------------------------------

class RandomRamsy(Strategy):
    """Picks each move with equal probability and ignores all history."""
    name = "Random Ramsy"
    description = "Random Ramsy is completely random"

    def choose(self, rng, my_record, opp_record):
        return _random_move(rng)


# ---------------------------------------------------------------------------
# 2: Scissors-weighted random
# ---------------------------------------------------------------------------

# Upper bounds over a draw from range(10): 60% Scissors, 20% Rock, 20% Paper
SCISSORS_WEIGHTS = [
    (6, Move.SCISSORS),
    (8, Move.ROCK),
    (10, Move.PAPER),
]


class ScissorSally(Strategy):
    """Random, but heavily weighted towards Scissors."""
    name = "Scissor Sally"
    description = "Scissor Sally is heavily weighted to scissors and otherwise random"

    def choose(self, rng, my_record, opp_record):
        weight = rng.randrange(SCISSORS_WEIGHTS[-1][0])
        for bound, move in SCISSORS_WEIGHTS:
            if weight < bound:
                return move
        return SCISSORS_WEIGHTS[-1][1]


# ---------------------------------------------------------------------------
# 3: Exploit the opponent's habitual losing move
# ---------------------------------------------------------------------------

class LoserLarry(Strategy):
    """Throws whatever the opponent has most often lost with.

    Looks at the opponent's recent losing moves and repeats the most
    common one. Falls back to random while the opponent has never lost.
    """
    name = "Loser Larry"
    description = "Loser Larry will choose the most common move in their opponents losing record"

    def choose(self, rng, my_record, opp_record):
        move = opp_record.most_common_losing_move()
        return move if move is not None else _random_move(rng)


# ---------------------------------------------------------------------------
# 4: Cycle R → P → S
# ---------------------------------------------------------------------------

class GroovyGarth(Strategy):
    """Plays whatever would have beaten its own last recorded move.

    Draws are not recorded as moves, so after a draw the cycle continues
    from the last win or loss.
    """
    name = "Groovy Garth"
    description = "Groovy Garth will cycle going rock-paper-scissors ad nauseum"

    def choose(self, rng, my_record, opp_record):
        last = my_record.most_recent_move()
        if last is None:
            return _random_move(rng)
        return BEATEN_BY[last]


# ---------------------------------------------------------------------------
# 5: Copy the opponent's last winning move
# ---------------------------------------------------------------------------

class CopycatCandice(Strategy):
    """Copies the opponent's most recent winning move, random until it has one."""
    name = "Copycat Candice"
    description = "Copycat Candice will copy their opponents most recent successful move"

    def choose(self, rng, my_record, opp_record):
        move = opp_record.most_recent_winning_move()
        return move if move is not None else _random_move(rng)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

STRATEGIES: dict[PlayerIdentity, Strategy] = {
    PlayerIdentity.PLAYER_1: RandomRamsy(),
    PlayerIdentity.PLAYER_2: ScissorSally(),
    PlayerIdentity.PLAYER_3: LoserLarry(),
    PlayerIdentity.PLAYER_4: GroovyGarth(),
    PlayerIdentity.PLAYER_5: CopycatCandice(),
}


def get_strategy(player: PlayerIdentity) -> Strategy:
    return STRATEGIES[player]


def choose_move(
    rng,
    player: PlayerIdentity,
    my_record: PlayerRecord,
    opponent: PlayerIdentity,
    opp_record: PlayerRecord,
) -> Move:
    """Pick the move ``player`` throws against ``opponent`` this round.

    Neither record is modified. ``opponent`` is accepted for symmetry with
    the round loop; no current strategy looks at who it is facing.
    """
    return get_strategy(player).choose(rng, my_record, opp_record)


def get_player_by_name(name) -> PlayerIdentity:
    """Look up a player by strategy name, identity name or identity value.

    Names are case-insensitive; identity values may be ints or numeric
    strings (``0`` is PLAYER_1).
    """
    if isinstance(name, PlayerIdentity):
        return name
    available = ", ".join(s.name for s in STRATEGIES.values())
    if isinstance(name, bool) or not isinstance(name, (int, str)):
        raise ValueError(f"Unknown player: {name!r}. Available: {available}")

    text = str(name).strip()
    if text.lstrip("-").isdigit():
        try:
            return PlayerIdentity(int(text))
        except ValueError:
            raise ValueError(f"Unknown player: {name!r}. Available: {available}") from None

    name_lower = text.lower()
    for player, strategy in STRATEGIES.items():
        if name_lower in (strategy.name.lower(), player.name.lower()):
            return player
    raise ValueError(f"Unknown player: {name!r}. Available: {available}")
