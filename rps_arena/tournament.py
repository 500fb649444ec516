"""Tournament loop: random pairings played one round at a time.

Rounds run strictly in sequence. Each round's strategies see the records
exactly as the previous round left them, and both players in a round see
the same pre-round state.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Callable

from .engine import Match, Outcome
from .players import PlayerIdentity, choose_move
from .records import PlayerRecord

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 1000


@dataclass
class TournamentResult:
    """Final records per player plus the ordered match history."""
    records: dict[PlayerIdentity, PlayerRecord]
    matches: list[Match] = field(default_factory=list)

    @property
    def rounds(self) -> int:
        return len(self.matches)


def new_records() -> dict[PlayerIdentity, PlayerRecord]:
    return {player: PlayerRecord() for player in PlayerIdentity}


def pop_random_element(rng, items: list):
    """Remove and return a uniformly chosen element of ``items``."""
    idx = rng.randrange(len(items))
    return items.pop(idx)


def pick_players(rng) -> tuple[PlayerIdentity, PlayerIdentity]:
    """Draw an ordered pair of distinct players.

    Two sequential pops from the full list give every ordered pair the
    same probability, 1/5 * 1/4.
    """
    players = list(PlayerIdentity)
    player_1 = pop_random_element(rng, players)
    player_2 = pop_random_element(rng, players)
    return player_1, player_2


def play_round(rng, records: dict[PlayerIdentity, PlayerRecord]) -> Match:
    """Play one round and record its result on both players."""
    player_1, player_2 = pick_players(rng)
    record_1 = records[player_1]
    record_2 = records[player_2]

    # Both choices are made before either record changes
    move_1 = choose_move(rng, player_1, record_1, player_2, record_2)
    move_2 = choose_move(rng, player_2, record_2, player_1, record_1)

    match = Match(player_1, player_2, move_1, move_2)
    outcome = match.outcome
    if outcome is Outcome.FIRST_WINS:
        record_1.win(move_1)
        record_2.lose(move_2)
    elif outcome is Outcome.SECOND_WINS:
        record_2.win(move_2)
        record_1.lose(move_1)
    else:
        record_1.draw()
        record_2.draw()
    return match


def run_tournament(
    rounds: int = DEFAULT_ROUNDS,
    rng=None,
    seed: Optional[int] = None,
    on_round_done: Optional[Callable[[int, int, Match], None]] = None,
) -> TournamentResult:
    """Play ``rounds`` random pairings and return the records and history.

    Args:
        rng: Random source with ``choice`` and ``randrange``. When omitted a
             ``random.Random(seed)`` is created.
        on_round_done: Optional callback(completed, total, match) called
                       after each round is recorded.

    A non-positive round count is valid and yields empty records.
    """
    if rng is None:
        rng = random.Random(seed)

    records = new_records()
    result = TournamentResult(records=records)
    total = max(rounds, 0)
    logger.info("Starting tournament: %d rounds, seed=%s", total, seed)

    for round_num in range(total):
        match = play_round(rng, records)
        result.matches.append(match)
        logger.debug("Round %d: %s", round_num + 1, match.describe())
        if on_round_done:
            on_round_done(round_num + 1, total, match)

    logger.info("Tournament finished: %d matches played", len(result.matches))
    return result
