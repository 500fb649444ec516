import random
import time
from rps_arena.engine import MOVES
from rps_arena.players import PlayerIdentity, STRATEGIES
from rps_arena.records import PlayerRecord

CALLS = 10000


def _busy_record(rng, size=500):
    record = PlayerRecord()
    for _ in range(size):
        move = rng.choice(MOVES)
        outcome = rng.randrange(3)
        if outcome == 0:
            record.win(move)
        elif outcome == 1:
            record.lose(move)
        else:
            record.draw()
    return record


def profile_strategies():
    print(f"Profiling {len(STRATEGIES)} strategies...")
    rng = random.Random(0)
    my_record = _busy_record(rng)
    opp_record = _busy_record(rng)

    results = []
    for player in PlayerIdentity:
        strategy = STRATEGIES[player]
        start = time.perf_counter()
        for _ in range(CALLS):
            strategy.choose(rng, my_record, opp_record)
        duration = (time.perf_counter() - start) * 1000  # ms
        results.append((strategy.name, duration / CALLS))

    results.sort(key=lambda x: x[1], reverse=True)

    print("\n--- Strategies by cost (avg ms per move) ---")
    for name, avg in results:
        print(f"{name:<20}: {avg:.5f} ms")


if __name__ == "__main__":
    profile_strategies()
