"""CLI entry point for the RPS Arena."""

import argparse
import logging
import random
import time

from .players import PlayerIdentity, get_strategy, get_player_by_name
from .tournament import run_tournament, DEFAULT_ROUNDS
from .stats import (
    compute_standings,
    print_records,
    print_ratio_summary,
    print_standings,
    print_matches,
)
from .export import export_json, export_csv


def list_players():
    """Print every player and its strategy."""
    print("\nPlayers:")
    print("-" * 40)
    for player in PlayerIdentity:
        print(f"  {player.value:>2d}. {get_strategy(player).description}")
    print()


def cmd_run(args, players=None):
    """Run a tournament and print the report."""
    rng = random.Random(args.seed)

    start = time.perf_counter()
    result = run_tournament(rounds=args.rounds, rng=rng, seed=args.seed)
    elapsed_ms = (time.perf_counter() - start) * 1000

    print(f"Time to play {result.rounds} matches: {elapsed_ms:.3f}ms")

    if args.show_matches:
        print_matches(result)

    print_records(result, players)
    print_ratio_summary(result)
    print_standings(compute_standings(result.records))

    if args.export:
        _export(args, result)
    return result


def _export(args, result):
    """Handle export based on CLI args."""
    if args.export == "json":
        export_json(result, args.output, include_matches=args.show_matches)
    else:
        export_csv(result, args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rps_arena",
        description="Rock-Paper-Scissors tournament between five fixed strategies",
    )
    parser.add_argument("--list", action="store_true", help="List the players and their strategies")
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS,
                        help=f"Number of rounds (default: {DEFAULT_ROUNDS})")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    parser.add_argument("--player", action="append", dest="players", metavar="NAME",
                        help="Only print the detailed report for this player "
                             "(name or number from --list; repeatable)")
    parser.add_argument("--show-matches", action="store_true", help="Print every match result")
    parser.add_argument("--export", choices=["json", "csv"], help="Export format")
    parser.add_argument("--output", help="Export file path")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Diagnostic logging level (default: WARNING)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.export and not args.output:
        parser.error("--export requires --output")

    players = None
    if args.players:
        try:
            players = [get_player_by_name(name) for name in args.players]
        except ValueError as e:
            parser.error(str(e))

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        list_players()
        return

    cmd_run(args, players)


if __name__ == "__main__":
    main()
