"""CLI entry point for the RPS match engine."""

import argparse
import logging

from .engine import play, run_match
from .players import ALL_PLAYER_CLASSES, Random, TitForTat, get_player_by_name
from .stats import declare_winner, print_match_summary, print_outcomes

DEFAULT_ROUNDS = 1000
DEMO_ROUNDS = 100

logger = logging.getLogger(__name__)


def list_players():
    """Print all built-in player names."""
    print("\nAvailable Players:")
    print("-" * 40)
    for i, cls in enumerate(ALL_PLAYER_CLASSES, 1):
        print(f"  {i:>2d}. {cls.display_name}")
    print()


def cmd_play(args, parser):
    """Run a single match between two built-in players."""
    try:
        player_a = get_player_by_name(args.player_a)
        player_b = get_player_by_name(args.player_b)
    except ValueError as e:
        parser.error(str(e))
    logger.debug("Resolved players %r and %r", player_a, player_b)
    if args.rounds < 0:
        parser.error(f"--rounds must be >= 0, got {args.rounds}")

    print(f"\n⚔️  {player_a.name} vs {player_b.name}  |  {args.rounds} rounds"
          + (f"  |  seed={args.seed}" if args.seed is not None else ""))

    result = run_match(player_a, player_b, rounds=args.rounds, seed=args.seed)
    print_match_summary(result, show_rounds=args.show_rounds)
    return result


def cmd_demo(args, parser):
    """Tit-for-Tat against Random: print every outcome, then the winner."""
    if args.rounds < 0:
        parser.error(f"--rounds must be >= 0, got {args.rounds}")

    p1 = TitForTat("t4t")
    p2 = Random("random")
    results = play(p1, p2, args.rounds, seed=args.seed)
    print_outcomes(results)
    message = declare_winner(results, p1.name, p2.name)
    print(message)
    return message


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rps-match",
        description="Rock-Paper-Scissors match engine",
    )
    parser.add_argument("--list", action="store_true", help="List all built-in players")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    pl = subparsers.add_parser("play", help="Play player A vs player B")
    pl.add_argument("--player-a", required=True, help="Name of player A (seat 0)")
    pl.add_argument("--player-b", required=True, help="Name of player B (seat 1)")
    pl.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS,
                    help=f"Number of rounds (default: {DEFAULT_ROUNDS})")
    pl.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    pl.add_argument("--show-rounds", action="store_true", help="Print every round")

    demo = subparsers.add_parser("demo", help="Tit-for-Tat vs Random, printing every outcome")
    demo.add_argument("--rounds", type=int, default=DEMO_ROUNDS,
                      help=f"Number of rounds (default: {DEMO_ROUNDS})")
    demo.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.list:
        list_players()
        return

    if args.command == "play":
        cmd_play(args, parser)
    elif args.command == "demo":
        cmd_demo(args, parser)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
