"""Stats computation and pretty-printing for RPS matches."""

import numpy as np

from .engine import MatchResult


def tally(outcomes) -> tuple[int, int, int]:
    """Count (player A wins, player B wins, ties) in an outcome sequence."""
    arr = np.asarray(outcomes, dtype=int)
    return int((arr == -1).sum()), int((arr == 1).sum()), int((arr == 0).sum())


def score_trajectory(outcomes) -> np.ndarray:
    """Running score after each round, from player A's point of view.

    Positive means A is ahead. Empty input gives an empty array.
    """
    return np.cumsum(-np.asarray(outcomes, dtype=int))


def declare_winner(outcomes, name_a: str, name_b: str) -> str:
    """Compare round wins and name the winner."""
    a_wins, b_wins, _ = tally(outcomes)
    if a_wins > b_wins:
        return f"Player {name_a} wins!"
    elif b_wins > a_wins:
        return f"Player {name_b} wins!"
    return "It was a tie!"


# ---------------------------------------------------------------------------
# Pretty-printing
# ---------------------------------------------------------------------------

def print_outcomes(outcomes):
    """Print one outcome per line."""
    for r in outcomes:
        print(r)


def print_match_summary(result: MatchResult, show_rounds: bool = False):
    """Print a detailed summary of a single match."""
    print("=" * 60)
    print(f"  {result.player_a_name}  vs  {result.player_b_name}")
    print(f"  Rounds: {result.rounds}")
    print("=" * 60)

    if show_rounds:
        for i, (rnd, outcome) in enumerate(zip(result.history, result.outcomes), 1):
            print(f"  {i:>5d}  {rnd.p1.value:>8s} {rnd.p2.value:>8s}  {outcome:>2d}")
        print("-" * 60)

    print(f"  {'':20s} {'A':>10s} {'B':>10s}")
    print(f"  {'Wins':20s} {result.a_wins:>10d} {result.b_wins:>10d}")
    print(f"  {'Losses':20s} {result.b_wins:>10d} {result.a_wins:>10d}")
    print(f"  {'Draws':20s} {result.draws:>10d} {result.draws:>10d}")
    print(f"  {'Win %':20s} {result.a_win_pct:>9.1f}% {result.b_win_pct:>9.1f}%")

    trajectory = score_trajectory(result.outcomes)
    if trajectory.size:
        print(f"  {'Max A lead':20s} {max(int(trajectory.max()), 0):>10d}")
        print(f"  {'Max B lead':20s} {max(int(-trajectory.min()), 0):>10d}")
    print()
    print(f"  A move distribution: {result.a_move_distribution}")
    print(f"  B move distribution: {result.b_move_distribution}")

    print(f"\n  ★ {declare_winner(result.outcomes, result.player_a_name, result.player_b_name)}")
    print("=" * 60)
