"""Core game engine for Rock-Paper-Scissors matches."""

from enum import Enum
from dataclasses import dataclass, field
from collections import Counter
from collections.abc import Sequence
from types import MappingProxyType
from typing import NamedTuple, Optional
import logging
import numbers
import operator
import random

logger = logging.getLogger(__name__)


class Move(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


MOVES = (Move.ROCK, Move.PAPER, Move.SCISSORS)

# What each move beats
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}

# What beats each move
BEATEN_BY = {v: k for k, v in BEATS.items()}

# (first mover, second mover) → outcome; -1 first mover wins, 1 second mover wins
SCORE_TABLE = MappingProxyType({
    (Move.ROCK, Move.ROCK): 0,
    (Move.ROCK, Move.PAPER): 1,
    (Move.ROCK, Move.SCISSORS): -1,
    (Move.PAPER, Move.ROCK): -1,
    (Move.PAPER, Move.PAPER): 0,
    (Move.PAPER, Move.SCISSORS): 1,
    (Move.SCISSORS, Move.ROCK): 1,
    (Move.SCISSORS, Move.PAPER): -1,
    (Move.SCISSORS, Move.SCISSORS): 0,
})


class SeatError(AssertionError):
    """A seat index other than 0 or 1 reached a strategy."""


def check_seat(seat: int) -> int:
    """Return ``seat`` unchanged, or raise SeatError if it is not 0 or 1.

    Not an ``assert``: the check must hold under ``python -O``.
    """
    if isinstance(seat, bool) or not isinstance(seat, numbers.Integral) or seat not in (0, 1):
        raise SeatError(f"seat must be 0 or 1, got {seat!r}")
    return seat


def score(m1: Move, m2: Move) -> int:
    """Return -1 if m1 beats m2, 1 if m2 beats m1, 0 for a tie."""
    return SCORE_TABLE[m1, m2]


def score_history(rounds) -> list[int]:
    """Score a sequence of rounds, one outcome per round in play order."""
    return [SCORE_TABLE[p1, p2] for p1, p2 in rounds]


class Round(NamedTuple):
    """The moves made by both seats in a single round of play."""
    p1: Move
    p2: Move

    def for_seat(self, seat: int) -> Move:
        return self[check_seat(seat)]

    def opponent_of(self, seat: int) -> Move:
        return self[1 - check_seat(seat)]


class HistoryView(Sequence):
    """Rounds played so far in the current match, as strategies see them.

    Backed by the runner's own list, so rounds appended after the view
    was handed out show up in it. Reading is all it allows.
    """
    __slots__ = ("_rounds",)

    def __init__(self, rounds: list):
        self._rounds = rounds

    def __getitem__(self, index):
        return self._rounds[index]

    def __len__(self):
        return len(self._rounds)

    def __eq__(self, other):
        if isinstance(other, HistoryView):
            other = other._rounds
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        return list(self._rounds) == list(other)

    __hash__ = None

    @property
    def last(self) -> Optional[Round]:
        """Most recent round, or None before the first round."""
        return self._rounds[-1] if self._rounds else None

    def __repr__(self):
        return f"HistoryView({self._rounds!r})"


@dataclass
class MatchResult:
    """Result of a match between two players."""
    player_a_name: str
    player_b_name: str
    rounds: int
    history: list = field(default_factory=list)
    outcomes: list = field(default_factory=list)

    @property
    def a_wins(self) -> int:
        return self.outcomes.count(-1)

    @property
    def b_wins(self) -> int:
        return self.outcomes.count(1)

    @property
    def draws(self) -> int:
        return self.outcomes.count(0)

    @property
    def a_win_pct(self) -> float:
        return (self.a_wins / self.rounds * 100) if self.rounds else 0.0

    @property
    def b_win_pct(self) -> float:
        return (self.b_wins / self.rounds * 100) if self.rounds else 0.0

    @property
    def draw_pct(self) -> float:
        return (self.draws / self.rounds * 100) if self.rounds else 0.0

    @property
    def a_move_distribution(self) -> dict[str, int]:
        return dict(Counter(r.p1.value for r in self.history))

    @property
    def b_move_distribution(self) -> dict[str, int]:
        return dict(Counter(r.p2.value for r in self.history))

    @property
    def winner(self) -> Optional[str]:
        """Name of the player with more round wins, None on a tie."""
        if self.a_wins > self.b_wins:
            return self.player_a_name
        if self.b_wins > self.a_wins:
            return self.player_b_name
        return None

    def to_dict(self) -> dict:
        return {
            "player_a": self.player_a_name,
            "player_b": self.player_b_name,
            "rounds": self.rounds,
            "a_wins": self.a_wins,
            "b_wins": self.b_wins,
            "draws": self.draws,
            "a_win_pct": round(self.a_win_pct, 2),
            "b_win_pct": round(self.b_win_pct, 2),
            "draw_pct": round(self.draw_pct, 2),
            "a_move_distribution": self.a_move_distribution,
            "b_move_distribution": self.b_move_distribution,
            "winner": self.winner,
            "outcomes": list(self.outcomes),
        }


def _validate(player_a, player_b, num_rounds) -> int:
    # Local import: players.py depends on this module.
    from .players import Player

    for seat, player in enumerate((player_a, player_b)):
        if not isinstance(player, Player):
            raise TypeError(
                f"seat {seat} needs a Player instance, got {type(player).__name__}"
            )
    if isinstance(num_rounds, bool):
        raise TypeError(f"num_rounds must be an integer, got {num_rounds!r}")
    try:
        num_rounds = operator.index(num_rounds)
    except TypeError:
        raise TypeError(f"num_rounds must be an integer, got {num_rounds!r}") from None
    if num_rounds < 0:
        raise ValueError(f"num_rounds must be >= 0, got {num_rounds}")
    return num_rounds


def _checked(move, player) -> Move:
    if not isinstance(move, Move):
        raise TypeError(
            f"{player.name!r} returned {move!r} from next_move(), expected a Move"
        )
    return move


def _play_rounds(player_a, player_b, num_rounds: int, seed: Optional[int]) -> list[Round]:
    """Drive ``num_rounds`` rounds and return the completed history."""
    num_rounds = _validate(player_a, player_b, num_rounds)

    if seed is not None:
        # Each player gets its own generator derived from the master seed
        master_rng = random.Random(seed)
        player_a.rng = random.Random(master_rng.randint(0, 2**31))
        player_b.rng = random.Random(master_rng.randint(0, 2**31))
    player_a.reset()
    player_b.reset()

    logger.debug("Match start: %s vs %s, %d rounds", player_a.name, player_b.name, num_rounds)

    # Only the engine appends to this list
    history: list[Round] = []
    view = HistoryView(history)

    a_next = player_a.next_move
    b_next = player_b.next_move
    for _ in range(num_rounds):
        # Both seats see the same snapshot; neither sees the other's current move
        move_a = _checked(a_next(view, 0), player_a)
        move_b = _checked(b_next(view, 1), player_b)
        history.append(Round(move_a, move_b))

    logger.debug("Match end: %s vs %s, %d rounds played", player_a.name, player_b.name, len(history))
    return history


def play(player_a, player_b, num_rounds: int, seed: Optional[int] = None) -> list[int]:
    """Play two players against each other and return per-round outcomes.

    -1 → player A (seat 0) wins
     1 → player B (seat 1) wins
     0 → tie

    Args:
        seed: If given, both players get fresh generators derived from it,
              making the match reproducible.
    """
    return score_history(_play_rounds(player_a, player_b, num_rounds, seed))


def run_match(
    player_a,
    player_b,
    rounds: int = 1000,
    seed: Optional[int] = None,
) -> MatchResult:
    """Run a match of N rounds and keep the history along with the outcomes."""
    history = _play_rounds(player_a, player_b, rounds, seed)
    return MatchResult(
        player_a_name=player_a.name,
        player_b_name=player_b.name,
        rounds=len(history),
        history=history,
        outcomes=score_history(history),
    )
