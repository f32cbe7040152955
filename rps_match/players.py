"""Rock-Paper-Scissors players: the strategy interface and built-in strategies."""

from abc import ABC, abstractmethod
from typing import Callable, Optional
import random

from .engine import Move, MOVES, HistoryView, check_seat


class UnimplementedStrategyError(NotImplementedError):
    """A player was asked for a move but has no decision procedure."""


def random_move(rng: random.Random) -> Move:
    """Draw a move uniformly at random."""
    return rng.choice(MOVES)


class Player(ABC):
    """Base class for RPS players.

    Players have a display name and implement ``next_move``. Each instance
    owns its random generator in ``self.rng``; the engine may replace it
    with a seeded one before a match.
    """

    def __init__(self, name: str, rng: Optional[random.Random] = None):
        self.name = name
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.reset()

    @abstractmethod
    def next_move(self, history: HistoryView, seat: int) -> Move:
        """Choose a move given the rounds played so far.

        ``seat`` is 0 for the first player and 1 for the second; it tells
        which half of each Round is this player's own move.
        """
        ...

    def reset(self):
        """Reset any internal state between matches."""
        pass

    def __repr__(self):
        return f"<{type(self).__name__} {self.name!r}>"


class Random(Player):
    """Chooses a move completely at random; history is ignored."""
    display_name = "Random"

    def next_move(self, history, seat):
        check_seat(seat)
        return random_move(self.rng)


class TitForTat(Player):
    """Plays whatever the opponent played in the last round.

    Plays randomly on the first round. Never looks further back than one
    round.
    """
    display_name = "Tit-for-Tat"

    def next_move(self, history, seat):
        check_seat(seat)
        if not history:
            return random_move(self.rng)
        return history[-1].opponent_of(seat)


class ExternalPlayer(Player):
    """A player whose decision procedure is supplied by the caller.

    ``next_move`` is any callable taking ``(history, seat)`` and returning
    a Move. Without one, asking this player for a move is an error.
    """

    def __init__(
        self,
        name: str,
        next_move: Optional[Callable[[HistoryView, int], Move]] = None,
        rng: Optional[random.Random] = None,
    ):
        self._decide = next_move
        super().__init__(name, rng)

    def next_move(self, history, seat):
        check_seat(seat)
        if self._decide is None:
            raise UnimplementedStrategyError(
                f"player {self.name!r} has no next_move implementation"
            )
        return self._decide(history, seat)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

ALL_PLAYER_CLASSES = [Random, TitForTat]


def get_all_players() -> list[Player]:
    """Return fresh instances of all built-in players."""
    return [cls(cls.display_name) for cls in ALL_PLAYER_CLASSES]


def get_player_by_name(
    name: str,
    player_name: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> Player:
    """Get a built-in player instance by strategy name (case-insensitive).

    Accepts the display name ("Tit-for-Tat") or the class name ("TitForTat").
    ``player_name`` overrides the instance's display name.
    """
    name_lower = name.lower()
    for cls in ALL_PLAYER_CLASSES:
        if name_lower in (cls.display_name.lower(), cls.__name__.lower()):
            return cls(player_name or cls.display_name, rng)
    available = ", ".join(cls.display_name for cls in ALL_PLAYER_CLASSES)
    raise ValueError(f"Unknown player: '{name}'. Available: {available}")
