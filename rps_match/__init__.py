"""Rock-Paper-Scissors match engine."""

from .engine import (
    BEATEN_BY,
    BEATS,
    MOVES,
    SCORE_TABLE,
    HistoryView,
    MatchResult,
    Move,
    Round,
    SeatError,
    check_seat,
    play,
    run_match,
    score,
    score_history,
)
from .players import (
    ALL_PLAYER_CLASSES,
    ExternalPlayer,
    Player,
    Random,
    TitForTat,
    UnimplementedStrategyError,
    get_all_players,
    get_player_by_name,
    random_move,
)

__all__ = [
    "Move",
    "MOVES",
    "BEATS",
    "BEATEN_BY",
    "SCORE_TABLE",
    "Round",
    "HistoryView",
    "MatchResult",
    "SeatError",
    "check_seat",
    "score",
    "score_history",
    "play",
    "run_match",
    "Player",
    "Random",
    "TitForTat",
    "ExternalPlayer",
    "UnimplementedStrategyError",
    "random_move",
    "ALL_PLAYER_CLASSES",
    "get_all_players",
    "get_player_by_name",
]
