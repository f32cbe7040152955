"""Tests for the player interface and built-in strategies."""

import random
from collections import Counter

import pytest

from rps_match.engine import MOVES, HistoryView, Move, Round, SeatError, play
from rps_match.players import (
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

from tests.doubles import ScriptedRng


def _history(*rounds):
    return HistoryView([Round(*r) for r in rounds])


class TestPlayerBase:
    def test_cannot_instantiate_abstract_player(self):
        with pytest.raises(TypeError):
            Player("abstract")

    def test_subclass_without_next_move_is_abstract(self):
        class Lazy(Player):
            pass

        with pytest.raises(TypeError):
            Lazy("lazy")

    def test_name_is_mutable(self):
        p = Random("before")
        p.name = "after"
        assert p.name == "after"
        assert "after" in repr(p)

    def test_owns_its_generator(self):
        a, b = Random("a"), Random("b")
        assert a.rng is not b.rng

    def test_injected_generator_is_used(self):
        rng = random.Random(3)
        assert Random("a", rng=rng).rng is rng


class TestRandom:
    def test_only_valid_moves(self):
        p = Random("r", rng=random.Random(12345))
        counts = Counter(p.next_move(_history(), 0) for _ in range(10_000))
        assert set(counts) <= set(MOVES)
        for m in MOVES:
            assert abs(counts[m] - 10_000 / 3) < 300

    def test_ignores_history_and_seat(self):
        a = Random("a", rng=random.Random(1))
        b = Random("b", rng=random.Random(1))
        hist = _history((Move.ROCK, Move.PAPER))
        for _ in range(20):
            assert a.next_move(_history(), 0) == b.next_move(hist, 1)

    @pytest.mark.parametrize("seat", [-1, 2, 7, 0.0])
    def test_bad_seat(self, seat):
        with pytest.raises(SeatError):
            Random("r").next_move(_history(), seat)

    def test_random_move_uses_given_generator(self):
        assert random_move(ScriptedRng(Move.SCISSORS)) == Move.SCISSORS


class TestTitForTat:
    def test_mirrors_opponent_from_seat_0(self):
        p = TitForTat("t4t")
        assert p.next_move(_history((Move.PAPER, Move.SCISSORS)), 0) == Move.SCISSORS

    def test_mirrors_opponent_from_seat_1(self):
        p = TitForTat("t4t")
        assert p.next_move(_history((Move.PAPER, Move.SCISSORS)), 1) == Move.PAPER

    def test_only_last_round_matters(self):
        p = TitForTat("t4t")
        hist = _history((Move.ROCK, Move.ROCK), (Move.ROCK, Move.PAPER))
        assert p.next_move(hist, 0) == Move.PAPER

    def test_empty_history_is_random(self):
        p = TitForTat("t4t")
        for _ in range(50):
            assert p.next_move(_history(), 0) in MOVES

    def test_empty_history_uses_own_generator(self):
        p = TitForTat("t4t", rng=ScriptedRng(Move.ROCK))
        assert p.next_move(_history(), 1) == Move.ROCK

    @pytest.mark.parametrize("seat", [-1, 2, 3])
    def test_bad_seat(self, seat):
        with pytest.raises(SeatError):
            TitForTat("t4t").next_move(_history(), seat)


class TestExternalPlayer:
    def test_uses_supplied_callable(self):
        calls = []

        def counter_last(history, seat):
            calls.append(seat)
            return Move.ROCK if not history else history[-1].opponent_of(seat)

        p = ExternalPlayer("ext", counter_last)
        outcomes = play(p, TitForTat("t4t", rng=ScriptedRng(Move.SCISSORS)), 2)
        assert outcomes == [-1, 1]
        assert calls == [0, 0]

    def test_missing_callable_raises(self):
        p = ExternalPlayer("empty")
        with pytest.raises(UnimplementedStrategyError):
            p.next_move(_history(), 0)
        assert issubclass(UnimplementedStrategyError, NotImplementedError)

    def test_missing_callable_propagates_from_play(self):
        with pytest.raises(UnimplementedStrategyError):
            play(ExternalPlayer("empty"), Random("r"), 1)

    def test_non_move_return_rejected_by_engine(self):
        p = ExternalPlayer("bad", lambda history, seat: 0)
        with pytest.raises(TypeError, match="'bad' returned 0"):
            play(p, Random("r"), 1)

    def test_bad_seat(self):
        p = ExternalPlayer("ext", lambda history, seat: Move.ROCK)
        with pytest.raises(SeatError):
            p.next_move(_history(), 5)


class TestRegistry:
    def test_all_players(self):
        players = get_all_players()
        assert [type(p) for p in players] == ALL_PLAYER_CLASSES
        assert [p.name for p in players] == ["Random", "Tit-for-Tat"]

    @pytest.mark.parametrize("name", ["tit-for-tat", "TitForTat", "TITFORTAT"])
    def test_lookup_case_insensitive(self, name):
        assert isinstance(get_player_by_name(name), TitForTat)

    def test_lookup_with_display_name_and_rng(self):
        rng = random.Random(0)
        p = get_player_by_name("random", player_name="bob", rng=rng)
        assert isinstance(p, Random)
        assert p.name == "bob"
        assert p.rng is rng

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Available: Random, Tit-for-Tat"):
            get_player_by_name("nope")
