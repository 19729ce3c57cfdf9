"""Tests for round-robin schedules and the pairing facade."""

from itertools import combinations

import pytest

from rankings_core.core.errors import (
    ConfigurationError,
    OddCompetitorCountError,
    RoundOutOfRangeError,
    UnsupportedModeError,
)
from rankings_core.models import Pairing
from rankings_core.pairing import (
    build_round_robin_schedule,
    generate_pairings,
    get_round_robin_round,
)


def all_pairs(schedule):
    return [frozenset((p.a, p.b)) for rd in schedule.rounds for p in rd.pairings]


class TestBuildRoundRobinSchedule:
    """Tests for build_round_robin_schedule."""

    def test_four_players(self):
        """Test four players give three rounds of two pairings covering every pair once."""
        schedule = build_round_robin_schedule(["A", "B", "C", "D"])
        assert [rd.round for rd in schedule.rounds] == [1, 2, 3]
        assert all(len(rd.pairings) == 2 and rd.byes == [] for rd in schedule.rounds)
        pairs = all_pairs(schedule)
        assert len(pairs) == 6
        assert set(pairs) == {frozenset(c) for c in combinations("ABCD", 2)}

    def test_circle_method_first_round(self):
        """Test the first round pairs the ends of the list inward."""
        schedule = build_round_robin_schedule(["A", "B", "C", "D"])
        assert schedule.rounds[0].pairings == [Pairing(a="A", b="D"), Pairing(a="B", b="C")]

    def test_each_player_once_per_round(self):
        """Test nobody appears twice in a round."""
        players = [f"p{i}" for i in range(10)]
        for rd in build_round_robin_schedule(players).rounds:
            seen = [pid for p in rd.pairings for pid in (p.a, p.b)]
            assert sorted(seen) == sorted(players)

    def test_odd_field_one_bye_each(self):
        """Test an odd field gives every competitor exactly one bye."""
        players = ["A", "B", "C", "D", "E"]
        schedule = build_round_robin_schedule(players)
        assert len(schedule.rounds) == 5
        byes = [pid for rd in schedule.rounds for pid in rd.byes]
        assert sorted(byes) == players
        assert all(len(rd.byes) == 1 for rd in schedule.rounds)
        assert len(set(all_pairs(schedule))) == 10

    def test_odd_field_without_bye_fails(self):
        """Test an odd field raises when byes are disabled."""
        with pytest.raises(OddCompetitorCountError):
            build_round_robin_schedule(["A", "B", "C"], {"include_bye": False})

    def test_double_round_robin(self):
        """Test the second leg mirrors the first with sides swapped."""
        schedule = build_round_robin_schedule(["A", "B", "C", "D"], {"double": True})
        assert len(schedule.rounds) == 6
        first, fourth = schedule.rounds[0], schedule.rounds[3]
        assert fourth.round == 4
        assert fourth.pairings == [Pairing(a=p.b, b=p.a) for p in first.pairings]

    def test_shuffle_seed_deterministic(self):
        """Test the same seed gives the same schedule and still covers every pair."""
        players = [f"p{i}" for i in range(6)]
        one = build_round_robin_schedule(players, {"shuffle_seed": "league"})
        two = build_round_robin_schedule(players, {"shuffle_seed": "league"})
        assert one == two
        assert len(set(all_pairs(one))) == 15

    def test_trivial_fields(self):
        """Test fewer than two competitors give one empty round."""
        assert build_round_robin_schedule([]).rounds[0].pairings == []
        single = build_round_robin_schedule(["A"]).rounds
        assert len(single) == 1
        assert single[0].byes == ["A"]


class TestGetRoundRobinRound:
    """Tests for get_round_robin_round."""

    def test_returns_round(self):
        """Test a valid round number returns that round."""
        rd = get_round_robin_round(["A", "B", "C", "D"], 2)
        assert rd.round == 2

    @pytest.mark.parametrize("round_number", [0, 4])
    def test_out_of_range(self, round_number):
        """Test rounds outside 1..N-1 raise."""
        with pytest.raises(RoundOutOfRangeError) as exc_info:
            get_round_robin_round(["A", "B", "C", "D"], round_number)
        assert exc_info.value.total == 3


class TestGeneratePairings:
    """Tests for the pairing facade."""

    def test_roundrobin_mode(self):
        """Test round-robin mode returns the round's pairings and bye."""
        result = generate_pairings("roundrobin", competitors=["A", "B", "C"], round_number=1)
        assert result.pairings == [Pairing(a="B", b="C")]
        assert result.bye == "A"

    def test_roundrobin_needs_round(self):
        """Test round-robin mode without a round number raises."""
        with pytest.raises(ConfigurationError):
            generate_pairings("roundrobin", competitors=["A", "B"])

    def test_swiss_mode(self, make_standings):
        """Test swiss mode reaches the Swiss matcher."""
        standings = make_standings([("A", 0), ("B", 0)])
        result = generate_pairings("swiss", standings=standings, history=[])
        assert result.pairings == [Pairing(a="A", b="B")]

    def test_unknown_mode(self):
        """Test an unknown mode raises UnsupportedModeError."""
        with pytest.raises(UnsupportedModeError) as exc_info:
            generate_pairings("knockout")
        assert exc_info.value.mode == "knockout"
