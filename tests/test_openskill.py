"""Tests for OpenSkill rating updates."""

import pytest

from rankings_core.models import EloMatch, OpenSkillUpdate
from rankings_core.ratings import ordinal, update_openskill_ratings


class TestOrdinal:
    """Tests for the ordinal helper."""

    def test_default_rating_is_zero(self):
        """Test ordinal of the default rating (mu - 3*sigma)."""
        # ordinal = 25 - 3 * (25/3) = 25 - 25 = 0
        assert ordinal(25.0, 25.0 / 3.0) == pytest.approx(0.0, abs=0.01)


class TestUpdateOpenSkillRatings:
    """Tests for update_openskill_ratings."""

    def test_winner_gains_loser_loses(self):
        """Test the winner's ordinal rises and the loser's falls."""
        result = update_openskill_ratings({}, [EloMatch(a="A", b="B", result="A")])
        assert isinstance(result, OpenSkillUpdate)
        assert result.ratings["A"] > result.ratings["B"]
        assert result.skills["A"][0] > 25.0
        assert result.skills["B"][0] < 25.0
        assert result.deltas["A"] > 0

    def test_result_b(self):
        """Test result "B" credits the second player."""
        result = update_openskill_ratings({}, [EloMatch(a="A", b="B", result="B")])
        assert result.skills["B"][0] > result.skills["A"][0]

    def test_uncertainty_shrinks(self):
        """Test sigma decreases after a rated game."""
        result = update_openskill_ratings({}, [EloMatch(a="A", b="B", result="draw")])
        for pid in "AB":
            assert result.skills[pid][1] < 25.0 / 3.0

    def test_base_accepts_pairs_and_bare_mu(self):
        """Test base skills may be (mu, sigma) pairs or a bare mu."""
        result = update_openskill_ratings({"A": (30.0, 2.0), "B": 20.0, "Z": 27.0}, [])
        assert result.skills["A"] == (30.0, 2.0)
        assert result.skills["B"] == pytest.approx((20.0, 25.0 / 3.0))
        assert result.ratings["A"] == pytest.approx(24.0)
        assert result.deltas == {}

    def test_initial_options(self):
        """Test unseen players start from the configured mu and sigma."""
        result = update_openskill_ratings(
            {}, [EloMatch(a="A", b="B", result="A")], {"initial_mu": 30.0, "initial_sigma": 5.0}
        )
        assert result.skills["A"][0] > 30.0
        assert result.deltas["A"] == pytest.approx(result.ratings["A"] - ordinal(30.0, 5.0))

    def test_more_wins_rank_higher(self):
        """Test a player who keeps winning ends on top."""
        matches = [
            EloMatch(a="A", b="B", result="A"),
            EloMatch(a="A", b="C", result="A"),
            EloMatch(a="B", b="C", result="B"),
        ]
        ratings = update_openskill_ratings({}, matches).ratings
        assert sorted(ratings, key=ratings.get, reverse=True) == ["A", "B", "C"]
