"""Tests for score-group partitioning."""

from rankings_core.models import StandingRow
from rankings_core.pairing.score_groups import group_index, partition_score_groups


def rows(*entries):
    return [
        StandingRow(rank=idx, player_id=pid, match_points=points, omwp=omwp)
        for idx, (pid, points, omwp) in enumerate(entries, start=1)
    ]


class TestPartitionScoreGroups:
    """Tests for partition_score_groups."""

    def test_groups_adjacent_equal_points(self):
        """Test adjacent rows with equal signatures share a group."""
        ranked = rows(("A", 6, 0.5), ("B", 6, 0.5), ("C", 3, 0.5), ("D", 0, 0.5))
        groups = partition_score_groups(ranked)
        assert [[r.player_id for r in g] for g in groups] == [["A", "B"], ["C"], ["D"]]

    def test_signature_splits_on_tiebreaks(self):
        """Test equal points but different OMW% are separate groups by signature."""
        ranked = rows(("A", 6, 0.7), ("B", 6, 0.5))
        assert len(partition_score_groups(ranked)) == 2

    def test_points_grouping_ignores_tiebreaks(self):
        """Test grouping by points merges rows that only differ on tie-breaks."""
        ranked = rows(("A", 6, 0.7), ("B", 6, 0.5))
        assert len(partition_score_groups(ranked, by="points")) == 1

    def test_concatenation_preserves_order(self):
        """Test groups concatenate back to the input."""
        ranked = rows(("A", 9, 0.5), ("B", 6, 0.5), ("C", 6, 0.5), ("D", 3, 0.5), ("E", 3, 0.5))
        groups = partition_score_groups(ranked)
        assert [r for g in groups for r in g] == ranked

    def test_empty(self):
        """Test no rows give no groups."""
        assert partition_score_groups([]) == []


class TestGroupIndex:
    """Tests for group_index."""

    def test_ordinals(self):
        """Test each competitor maps to their group's ordinal."""
        ranked = rows(("A", 6, 0.5), ("B", 6, 0.5), ("C", 3, 0.5))
        assert group_index(ranked) == {"A": 0, "B": 0, "C": 1}
