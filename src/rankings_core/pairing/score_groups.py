"""Split a ranked list into adjacent score groups."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from rankings_core.models import StandingRow
from rankings_core.standings.sorter import same_tie_key

GroupBy = Literal["signature", "points"]


def _same_group(a: StandingRow, b: StandingRow, by: GroupBy) -> bool:
    if by == "points":
        return a.match_points == b.match_points
    return same_tie_key(a, b)


def partition_score_groups(
    rows: Sequence[StandingRow], by: GroupBy = "signature"
) -> list[list[StandingRow]]:
    """Group adjacent ranked rows that share a tie signature.

    Args:
        rows: Rows in rank order.
        by: "signature" compares all five tie-break keys; "points" compares
            match points only.

    Returns:
        Groups in rank order; concatenating them gives back ``rows``.
    """
    groups: list[list[StandingRow]] = []
    for row in rows:
        if groups and _same_group(groups[-1][0], row, by):
            groups[-1].append(row)
        else:
            groups.append([row])
    return groups


def group_index(rows: Sequence[StandingRow], by: GroupBy = "signature") -> dict[str, int]:
    """Map each competitor to the ordinal of their natural score group."""
    return {
        row.player_id: ordinal
        for ordinal, group in enumerate(partition_score_groups(rows, by))
        for row in group
    }
