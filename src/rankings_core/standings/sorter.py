"""Tie-break cascade ordering for standing rows."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import cmp_to_key

import structlog

from rankings_core.core.hashing import fallback_key
from rankings_core.models import Match, MatchResult, StandingRow

logger = structlog.get_logger()

EPSILON = 1e-12
HEAD_TO_HEAD_EPSILON = 1e-9

ROLE_SWISS = "fallback"
ROLE_ROUND_ROBIN = "rr-fallback"
ROLE_SINGLE_ELIMINATION = "single-elim"
ROLE_PAIRING = "pairing-fallback"


def tie_signature(row: StandingRow) -> tuple[float, float, float, float, float]:
    """The five tie-break keys, best first."""
    return (row.match_points, row.omwp, row.gwp, row.ogwp, row.sb)


def compare_rows(a: StandingRow, b: StandingRow) -> int:
    """Order rows by descending signature; 0 when tied within epsilon."""
    if a.match_points != b.match_points:
        return -1 if a.match_points > b.match_points else 1
    for left, right in zip(tie_signature(a)[1:], tie_signature(b)[1:], strict=True):
        if abs(left - right) > EPSILON:
            return -1 if left > right else 1
    return 0


def same_tie_key(a: StandingRow, b: StandingRow) -> bool:
    return compare_rows(a, b) == 0


def head_to_head_order(
    tied: Sequence[str], by_player: Mapping[str, Sequence[Match]]
) -> list[str] | None:
    """Order a tie block by results among its own members.

    A win is worth 1 and a draw 0.5; byes and games against anyone outside the
    block are ignored.

    Args:
        tied: Competitor ids in the tie block.
        by_player: Match records per competitor.

    Returns:
        Ids ordered best first, or None when any two members share a score.
    """
    members = set(tied)
    scores = dict.fromkeys(tied, 0.0)
    for player_id in tied:
        for match in by_player.get(player_id, []):
            if match.opponent_id is None or match.opponent_id not in members:
                continue
            if match.result.is_win:
                scores[player_id] += 1.0
            elif match.result == MatchResult.DRAW:
                scores[player_id] += 0.5

    ordered = sorted(tied, key=lambda pid: -scores[pid])
    for prev, current in zip(ordered, ordered[1:]):
        if abs(scores[prev] - scores[current]) < HEAD_TO_HEAD_EPSILON:
            return None
    return ordered


def _resolve_block(
    block: list[StandingRow],
    by_player: Mapping[str, Sequence[Match]],
    event_id: str,
    role: str,
    apply_head_to_head: bool,
) -> list[StandingRow]:
    if apply_head_to_head:
        order = head_to_head_order([r.player_id for r in block], by_player)
        if order is not None:
            position = {pid: idx for idx, pid in enumerate(order)}
            return sorted(block, key=lambda r: position[r.player_id])

    # Penalties first; the seeded hash settles whatever they leave tied.
    return sorted(
        block, key=lambda r: (r.penalties, fallback_key(event_id, role, r.player_id))
    )


def rank_rows(
    rows: Sequence[StandingRow],
    by_player: Mapping[str, Sequence[Match]],
    *,
    event_id: str,
    role: str,
    apply_head_to_head: bool = True,
) -> list[StandingRow]:
    """Sort rows by the tie-break cascade and assign ranks 1..N.

    Args:
        rows: Unranked rows, one per competitor.
        by_player: Match records per competitor, for head-to-head.
        event_id: Seed for the deterministic fallback.
        role: Fallback role, so different engines shuffle independently.
        apply_head_to_head: Try head-to-head before penalties.

    Returns:
        New list of ranked rows.
    """
    ordered = sorted(rows, key=cmp_to_key(compare_rows))

    resolved: list[StandingRow] = []
    blocks = 0
    i = 0
    while i < len(ordered):
        j = i + 1
        while j < len(ordered) and same_tie_key(ordered[i], ordered[j]):
            j += 1
        block = ordered[i:j]
        if len(block) > 1:
            blocks += 1
            block = _resolve_block(block, by_player, event_id, role, apply_head_to_head)
        resolved.extend(block)
        i = j

    if blocks:
        logger.debug("tie_blocks_resolved", blocks=blocks, role=role, event_id=event_id)
    return [row.with_rank(idx) for idx, row in enumerate(resolved, start=1)]
