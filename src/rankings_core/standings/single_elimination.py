"""Single-elimination standings: ranked by how deep each competitor went."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key
from typing import Any

import structlog

from rankings_core.core.config import SingleEliminationOptions, coerce_options
from rankings_core.core.hashing import fallback_key
from rankings_core.models import EliminationStandingRow, Match
from rankings_core.standings.match_index import group_by_player
from rankings_core.standings.sorter import ROLE_SINGLE_ELIMINATION

logger = structlog.get_logger()


def _elimination_round(matches: Sequence[Match], final_round: int) -> int:
    if not matches:
        return 0
    last = matches[-1]
    if last.round == final_round and last.result.is_win:
        return final_round + 1
    return last.round


def compute_single_elimination_standings(
    matches: Sequence[Match],
    options: SingleEliminationOptions | dict[str, Any] | None = None,
) -> list[EliminationStandingRow]:
    """Rank a knockout field.

    Deeper runs rank higher; the champion (winner of the final round) sits
    one round past the final. Ties go to the better seed, with seeded
    competitors ahead of unseeded ones, then to fewer penalties, then to the
    seeded hash.

    Args:
        matches: Directed match records for the bracket.
        options: Seeding and event id; ``use_bronze_match`` has no effect.

    Returns:
        Elimination rows ordered by rank.
    """
    opts = coerce_options(SingleEliminationOptions, options)
    by_player = group_by_player(matches)
    final_round = max((m.round for m in matches), default=0)

    rows: list[EliminationStandingRow] = []
    for pid, ms in by_player.items():
        wins = sum(1 for m in ms if m.result.is_win)
        rows.append(
            EliminationStandingRow(
                player_id=pid,
                match_points=float(wins),
                wins=wins,
                losses=sum(1 for m in ms if m.result.is_loss),
                rounds_played=len(ms),
                game_wins=sum(m.game_wins for m in ms),
                game_losses=sum(m.game_losses for m in ms),
                game_draws=sum(m.game_draws for m in ms),
                penalties=sum(m.penalties for m in ms),
                opponents=tuple(m.opponent_id for m in ms if m.opponent_id is not None),
                elim_round=_elimination_round(ms, final_round),
            )
        )

    def compare(a: EliminationStandingRow, b: EliminationStandingRow) -> int:
        if a.elim_round != b.elim_round:
            return b.elim_round - a.elim_round
        seed_a = opts.seeding.get(a.player_id)
        seed_b = opts.seeding.get(b.player_id)
        if seed_a is not None and seed_b is not None:
            if seed_a != seed_b:
                return seed_a - seed_b
        elif seed_a is not None or seed_b is not None:
            # Seeded competitors rank ahead of unseeded ones.
            return -1 if seed_a is not None else 1
        if a.penalties != b.penalties:
            return a.penalties - b.penalties
        key_a = fallback_key(opts.event_id, ROLE_SINGLE_ELIMINATION, a.player_id)
        key_b = fallback_key(opts.event_id, ROLE_SINGLE_ELIMINATION, b.player_id)
        return (key_a > key_b) - (key_a < key_b)

    ranked = [
        row.with_rank(idx)
        for idx, row in enumerate(sorted(rows, key=cmp_to_key(compare)), start=1)
    ]
    logger.debug(
        "standings_computed",
        mode="singleelimination",
        event_id=opts.event_id,
        competitors=len(ranked),
    )
    return ranked
