"""Round-robin standings with strict mirrored-entry checking."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from rankings_core.core.config import RoundRobinStandingsOptions, coerce_options
from rankings_core.core.errors import MissingMirrorError
from rankings_core.models import Match, StandingRow
from rankings_core.standings.builder import build_rows
from rankings_core.standings.match_index import (
    find_missing_mirrors,
    group_by_player,
    mirror_single_entries,
)
from rankings_core.standings.sorter import ROLE_ROUND_ROBIN, rank_rows

logger = structlog.get_logger()


def compute_round_robin_standings(
    matches: Sequence[Match],
    options: RoundRobinStandingsOptions | dict[str, Any] | None = None,
) -> list[StandingRow]:
    """Rank a round-robin field.

    Every real pairing must be recorded from both sides. A one-sided record
    is an error unless ``accept_single_entry_matches`` is set, in which case
    the missing side is reconstructed.

    Args:
        matches: Directed match records.
        options: Round-robin standings options.

    Returns:
        Standing rows ordered by rank.

    Raises:
        MissingMirrorError: If a mirror is missing in strict mode.
    """
    opts = coerce_options(RoundRobinStandingsOptions, options)

    missing = find_missing_mirrors(matches)
    if missing and not opts.accept_single_entry_matches:
        first = missing[0]
        raise MissingMirrorError(first.player_id, first.opponent_id or "", first.round)

    records = matches
    if missing:
        records = mirror_single_entries(matches)
        logger.info(
            "mirrors_reconstructed",
            count=len(records) - len(matches),
            event_id=opts.event_id,
        )

    by_player = group_by_player(records)
    rows = build_rows(by_player, opts.points, opts.tiebreak_floors.opponent_pct_floor)
    ranked = rank_rows(
        rows,
        by_player,
        event_id=opts.event_id,
        role=ROLE_ROUND_ROBIN,
        apply_head_to_head=opts.apply_head_to_head,
    )
    logger.debug(
        "standings_computed",
        mode="roundrobin",
        event_id=opts.event_id,
        competitors=len(ranked),
        matches=len(records),
    )
    return ranked
