"""Swiss standings: match points with the MWP/OMW%/GWP/OGW%/SB cascade."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from rankings_core.core.config import SwissStandingsOptions, coerce_options
from rankings_core.models import Match, StandingRow
from rankings_core.standings.builder import build_rows
from rankings_core.standings.match_index import group_by_player, mirror_single_entries
from rankings_core.standings.sorter import ROLE_SWISS, rank_rows

logger = structlog.get_logger()


def compute_swiss_standings(
    matches: Sequence[Match],
    options: SwissStandingsOptions | dict[str, Any] | None = None,
) -> list[StandingRow]:
    """Rank every competitor that appears in the match history.

    Args:
        matches: Directed match records (mirrored pairs unless
            ``accept_single_entry_matches`` is set).
        options: Swiss standings options; missing values use defaults.

    Returns:
        Standing rows ordered by rank.
    """
    opts = coerce_options(SwissStandingsOptions, options)
    records = mirror_single_entries(matches) if opts.accept_single_entry_matches else matches

    by_player = group_by_player(records)
    rows = build_rows(
        by_player,
        opts.points,
        opts.tiebreak_floors.opponent_pct_floor,
        virtual_bye=opts.tiebreak_virtual_bye,
    )
    ranked = rank_rows(
        rows,
        by_player,
        event_id=opts.event_id,
        role=ROLE_SWISS,
        apply_head_to_head=opts.apply_head_to_head,
    )
    logger.debug(
        "standings_computed",
        mode="swiss",
        event_id=opts.event_id,
        competitors=len(ranked),
        matches=len(records),
    )
    return ranked
