"""Assemble unranked standing rows from a match index."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from rankings_core.core.config import PointsConfig, VirtualByeConfig
from rankings_core.models import Match, StandingRow
from rankings_core.standings.opponents import (
    game_win_pct,
    match_win_pct,
    opponent_percentages,
    sonneborn_berger,
)
from rankings_core.standings.tally import Totals, tally


def build_rows(
    by_player: Mapping[str, Sequence[Match]],
    points: PointsConfig,
    floor: float,
    virtual_bye: VirtualByeConfig | None = None,
) -> list[StandingRow]:
    """Compute every tie-break for every competitor, without ranks.

    Tallies are computed first because Sonneborn-Berger needs the whole
    field's final match points.

    Args:
        by_player: Chronological records per competitor.
        points: Points map.
        floor: Percentage floor for GWP, OMW% and OGW%.
        virtual_bye: Optional synthetic opponent per bye for OMW%/OGW%.

    Returns:
        One row per competitor, in the index's key order.
    """
    totals: dict[str, Totals] = {pid: tally(ms, points) for pid, ms in by_player.items()}
    final_points = {pid: t.match_points for pid, t in totals.items()}

    rows: list[StandingRow] = []
    for pid, t in totals.items():
        omwp, ogwp = opponent_percentages(
            pid, t.opponents, by_player, floor, byes=t.byes, virtual_bye=virtual_bye
        )
        rows.append(
            StandingRow(
                player_id=pid,
                match_points=t.match_points,
                mwp=match_win_pct(t),
                gwp=game_win_pct(t, floor),
                omwp=omwp,
                ogwp=ogwp,
                sb=sonneborn_berger(by_player[pid], final_points),
                wins=t.wins,
                losses=t.losses,
                draws=t.draws,
                byes=t.byes,
                rounds_played=t.rounds_played,
                game_wins=t.game_wins + t.bye_game_wins,
                game_losses=t.game_losses,
                game_draws=t.game_draws,
                penalties=t.penalties,
                opponents=tuple(t.opponents),
            )
        )
    return rows
