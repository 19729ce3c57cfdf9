"""Standings engines with a facade dispatching on mode."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rankings_core.core.config import (
    RoundRobinStandingsOptions,
    SingleEliminationOptions,
    SwissStandingsOptions,
)
from rankings_core.core.errors import UnsupportedModeError
from rankings_core.models import Match, StandingRow
from rankings_core.standings.roundrobin import compute_round_robin_standings
from rankings_core.standings.single_elimination import compute_single_elimination_standings
from rankings_core.standings.sorter import rank_rows, same_tie_key, tie_signature
from rankings_core.standings.swiss import compute_swiss_standings

STANDINGS_MODES = ("swiss", "roundrobin", "singleelimination")


def compute_standings(
    matches: Sequence[Match],
    mode: str = "swiss",
    options: SwissStandingsOptions
    | RoundRobinStandingsOptions
    | SingleEliminationOptions
    | dict[str, Any]
    | None = None,
) -> list[StandingRow]:
    """Compute ranked standings for the given tournament format.

    Args:
        matches: Directed match records.
        mode: "swiss", "roundrobin" or "singleelimination".
        options: Mode-specific options (model or mapping).

    Returns:
        Standing rows ordered by rank.

    Raises:
        UnsupportedModeError: If mode is not one of the supported formats.
    """
    if mode == "swiss":
        return compute_swiss_standings(matches, options)
    if mode == "roundrobin":
        return compute_round_robin_standings(matches, options)
    if mode == "singleelimination":
        return list(compute_single_elimination_standings(matches, options))
    raise UnsupportedModeError("standings", mode, STANDINGS_MODES)


__all__ = [
    "STANDINGS_MODES",
    "compute_round_robin_standings",
    "compute_single_elimination_standings",
    "compute_standings",
    "compute_swiss_standings",
    "rank_rows",
    "same_tie_key",
    "tie_signature",
]
