"""Pairing engines with a facade dispatching on mode."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rankings_core.core.config import PairingOptions, RoundRobinOptions
from rankings_core.core.errors import ConfigurationError, UnsupportedModeError
from rankings_core.models import Match, PairingResult, StandingRow
from rankings_core.pairing.roundrobin import build_round_robin_schedule, get_round_robin_round
from rankings_core.pairing.score_groups import group_index, partition_score_groups
from rankings_core.pairing.swiss import SwissMatcher, generate_swiss_pairings

PAIRING_MODES = ("swiss", "roundrobin")


def generate_pairings(
    mode: str,
    *,
    standings: Sequence[StandingRow] | None = None,
    history: Sequence[Match] | None = None,
    competitors: Sequence[str] | None = None,
    round_number: int | None = None,
    options: PairingOptions | RoundRobinOptions | dict[str, Any] | None = None,
) -> PairingResult:
    """Generate pairings for the next round.

    Swiss mode needs ``standings`` and ``history``; round-robin mode needs
    ``competitors`` and ``round_number``. Round-robin results report the
    round's single bye (if any) as ``bye`` and carry no downfloats.

    Raises:
        UnsupportedModeError: If mode is not "swiss" or "roundrobin".
        ConfigurationError: If round-robin mode is missing ``round_number``.
    """
    if mode == "swiss":
        return generate_swiss_pairings(standings or [], history or [], options)
    if mode == "roundrobin":
        if round_number is None:
            raise ConfigurationError(
                "Round-robin pairing needs a round number",
                "Pass round_number (1-based).",
            )
        rd = get_round_robin_round(competitors or [], round_number, options)
        return PairingResult(pairings=rd.pairings, bye=rd.byes[0] if rd.byes else None)
    raise UnsupportedModeError("pairing", mode, PAIRING_MODES)


__all__ = [
    "PAIRING_MODES",
    "SwissMatcher",
    "build_round_robin_schedule",
    "generate_pairings",
    "generate_swiss_pairings",
    "get_round_robin_round",
    "group_index",
    "partition_score_groups",
]
