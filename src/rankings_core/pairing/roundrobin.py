"""Round-robin schedules built with the circle method."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

import structlog

from rankings_core.core.config import RoundRobinOptions, coerce_options
from rankings_core.core.errors import OddCompetitorCountError, RoundOutOfRangeError
from rankings_core.core.hashing import fnv1a
from rankings_core.models import Pairing, RoundDefinition, RoundRobinSchedule

logger = structlog.get_logger()

BYE_SLOT = "__BYE__"


def _shuffled(competitors: Sequence[str], seed: str) -> list[str]:
    players = list(competitors)
    random.Random(fnv1a(f"rr::{seed}")).shuffle(players)  # noqa: S311
    return players


def build_round_robin_schedule(
    competitors: Sequence[str],
    options: RoundRobinOptions | dict[str, Any] | None = None,
) -> RoundRobinSchedule:
    """Build a full single or double round-robin.

    Index 0 stays fixed while the rest rotate one step per round. An odd field
    gets a synthetic bye slot; whoever meets it sits out that round.

    Args:
        competitors: Competitor ids in seeding order.
        options: Double leg, deterministic shuffle seed, bye handling.

    Returns:
        Schedule with ``n - 1`` rounds (``n`` rounded up to even), doubled
        when requested.

    Raises:
        OddCompetitorCountError: If the field is odd and byes are disabled.
    """
    opts = coerce_options(RoundRobinOptions, options)

    if len(competitors) < 2:
        return RoundRobinSchedule(
            rounds=[RoundDefinition(round=1, pairings=[], byes=list(competitors))]
        )

    players = _shuffled(competitors, opts.shuffle_seed) if opts.shuffle_seed else list(competitors)
    if len(players) % 2 == 1:
        if not opts.include_bye:
            raise OddCompetitorCountError(len(players))
        players.append(BYE_SLOT)

    n = len(players)
    rounds: list[RoundDefinition] = []
    for number in range(1, n):
        pairings: list[Pairing] = []
        byes: list[str] = []
        for i in range(n // 2):
            a, b = players[i], players[n - 1 - i]
            if BYE_SLOT in (a, b):
                byes.append(b if a == BYE_SLOT else a)
            else:
                pairings.append(Pairing(a=a, b=b))
        rounds.append(RoundDefinition(round=number, pairings=pairings, byes=byes))
        players = [players[0], players[-1], *players[1:-1]]

    if opts.double:
        rounds += [
            RoundDefinition(
                round=rd.round + n - 1,
                pairings=[Pairing(a=p.b, b=p.a) for p in rd.pairings],
                byes=list(rd.byes),
            )
            for rd in rounds
        ]

    logger.debug(
        "round_robin_scheduled",
        competitors=len(competitors),
        rounds=len(rounds),
        double=opts.double,
    )
    return RoundRobinSchedule(rounds=rounds)


def get_round_robin_round(
    competitors: Sequence[str],
    round_number: int,
    options: RoundRobinOptions | dict[str, Any] | None = None,
) -> RoundDefinition:
    """Return one round (1-based) of the schedule.

    Raises:
        RoundOutOfRangeError: If ``round_number`` is outside the schedule.
    """
    schedule = build_round_robin_schedule(competitors, options)
    if not 1 <= round_number <= len(schedule.rounds):
        raise RoundOutOfRangeError(round_number, len(schedule.rounds))
    return schedule.rounds[round_number - 1]
