"""Elo rating updates."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

import structlog

from rankings_core.core.config import EloOptions, coerce_options
from rankings_core.models import EloMatch, RatingUpdate

logger = structlog.get_logger()


def expected_score(rating_a: float, rating_b: float) -> float:
    """Calculate the expected score of player A against player B.

    Uses the standard Elo formula:
    E_A = 1 / (1 + 10^((R_B - R_A) / 400))

    Args:
        rating_a: Rating of player A.
        rating_b: Rating of player B.

    Returns:
        Expected score for A (0.0 to 1.0).
    """
    return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / 400))


def _expected_with_backend(
    backend: Callable[[float, float], float] | None,
) -> Callable[[float, float], float]:
    if backend is None:
        return expected_score

    def expected(rating_a: float, rating_b: float) -> float:
        try:
            return float(backend(rating_a, rating_b))
        except Exception as e:
            logger.warning("expected_score_backend_failed", error=str(e))
            return expected_score(rating_a, rating_b)

    return expected


class _Ledger:
    """Stored ratings plus accumulated deltas for one update batch."""

    def __init__(self, base: Mapping[str, float], opts: EloOptions) -> None:
        self.opts = opts
        self.ratings: dict[str, float] = dict(base)
        self.deltas: dict[str, float] = {}

    def get(self, player_id: str) -> float:
        return self.ratings.get(player_id, self.opts.initial_rating)

    def apply(self, player_id: str, delta: float) -> None:
        after = self.get(player_id) + delta
        if self.opts.floor is not None:
            after = max(self.opts.floor, after)
        if self.opts.cap is not None:
            after = min(self.opts.cap, after)
        self.ratings[player_id] = after
        self.deltas[player_id] = self.deltas.get(player_id, 0.0) + delta


def update_elo_ratings(
    base: Mapping[str, float],
    matches: Sequence[EloMatch],
    options: EloOptions | dict[str, Any] | None = None,
) -> RatingUpdate:
    """Apply a batch of matches to a ratings map.

    In "sequential" mode each match sees the ratings left by the previous
    one. In "simultaneous" mode every match is rated against the ratings as
    they stood before the batch, so order within the batch does not matter.

    Args:
        base: Current ratings; missing players start at ``initial_rating``.
        matches: Matches to apply, in order.
        options: K-factors, clamping, mode and optional expected-score backend.

    Returns:
        RatingUpdate with every rating (base players included) and the
        summed, unclamped delta for each player who played.
    """
    opts = coerce_options(EloOptions, options)
    k_draw = opts.k if opts.k_draw is None else opts.k_draw
    expected = _expected_with_backend(opts.expected_score)

    ledger = _Ledger(base, opts)
    snapshot = dict(base)

    def rating_before(player_id: str) -> float:
        if opts.mode == "simultaneous":
            return snapshot.get(player_id, opts.initial_rating)
        return ledger.get(player_id)

    for match in matches:
        rating_a = rating_before(match.a)
        rating_b = rating_before(match.b)

        expected_a = expected(rating_a, rating_b)
        expected_b = 1.0 - expected_a

        if match.result == "A":
            actual_a = 1.0
        elif match.result == "B":
            actual_a = 0.0
        else:
            actual_a = opts.draw_score
        actual_b = 1.0 - actual_a

        base_k = k_draw if match.result == "draw" else opts.k
        k_a = opts.per_player_k.get(match.a, base_k)
        k_b = opts.per_player_k.get(match.b, base_k)

        ledger.apply(match.a, match.weight * k_a * (actual_a - expected_a))
        ledger.apply(match.b, match.weight * k_b * (actual_b - expected_b))

    logger.debug("elo_updated", matches=len(matches), mode=opts.mode)
    return RatingUpdate(mode="elo", ratings=ledger.ratings, deltas=ledger.deltas)
