"""Rating engines with a facade dispatching on mode."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from rankings_core.core.config import EloOptions, OpenSkillOptions
from rankings_core.core.errors import UnsupportedModeError
from rankings_core.models import EloMatch, RatingUpdate
from rankings_core.ratings.elo import expected_score, update_elo_ratings
from rankings_core.ratings.openskill import ordinal, update_openskill_ratings

RATING_MODES = ("elo", "openskill")


def update_ratings(
    mode: str,
    base: Mapping[str, Any] | None,
    matches: Sequence[EloMatch],
    options: EloOptions | OpenSkillOptions | dict[str, Any] | None = None,
) -> RatingUpdate:
    """Update ratings with the selected model.

    Raises:
        UnsupportedModeError: If mode is not "elo" or "openskill".
    """
    if mode == "elo":
        return update_elo_ratings(base or {}, matches, options)
    if mode == "openskill":
        return update_openskill_ratings(base or {}, matches, options)
    raise UnsupportedModeError("rating", mode, RATING_MODES)


__all__ = [
    "RATING_MODES",
    "expected_score",
    "ordinal",
    "update_elo_ratings",
    "update_openskill_ratings",
    "update_ratings",
]
