"""OpenSkill (Plackett-Luce) rating updates."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import structlog
from openskill.models import PlackettLuce

from rankings_core.core.config import OpenSkillOptions, coerce_options
from rankings_core.models import EloMatch, OpenSkillUpdate

logger = structlog.get_logger()


def ordinal(mu: float, sigma: float) -> float:
    """Conservative skill estimate (mu - 3*sigma)."""
    return mu - 3 * sigma


def update_openskill_ratings(
    base: Mapping[str, float | tuple[float, float]],
    matches: Sequence[EloMatch],
    options: OpenSkillOptions | dict[str, Any] | None = None,
) -> OpenSkillUpdate:
    """Apply a batch of head-to-head matches with the Plackett-Luce model.

    Matches are rated one after another. A weight below 1.0 widens both
    players' sigma before rating, marking the result as less certain.

    Args:
        base: Current skills per competitor, either a (mu, sigma) pair or a
            bare mu that takes the initial sigma.
        matches: Matches to apply, in order.
        options: Initial mu and sigma for unseen competitors.

    Returns:
        OpenSkillUpdate with ordinals as ``ratings``, ordinal change as
        ``deltas`` and the posterior (mu, sigma) per competitor.
    """
    opts = coerce_options(OpenSkillOptions, options)
    initial_sigma = opts.initial_sigma if opts.initial_sigma else opts.initial_mu / 3.0
    model = PlackettLuce()

    skills: dict[str, tuple[float, float]] = {}
    for pid, value in base.items():
        if isinstance(value, (tuple, list)):
            skills[pid] = (float(value[0]), float(value[1]))
        else:
            skills[pid] = (float(value), initial_sigma)

    def skill(player_id: str) -> tuple[float, float]:
        return skills.get(player_id, (opts.initial_mu, initial_sigma))

    before = {pid: ordinal(*s) for pid, s in skills.items()}

    for match in matches:
        (mu_a, sigma_a), (mu_b, sigma_b) = skill(match.a), skill(match.b)
        if match.weight < 1.0:
            sigma_scale = 1.0 + (1.0 - match.weight) * 0.5
            sigma_a *= sigma_scale
            sigma_b *= sigma_scale

        rating_a = model.rating(mu=mu_a, sigma=sigma_a)
        rating_b = model.rating(mu=mu_b, sigma=sigma_b)

        # Lower rank is better; equal ranks are a draw
        if match.result == "A":
            ranks = [1, 2]
        elif match.result == "B":
            ranks = [2, 1]
        else:
            ranks = [1, 1]
        new_ratings = model.rate([[rating_a], [rating_b]], ranks=ranks)

        skills[match.a] = (new_ratings[0][0].mu, new_ratings[0][0].sigma)
        skills[match.b] = (new_ratings[1][0].mu, new_ratings[1][0].sigma)

    ratings = {pid: ordinal(*s) for pid, s in skills.items()}
    deltas = {
        pid: ratings[pid] - before.get(pid, ordinal(opts.initial_mu, initial_sigma))
        for match in matches
        for pid in (match.a, match.b)
    }
    logger.debug("openskill_updated", matches=len(matches))
    return OpenSkillUpdate(mode="openskill", ratings=ratings, deltas=deltas, skills=skills)
