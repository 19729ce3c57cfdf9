"""Reduce a competitor's match list into counts and match points."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rankings_core.core.config import PointsConfig
from rankings_core.models import Match, MatchResult

BYE_GAME_WINS = 2


@dataclass
class Totals:
    """Accumulated record for one competitor.

    ``game_wins`` holds games actually won; byes are kept apart in ``byes``
    and only turned into synthetic 2-0 game wins where a row is assembled.
    """

    wins: int = 0
    losses: int = 0
    draws: int = 0
    byes: int = 0
    match_points: float = 0.0
    game_wins: int = 0
    game_losses: int = 0
    game_draws: int = 0
    penalties: int = 0
    rounds_played: int = 0
    opponents: list[str] = field(default_factory=list)

    @property
    def decisive_matches(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def bye_game_wins(self) -> int:
        return BYE_GAME_WINS * self.byes


def points_for(result: MatchResult, points: PointsConfig) -> float:
    """Match points for one outcome; forfeits score as a win or a loss."""
    if result.is_win:
        return points.win
    if result.is_loss:
        return points.loss
    if result == MatchResult.DRAW:
        return points.draw
    return points.bye


def tally(matches: Sequence[Match], points: PointsConfig) -> Totals:
    """Sum a competitor's chronological match list.

    Args:
        matches: The competitor's own records, oldest first.
        points: Points map for each outcome.

    Returns:
        Totals for the competitor. An empty list gives all zeros.
    """
    totals = Totals()
    for match in matches:
        totals.match_points += points_for(match.result, points)
        totals.rounds_played += 1

        if match.result.is_win:
            totals.wins += 1
        elif match.result.is_loss:
            totals.losses += 1
        elif match.result == MatchResult.DRAW:
            totals.draws += 1
        else:
            totals.byes += 1

        totals.game_wins += match.game_wins
        totals.game_losses += match.game_losses
        totals.game_draws += match.game_draws
        totals.penalties += match.penalties

        if match.opponent_id is not None:
            totals.opponents.append(match.opponent_id)
    return totals
