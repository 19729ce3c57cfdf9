"""Percentage tie-breaks and Sonneborn-Berger."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from rankings_core.core.config import VirtualByeConfig
from rankings_core.models import Match, MatchResult
from rankings_core.standings.tally import Totals


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def match_win_pct(totals: Totals) -> float:
    """(wins + draws/2) over decisive matches; zero when there are none."""
    return _ratio(totals.wins + 0.5 * totals.draws, totals.decisive_matches)


def game_win_pct(totals: Totals, floor: float) -> float:
    """Game-win percentage counting each bye as a 2-0, never below ``floor``."""
    numerator = totals.game_wins + totals.bye_game_wins + 0.5 * totals.game_draws
    denominator = (
        totals.game_wins + totals.game_losses + totals.game_draws + totals.bye_game_wins
    )
    return max(floor, _ratio(numerator, denominator))


def opponent_pct_excluding(
    subject_id: str, opponent_matches: Sequence[Match], *, games: bool = False
) -> float:
    """An opponent's own MWP (or GWP) with the subject and byes taken out.

    Args:
        subject_id: Competitor whose tie-break is being computed.
        opponent_matches: All of the opponent's records.
        games: Compute the game-win percentage instead of the match-win one.

    Returns:
        Unfloored percentage in [0, 1].
    """
    relevant = [
        m
        for m in opponent_matches
        if m.opponent_id is not None
        and m.opponent_id != subject_id
        and m.result != MatchResult.BYE
    ]
    if games:
        wins = sum(m.game_wins for m in relevant)
        losses = sum(m.game_losses for m in relevant)
        draws = sum(m.game_draws for m in relevant)
    else:
        wins = sum(1 for m in relevant if m.result.is_win)
        losses = sum(1 for m in relevant if m.result.is_loss)
        draws = sum(1 for m in relevant if m.result == MatchResult.DRAW)
    return _ratio(wins + 0.5 * draws, wins + losses + draws)


def average_with_floor(values: Sequence[float], floor: float) -> float:
    """Floor each value, then average. No values at all yields the floor."""
    if not values:
        return floor
    return sum(max(floor, v) for v in values) / len(values)


def virtual_bye_values(byes: int, config: VirtualByeConfig) -> tuple[list[float], list[float]]:
    """Synthetic (OMW, OGW) entries, one per bye, when virtual byes are on."""
    if not config.enabled or byes <= 0:
        return [], []
    return [_clamp01(config.mwp)] * byes, [_clamp01(config.gwp)] * byes


def opponent_percentages(
    subject_id: str,
    opponents: Sequence[str],
    by_player: Mapping[str, Sequence[Match]],
    floor: float,
    *,
    byes: int = 0,
    virtual_bye: VirtualByeConfig | None = None,
) -> tuple[float, float]:
    """OMW% and OGW% for one competitor.

    Each real opponent contributes their record excluding the subject; the
    optional virtual bye adds unweighted synthetic entries alongside them.

    Returns:
        Tuple of (omwp, ogwp), each in [floor, 1].
    """
    omw: list[float] = []
    ogw: list[float] = []
    for opponent_id in opponents:
        opponent_matches = by_player.get(opponent_id, [])
        omw.append(opponent_pct_excluding(subject_id, opponent_matches))
        ogw.append(opponent_pct_excluding(subject_id, opponent_matches, games=True))

    if virtual_bye is not None:
        extra_omw, extra_ogw = virtual_bye_values(byes, virtual_bye)
        omw.extend(extra_omw)
        ogw.extend(extra_ogw)

    return average_with_floor(omw, floor), average_with_floor(ogw, floor)


def sonneborn_berger(matches: Sequence[Match], final_points: Mapping[str, float]) -> float:
    """Sum of opponents' final match points, full for wins and half for draws."""
    score = 0.0
    for match in matches:
        if match.opponent_id is None:
            continue
        opponent_points = final_points.get(match.opponent_id, 0.0)
        if match.result.is_win:
            score += opponent_points
        elif match.result == MatchResult.DRAW:
            score += 0.5 * opponent_points
    return score
