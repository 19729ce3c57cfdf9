"""Shared fixtures for building standings and match histories."""

import pytest
import structlog

from rankings_core.models import Match, MatchResult, StandingRow


def played(
    round_number: int,
    player_id: str,
    opponent_id: str,
    result: MatchResult = MatchResult.WIN,
    games: tuple[int, int, int] = (2, 0, 0),
) -> list[Match]:
    """Both directed records for one match, from ``player_id``'s side."""
    wins, losses, draws = games
    record = Match(
        id=f"r{round_number}-{player_id}-{opponent_id}",
        player_id=player_id,
        opponent_id=opponent_id,
        round=round_number,
        result=result,
        game_wins=wins,
        game_losses=losses,
        game_draws=draws,
    )
    return [record, record.mirrored()]


def bye(round_number: int, player_id: str) -> Match:
    return Match(
        id=f"r{round_number}-{player_id}-bye",
        player_id=player_id,
        round=round_number,
        result=MatchResult.BYE,
    )


@pytest.fixture
def make_standings():
    """Factory for ranked rows from (player_id, match_points) pairs, best first."""

    def _make(entries: list[tuple[str, float]]) -> list[StandingRow]:
        return [
            StandingRow(rank=idx, player_id=pid, match_points=points)
            for idx, (pid, points) in enumerate(entries, start=1)
        ]

    return _make


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
