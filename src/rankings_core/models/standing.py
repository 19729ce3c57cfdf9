from typing import Self

from pydantic import BaseModel, ConfigDict


class StandingRow(BaseModel):
    """Derived standing for one competitor.

    Every field except ``rank`` comes from the match history alone; rank is
    assigned after sorting by copying the row.
    """

    model_config = ConfigDict(frozen=True)

    rank: int = 0
    player_id: str
    match_points: float = 0.0
    mwp: float = 0.0
    gwp: float = 0.0
    omwp: float = 0.0
    ogwp: float = 0.0
    sb: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    byes: int = 0
    rounds_played: int = 0
    game_wins: int = 0  # includes 2 synthetic game wins per bye
    game_losses: int = 0
    game_draws: int = 0
    penalties: int = 0
    opponents: tuple[str, ...] = ()

    def with_rank(self, rank: int) -> Self:
        return self.model_copy(update={"rank": rank})


class EliminationStandingRow(StandingRow):
    """Single-elimination row; ``elim_round`` is final round + 1 for the champion."""

    elim_round: int = 0
