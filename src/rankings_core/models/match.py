from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MatchResult(StrEnum):
    """Outcome of one directed match record, from the owner's side."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"
    BYE = "bye"
    FORFEIT_WIN = "forfeit_win"
    FORFEIT_LOSS = "forfeit_loss"

    @property
    def is_win(self) -> bool:
        return self in (MatchResult.WIN, MatchResult.FORFEIT_WIN)

    @property
    def is_loss(self) -> bool:
        return self in (MatchResult.LOSS, MatchResult.FORFEIT_LOSS)

    def flipped(self) -> "MatchResult":
        """The same outcome seen from the opponent's side."""
        return _FLIPPED.get(self, self)


_FLIPPED = {
    MatchResult.WIN: MatchResult.LOSS,
    MatchResult.LOSS: MatchResult.WIN,
    MatchResult.FORFEIT_WIN: MatchResult.FORFEIT_LOSS,
    MatchResult.FORFEIT_LOSS: MatchResult.FORFEIT_WIN,
}


class Match(BaseModel):
    """One directed match record: the owner's view of a single round.

    Matches are normally supplied in mirrored pairs (A-vs-B and B-vs-A).
    A bye has no opponent and is never mirrored.
    """

    model_config = ConfigDict(frozen=True)

    player_id: str
    round: int = Field(ge=1)
    opponent_id: str | None = None
    result: MatchResult
    game_wins: int = Field(default=0, ge=0)
    game_losses: int = Field(default=0, ge=0)
    game_draws: int = Field(default=0, ge=0)
    penalties: int = Field(default=0, ge=0)
    id: str = ""

    @model_validator(mode="after")
    def check_opponent(self) -> "Match":
        if self.opponent_id is not None and self.opponent_id == self.player_id:
            msg = f"Competitor '{self.player_id}' cannot be their own opponent"
            raise ValueError(msg)
        if self.result == MatchResult.BYE and self.opponent_id is not None:
            msg = "A bye cannot have an opponent"
            raise ValueError(msg)
        return self

    @property
    def is_bye(self) -> bool:
        return self.opponent_id is None

    def mirrored(self) -> "Match":
        """Opponent's side of this record (penalties stay with the owner)."""
        if self.opponent_id is None:
            msg = "Byes have no mirrored entry"
            raise ValueError(msg)
        return Match(
            id=f"{self.id}#mirror",
            player_id=self.opponent_id,
            round=self.round,
            opponent_id=self.player_id,
            result=self.result.flipped(),
            game_wins=self.game_losses,
            game_losses=self.game_wins,
            game_draws=self.game_draws,
        )
