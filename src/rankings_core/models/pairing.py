from pydantic import BaseModel, ConfigDict, Field


class Pairing(BaseModel):
    """Two competitors meeting in a round; ``a`` is the better-ranked side."""

    model_config = ConfigDict(frozen=True)

    a: str
    b: str

    def involves(self, player_id: str) -> bool:
        return player_id in (self.a, self.b)

    def key(self) -> frozenset[str]:
        return frozenset((self.a, self.b))


class PairingResult(BaseModel):
    """Output of one Swiss pairing run.

    Attributes:
        pairings: Pairs covering every competitor except the bye recipient.
        bye: Competitor receiving the bye, if the field was odd.
        downfloats: Cumulative downfloat count per competitor, in rank order.
        rematches_used: Pairs that repeat history despite rematch avoidance.
    """

    pairings: list[Pairing] = Field(default_factory=list)
    bye: str | None = None
    downfloats: dict[str, int] = Field(default_factory=dict)
    rematches_used: list[Pairing] = Field(default_factory=list)


class RoundDefinition(BaseModel):
    """One round of a round-robin schedule (1-based)."""

    round: int
    pairings: list[Pairing] = Field(default_factory=list)
    byes: list[str] = Field(default_factory=list)


class RoundRobinSchedule(BaseModel):
    """Full round-robin schedule."""

    rounds: list[RoundDefinition] = Field(default_factory=list)
