from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class EloMatch(BaseModel):
    """A rated match between ``a`` and ``b``; result names the winner or a draw."""

    model_config = ConfigDict(frozen=True)

    a: str
    b: str
    result: Literal["A", "B", "draw"]
    weight: float = 1.0


class RatingUpdate(BaseModel):
    """New ratings plus the accumulated change per competitor."""

    mode: str
    ratings: dict[str, float] = Field(default_factory=dict)
    deltas: dict[str, float] = Field(default_factory=dict)


class OpenSkillUpdate(RatingUpdate):
    """OpenSkill update; ``ratings`` are ordinals (mu - 3 sigma).

    Attributes:
        skills: Posterior (mu, sigma) per competitor, to feed into the next batch.
    """

    skills: dict[str, tuple[float, float]] = Field(default_factory=dict)
