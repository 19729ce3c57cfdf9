"""Option schemas and configuration loading for rankings-core."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, Literal, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EVENT_ID = "rankings-core"
PCT_FLOOR_DEFAULT = 0.33
DEFAULT_MAX_BACKTRACK = 10_000
DEFAULT_RATING = 1500.0

StandingsMode = Literal["swiss", "roundrobin", "singleelimination"]
PairingMode = Literal["swiss", "roundrobin"]
RatingMode = Literal["elo", "openskill"]

OptionsT = TypeVar("OptionsT", bound=BaseModel)


class PointsConfig(BaseModel):
    """Match points awarded per outcome. Forfeits score as win/loss."""

    win: float = 3.0
    draw: float = 1.0
    loss: float = 0.0
    bye: float = 3.0


class TiebreakFloors(BaseModel):
    """Lower bounds applied to percentage tie-breaks."""

    opponent_pct_floor: float = PCT_FLOOR_DEFAULT


class VirtualByeConfig(BaseModel):
    """Synthetic opponent contribution for each bye a competitor received.

    Attributes:
        enabled: Add one virtual opponent per bye to OMW%/OGW%.
        mwp: Match-win percentage credited for the virtual opponent.
        gwp: Game-win percentage credited for the virtual opponent.
    """

    enabled: bool = False
    mwp: float = 0.5
    gwp: float = 0.5


class StandingsOptions(BaseModel):
    """Options shared by the tie-break standings engines."""

    event_id: str = DEFAULT_EVENT_ID
    apply_head_to_head: bool = True
    tiebreak_floors: TiebreakFloors = Field(default_factory=TiebreakFloors)
    points: PointsConfig = Field(default_factory=PointsConfig)
    accept_single_entry_matches: bool = False


class SwissStandingsOptions(StandingsOptions):
    """Swiss standings options."""

    tiebreak_virtual_bye: VirtualByeConfig = Field(default_factory=VirtualByeConfig)


class RoundRobinStandingsOptions(StandingsOptions):
    """Round-robin standings options (strict mirrored entry by default)."""


class SingleEliminationOptions(BaseModel):
    """Single-elimination standings options.

    Attributes:
        event_id: Seed for the final deterministic fallback.
        seeding: Optional seed number per competitor (lower is better).
        use_bronze_match: Accepted for API compatibility; does not change ranks.
    """

    event_id: str = DEFAULT_EVENT_ID
    seeding: dict[str, int] = Field(default_factory=dict)
    use_bronze_match: bool = True


class PairingOptions(BaseModel):
    """Swiss pairing options.

    Attributes:
        event_id: Seed for deterministic tie-breaking between equal candidates.
        avoid_rematches: Forbid repeat pairings until every alternative is exhausted.
        protect_top_n: Number of top-ranked competitors who should not downfloat.
        max_backtrack: Backtracking budget per search stage.
        allow_bye: Whether an odd field may hand out a bye.
        prior_downfloats: Downfloat counts carried over from earlier rounds.
        score_groups: Group by the full tie-break signature or by match points only.
    """

    event_id: str = DEFAULT_EVENT_ID
    avoid_rematches: bool = True
    protect_top_n: int = Field(default=0, ge=0)
    max_backtrack: int = Field(default=DEFAULT_MAX_BACKTRACK, ge=0)
    allow_bye: bool = True
    prior_downfloats: dict[str, int] = Field(default_factory=dict)
    score_groups: Literal["signature", "points"] = "signature"


class RoundRobinOptions(BaseModel):
    """Round-robin schedule options."""

    double: bool = False
    shuffle_seed: str | None = None
    include_bye: bool = True


class EloOptions(BaseModel):
    """Elo update options.

    Attributes:
        k: K-factor for decisive results.
        k_draw: K-factor for draws (defaults to ``k``).
        per_player_k: K-factor overrides per competitor.
        initial_rating: Rating for competitors missing from the base map.
        floor: Minimum stored rating.
        cap: Maximum stored rating.
        mode: "sequential" applies matches in order; "simultaneous" rates a
            batch against a snapshot so order within the batch does not matter.
        draw_score: Score credited to each side of a draw.
        expected_score: Optional accelerated expected-score function.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    k: float = 32.0
    k_draw: float | None = None
    per_player_k: dict[str, float] = Field(default_factory=dict)
    initial_rating: float = DEFAULT_RATING
    floor: float | None = None
    cap: float | None = None
    mode: Literal["sequential", "simultaneous"] = "sequential"
    draw_score: float = 0.5
    expected_score: Callable[[float, float], float] | None = Field(default=None, exclude=True)


class OpenSkillOptions(BaseModel):
    """OpenSkill (Plackett-Luce) update options."""

    initial_mu: float = 25.0
    initial_sigma: float | None = None  # Default value if None: mu / 3


class EventConfig(BaseModel):
    """Complete configuration for one event."""

    event_id: str = DEFAULT_EVENT_ID
    standings_mode: StandingsMode = "swiss"
    standings: SwissStandingsOptions = Field(default_factory=SwissStandingsOptions)
    single_elimination: SingleEliminationOptions = Field(
        default_factory=SingleEliminationOptions
    )
    pairing: PairingOptions = Field(default_factory=PairingOptions)
    round_robin: RoundRobinOptions = Field(default_factory=RoundRobinOptions)
    rating_mode: RatingMode = "elo"
    elo: EloOptions = Field(default_factory=EloOptions)
    openskill: OpenSkillOptions = Field(default_factory=OpenSkillOptions)

    def model_post_init(self, __context: Any) -> None:
        for section in (self.standings, self.single_elimination, self.pairing):
            if "event_id" not in section.model_fields_set:
                section.event_id = self.event_id

    def standings_options(self) -> StandingsOptions | SingleEliminationOptions:
        """Options matching the configured standings mode."""
        if self.standings_mode == "singleelimination":
            return self.single_elimination
        if self.standings_mode == "roundrobin":
            return RoundRobinStandingsOptions.model_validate(
                self.standings.model_dump(exclude={"tiebreak_virtual_bye"})
            )
        return self.standings

    def rating_options(self) -> EloOptions | OpenSkillOptions:
        """Options matching the configured rating mode."""
        return self.openskill if self.rating_mode == "openskill" else self.elo


def coerce_options(model_cls: type[OptionsT], value: OptionsT | dict[str, Any] | None) -> OptionsT:
    """Accept a model, a plain mapping, or nothing, and return a model.

    Args:
        model_cls: Target options model.
        value: Existing instance, mapping of overrides, or None for defaults.

    Returns:
        Instance of ``model_cls``.
    """
    if value is None:
        return model_cls()
    if isinstance(value, model_cls):
        return value
    if isinstance(value, BaseModel):
        return model_cls.model_validate(value.model_dump(exclude_unset=True))
    return model_cls.model_validate(value)


def load_config(path: str | Path) -> EventConfig:
    """Load and validate an event configuration from a YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated EventConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open() as f:
        data = yaml.safe_load(f) or {}

    return EventConfig.model_validate(data)
