"""Core configuration and utilities for rankings-core."""

from rankings_core.core.config import (
    DEFAULT_EVENT_ID,
    PCT_FLOOR_DEFAULT,
    EloOptions,
    EventConfig,
    OpenSkillOptions,
    PairingOptions,
    PointsConfig,
    RoundRobinOptions,
    RoundRobinStandingsOptions,
    SingleEliminationOptions,
    StandingsOptions,
    SwissStandingsOptions,
    TiebreakFloors,
    VirtualByeConfig,
    coerce_options,
    load_config,
)
from rankings_core.core.errors import (
    ConfigurationError,
    DataConsistencyError,
    DuplicateCompetitorError,
    MissingMirrorError,
    OddCompetitorCountError,
    PairingImpossibleError,
    RankingsCoreError,
    RoundOutOfRangeError,
    UnsupportedModeError,
)
from rankings_core.core.hashing import fallback_key, fnv1a
from rankings_core.core.logging import configure_logging

__all__ = [
    "DEFAULT_EVENT_ID",
    "PCT_FLOOR_DEFAULT",
    "EloOptions",
    "EventConfig",
    "OpenSkillOptions",
    "PairingOptions",
    "PointsConfig",
    "RoundRobinOptions",
    "RoundRobinStandingsOptions",
    "SingleEliminationOptions",
    "StandingsOptions",
    "SwissStandingsOptions",
    "TiebreakFloors",
    "VirtualByeConfig",
    "coerce_options",
    "configure_logging",
    "fallback_key",
    "fnv1a",
    "load_config",
    "ConfigurationError",
    "DataConsistencyError",
    "DuplicateCompetitorError",
    "MissingMirrorError",
    "OddCompetitorCountError",
    "PairingImpossibleError",
    "RankingsCoreError",
    "RoundOutOfRangeError",
    "UnsupportedModeError",
]
