"""Rankings Core.

Tournament standings with tie-break cascades, Swiss and round-robin
pairings, and Elo or OpenSkill rating updates.
"""

from rankings_core.core import (
    ConfigurationError,
    DataConsistencyError,
    DuplicateCompetitorError,
    EloOptions,
    EventConfig,
    MissingMirrorError,
    OddCompetitorCountError,
    OpenSkillOptions,
    PairingImpossibleError,
    PairingOptions,
    PointsConfig,
    RankingsCoreError,
    RoundOutOfRangeError,
    RoundRobinOptions,
    RoundRobinStandingsOptions,
    SingleEliminationOptions,
    StandingsOptions,
    SwissStandingsOptions,
    TiebreakFloors,
    UnsupportedModeError,
    VirtualByeConfig,
    configure_logging,
    load_config,
)
from rankings_core.models import (
    EliminationStandingRow,
    EloMatch,
    Match,
    MatchResult,
    OpenSkillUpdate,
    Pairing,
    PairingResult,
    RatingUpdate,
    RoundDefinition,
    RoundRobinSchedule,
    StandingRow,
)
from rankings_core.pairing import (
    build_round_robin_schedule,
    generate_pairings,
    generate_swiss_pairings,
    get_round_robin_round,
)
from rankings_core.ratings import (
    expected_score,
    update_elo_ratings,
    update_openskill_ratings,
    update_ratings,
)
from rankings_core.standings import (
    compute_round_robin_standings,
    compute_single_elimination_standings,
    compute_standings,
    compute_swiss_standings,
)

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DataConsistencyError",
    "DuplicateCompetitorError",
    "EliminationStandingRow",
    "EloMatch",
    "EloOptions",
    "EventConfig",
    "Match",
    "MatchResult",
    "MissingMirrorError",
    "OddCompetitorCountError",
    "OpenSkillOptions",
    "OpenSkillUpdate",
    "Pairing",
    "PairingImpossibleError",
    "PairingOptions",
    "PairingResult",
    "PointsConfig",
    "RankingsCoreError",
    "RatingUpdate",
    "RoundDefinition",
    "RoundOutOfRangeError",
    "RoundRobinOptions",
    "RoundRobinSchedule",
    "RoundRobinStandingsOptions",
    "SingleEliminationOptions",
    "StandingRow",
    "StandingsOptions",
    "SwissStandingsOptions",
    "TiebreakFloors",
    "UnsupportedModeError",
    "VirtualByeConfig",
    "__version__",
    "build_round_robin_schedule",
    "compute_round_robin_standings",
    "compute_single_elimination_standings",
    "compute_standings",
    "compute_swiss_standings",
    "configure_logging",
    "expected_score",
    "generate_pairings",
    "generate_swiss_pairings",
    "get_round_robin_round",
    "load_config",
    "update_elo_ratings",
    "update_openskill_ratings",
    "update_ratings",
]
