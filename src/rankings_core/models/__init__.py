from .match import Match, MatchResult
from .pairing import Pairing, PairingResult, RoundDefinition, RoundRobinSchedule
from .rating import EloMatch, OpenSkillUpdate, RatingUpdate
from .standing import EliminationStandingRow, StandingRow

__all__ = [
    "EliminationStandingRow",
    "EloMatch",
    "Match",
    "MatchResult",
    "OpenSkillUpdate",
    "Pairing",
    "PairingResult",
    "RatingUpdate",
    "RoundDefinition",
    "RoundRobinSchedule",
    "StandingRow",
]
