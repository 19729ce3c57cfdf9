"""Exceptions raised by the standings, pairing and rating engines."""

from __future__ import annotations


class RankingsCoreError(Exception):
    """Base exception carrying an optional suggestion for the caller."""

    label = "Error"

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[{self.label}] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class ConfigurationError(RankingsCoreError):
    """The call was made with options the engine cannot honor."""

    label = "Configuration Error"


class UnsupportedModeError(ConfigurationError):
    """Error when a facade is asked for a mode it does not implement."""

    def __init__(self, kind: str, mode: str, supported: tuple[str, ...]) -> None:
        self.mode = mode
        super().__init__(
            f"Unsupported {kind} mode '{mode}'",
            f"Use one of: {', '.join(supported)}.",
        )


class OddCompetitorCountError(ConfigurationError):
    """Error when an odd field cannot be scheduled because byes are disabled."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Odd number of competitors ({count}) with byes disabled",
            "Set include_bye=True or add a competitor.",
        )


class RoundOutOfRangeError(ConfigurationError):
    """Error when a requested round index is outside the schedule."""

    def __init__(self, round_number: int, total: int) -> None:
        self.round_number = round_number
        self.total = total
        super().__init__(f"Round {round_number} out of range (1..{total})")


class DataConsistencyError(RankingsCoreError):
    """The supplied match history contradicts itself."""

    label = "Data Error"


class MissingMirrorError(DataConsistencyError):
    """Error when a round-robin pairing was recorded from one side only."""

    def __init__(self, player_id: str, opponent_id: str, round_number: int) -> None:
        self.player_id = player_id
        self.opponent_id = opponent_id
        self.round_number = round_number
        super().__init__(
            f"Missing mirrored entry for {player_id} vs {opponent_id} in round {round_number}",
            "Set accept_single_entry_matches=True to reconstruct missing mirrors.",
        )


class DuplicateCompetitorError(DataConsistencyError):
    """Error when the same competitor appears twice in a standings list."""

    def __init__(self, player_id: str) -> None:
        self.player_id = player_id
        super().__init__(f"Competitor '{player_id}' appears more than once in the standings")


class PairingImpossibleError(RankingsCoreError):
    """No legal pairing exists, even with every constraint relaxed."""

    label = "Pairing Error"
