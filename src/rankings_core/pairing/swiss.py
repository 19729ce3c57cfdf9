"""Swiss pairing: constrained matching with bounded backtracking.

The matcher always pairs the best-ranked unpaired competitor next, trying
candidates in order of preference. Dead ends are undone from an explicit
decision stack. The search runs in stages, each with its own backtracking
budget; when a stage runs dry the next one is tried. Stages are labelled by
relaxation level:

- level 0, strict: no rematches (when avoided), no downfloat of the
  protected top-N
- level 1: rematches allowed and recorded, one more per stage
- level 2: protected competitors may downfloat as well

Fewer rematches always win over keeping protection, so level 2 is first
tried with no rematches at all.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import structlog

from rankings_core.core.config import PairingOptions, coerce_options
from rankings_core.core.errors import DuplicateCompetitorError, PairingImpossibleError
from rankings_core.core.hashing import fallback_key
from rankings_core.models import Match, MatchResult, Pairing, PairingResult, StandingRow
from rankings_core.pairing.score_groups import group_index
from rankings_core.standings.sorter import ROLE_PAIRING

logger = structlog.get_logger()

STRICT = 0
ALLOW_REMATCHES = 1
ALLOW_PROTECTED_DOWNFLOATS = 2


@dataclass
class PairingHistory:
    """What the match history says about previous rounds.

    Attributes:
        played: Unordered pairs that have already met.
        byes: Number of byes each competitor has received.
    """

    played: set[frozenset[str]] = field(default_factory=set)
    byes: Counter[str] = field(default_factory=Counter)

    @classmethod
    def from_matches(cls, history: Sequence[Match]) -> PairingHistory:
        summary = cls()
        for match in history:
            if match.result == MatchResult.BYE:
                summary.byes[match.player_id] += 1
            elif match.opponent_id is not None:
                summary.played.add(frozenset((match.player_id, match.opponent_id)))
        return summary

    def has_played(self, a: str, b: str) -> bool:
        return frozenset((a, b)) in self.played


@dataclass
class _Decision:
    player: int
    candidates: list[int]
    cursor: int = 0
    partner: int | None = None
    rematch: bool = False


class SwissMatcher:
    """Builds one round of Swiss pairings from standings and history.

    Attributes:
        options: Pairing options.
        rows: Standings in pairing order (rank, then seeded hash).
        history: Summary of previous rounds.
    """

    def __init__(
        self,
        standings: Sequence[StandingRow],
        history: Sequence[Match],
        options: PairingOptions,
    ) -> None:
        self.options = options
        self.history = PairingHistory.from_matches(history)
        self.rows = sorted(
            standings,
            key=lambda r: (r.rank, fallback_key(options.event_id, ROLE_PAIRING, r.player_id)),
        )
        seen: set[str] = set()
        for row in self.rows:
            if row.player_id in seen:
                raise DuplicateCompetitorError(row.player_id)
            seen.add(row.player_id)

        self._groups = group_index(self.rows, options.score_groups)
        self._protected = {r.player_id for r in self.rows[: options.protect_top_n]}

    def run(self) -> PairingResult:
        """Pick the bye, search for a matching, and do the bookkeeping.

        Raises:
            PairingImpossibleError: If the field is empty, or odd with byes
                disallowed.
        """
        if not self.rows:
            raise PairingImpossibleError("No competitors to pair")

        bye = self._select_bye()
        field_rows = [r for r in self.rows if r.player_id != bye]
        self._prepare(field_rows)

        pairs = self._solve()
        pairings = [Pairing(a=self._ids[p], b=self._ids[q]) for p, q in pairs]
        rematches = [
            pairing
            for pairing in pairings
            if self.options.avoid_rematches and self.history.has_played(pairing.a, pairing.b)
        ]

        downfloats = {
            r.player_id: self.options.prior_downfloats.get(r.player_id, 0) for r in self.rows
        }
        for p, q in pairs:
            if self._group[p] != self._group[q]:
                downfloats[self._ids[p]] += 1

        logger.info(
            "pairings_generated",
            event_id=self.options.event_id,
            pairings=len(pairings),
            bye=bye,
            rematches=len(rematches),
        )
        return PairingResult(
            pairings=pairings, bye=bye, downfloats=downfloats, rematches_used=rematches
        )

    def _select_bye(self) -> str | None:
        """Lowest-ranked competitor without a previous bye, else the lowest-ranked."""
        if len(self.rows) % 2 == 0:
            return None
        if not self.options.allow_bye:
            raise PairingImpossibleError(
                f"Odd number of competitors ({len(self.rows)}) and byes are not allowed",
                "Set allow_bye=True or add a competitor.",
            )
        for row in reversed(self.rows):
            if self.history.byes[row.player_id] == 0 and row.byes == 0:
                return row.player_id
        return self.rows[-1].player_id

    def _prepare(self, field_rows: Sequence[StandingRow]) -> None:
        self._ids = [r.player_id for r in field_rows]
        self._group = [self._groups[pid] for pid in self._ids]
        self._is_protected = [pid in self._protected for pid in self._ids]
        self._prior = [self.options.prior_downfloats.get(pid, 0) for pid in self._ids]
        self._hash = [
            fallback_key(self.options.event_id, ROLE_PAIRING, pid) for pid in self._ids
        ]

    def _is_rematch(self, p: int, q: int) -> bool:
        return self.options.avoid_rematches and self.history.has_played(self._ids[p], self._ids[q])

    def _rematch_ceiling(self) -> int:
        """Most rematches a round could contain, given who has already met."""
        if not self.options.avoid_rematches:
            return 0
        present = set(self._ids)
        possible = sum(1 for pair in self.history.played if pair <= present)
        return min(possible, len(self._ids) // 2)

    def _stages(self) -> list[tuple[int, int]]:
        """(level, rematch cap) pairs in the order they are searched.

        Rematches are admitted one at a time, so the first stage that succeeds
        uses the fewest the budget could find. At each cap, protection of the
        top-N is kept first and lifted only if that fails.
        """
        protected = any(self._is_protected)
        stages = [(STRICT, 0)]
        if protected:
            stages.append((ALLOW_PROTECTED_DOWNFLOATS, 0))
        for cap in range(1, self._rematch_ceiling() + 1):
            stages.append((ALLOW_REMATCHES, cap))
            if protected:
                stages.append((ALLOW_PROTECTED_DOWNFLOATS, cap))
        return stages

    def _solve(self) -> list[tuple[int, int]]:
        for level, cap in self._stages():
            pairs, backtracks = self._search(level, cap)
            if pairs is not None:
                if level > STRICT:
                    logger.warning(
                        "pairing_relaxed",
                        event_id=self.options.event_id,
                        level=level,
                        rematch_cap=cap,
                        backtracks=backtracks,
                    )
                return pairs
            logger.debug(
                "pairing_level_exhausted",
                event_id=self.options.event_id,
                level=level,
                rematch_cap=cap,
                backtracks=backtracks,
            )
        raise PairingImpossibleError(
            f"No legal pairing for {len(self._ids)} competitors after all relaxations"
        )

    def _search(self, level: int, cap: int) -> tuple[list[tuple[int, int]] | None, int]:
        """Depth-first search over pairing decisions with an undo stack.

        Args:
            level: Relaxation level deciding whether protection holds.
            cap: Most rematches the assignment may contain.

        Returns:
            Tuple of (pairs or None if this stage failed, backtracks used).
        """
        paired = [False] * len(self._ids)
        stack: list[_Decision] = []
        backtracks = 0

        while True:
            player = next((i for i, done in enumerate(paired) if not done), None)
            if player is None:
                return [(d.player, d.partner) for d in stack if d.partner is not None], backtracks

            allowance = cap - sum(d.rematch for d in stack)
            stack.append(_Decision(player, self._candidates(player, paired, level, allowance)))
            while not self._advance(stack[-1], paired):
                stack.pop()
                if not stack:
                    return None, backtracks
                backtracks += 1
                if backtracks > self.options.max_backtrack:
                    return None, backtracks
                self._undo(stack[-1], paired)

    def _advance(self, decision: _Decision, paired: list[bool]) -> bool:
        if decision.cursor >= len(decision.candidates):
            return False
        partner = decision.candidates[decision.cursor]
        decision.cursor += 1
        decision.partner = partner
        decision.rematch = self._is_rematch(decision.player, partner)
        paired[decision.player] = paired[partner] = True
        return True

    @staticmethod
    def _undo(decision: _Decision, paired: list[bool]) -> None:
        if decision.partner is not None:
            paired[decision.player] = paired[decision.partner] = False
            decision.partner = None
            decision.rematch = False

    def _candidates(
        self, player: int, paired: list[bool], level: int, allowance: int
    ) -> list[int]:
        """Legal partners for ``player``, most preferred first."""
        unpaired = [q for q in range(player + 1, len(self._ids)) if not paired[q]]
        group_mates = [q for q in unpaired if self._group[q] == self._group[player]]

        floater = None
        if len(group_mates) % 2 == 0:
            # Odd number left in the group (counting player): someone floats down.
            floater = self._preferred_floater([player, *group_mates], level)

        ranked: list[tuple[tuple[int, int, int, int], int]] = []
        for q in unpaired:
            rematch = self._is_rematch(player, q)
            if rematch and allowance <= 0:
                continue
            crosses = self._group[q] != self._group[player]
            if crosses and self._is_protected[player] and level < ALLOW_PROTECTED_DOWNFLOATS:
                continue
            preference = (
                int(rematch),
                self._group_preference(player, q, crosses, floater),
                q - player,
                self._hash[q],
            )
            ranked.append((preference, q))

        ranked.sort()
        return [q for _, q in ranked]

    @staticmethod
    def _group_preference(player: int, q: int, crosses: bool, floater: int | None) -> int:
        if floater is None:
            return int(crosses)
        if floater == player:
            return 0 if crosses else 1
        if crosses:
            return 2
        return 1 if q == floater else 0

    def _preferred_floater(self, members: list[int], level: int) -> int | None:
        """Fewest prior downfloats first, then lowest-ranked; protected members excluded."""
        eligible = [
            m
            for m in members
            if level >= ALLOW_PROTECTED_DOWNFLOATS or not self._is_protected[m]
        ]
        if not eligible:
            return None
        return min(eligible, key=lambda m: (self._prior[m], -m, self._hash[m]))


def generate_swiss_pairings(
    standings: Sequence[StandingRow],
    history: Sequence[Match],
    options: PairingOptions | dict[str, Any] | None = None,
) -> PairingResult:
    """Propose next-round Swiss pairings.

    Args:
        standings: Current standings (rank order decides pairing priority).
        history: Every match record played so far in the event.
        options: Pairing options (model or mapping).

    Returns:
        Pairings, bye recipient, downfloat counters and rematches used.

    Raises:
        PairingImpossibleError: If no legal pairing exists.
        DuplicateCompetitorError: If a competitor appears twice in standings.
    """
    opts = coerce_options(PairingOptions, options)
    return SwissMatcher(standings, history, opts).run()
