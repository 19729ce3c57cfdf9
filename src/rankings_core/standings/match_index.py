"""Per-competitor indexing and mirror repair for match histories."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from rankings_core.models import Match


def _chronological_key(match: Match) -> tuple[int, str, str, str]:
    return (match.round, match.id, match.opponent_id or "", match.result.value)


def group_by_player(matches: Iterable[Match]) -> dict[str, list[Match]]:
    """Group match records by owner, each list in chronological order.

    Keys are sorted, so the mapping only depends on the records' content and
    not on the order they were supplied in.

    Args:
        matches: Directed match records.

    Returns:
        Mapping of competitor id to that competitor's records.
    """
    by_player: dict[str, list[Match]] = defaultdict(list)
    for match in matches:
        by_player[match.player_id].append(match)
    return {pid: sorted(by_player[pid], key=_chronological_key) for pid in sorted(by_player)}


def find_missing_mirrors(matches: Sequence[Match]) -> list[Match]:
    """Return real records whose pairing appears only once in their round."""
    counts: dict[tuple[int, frozenset[str]], int] = defaultdict(int)
    samples: dict[tuple[int, frozenset[str]], Match] = {}
    for match in matches:
        if match.opponent_id is None:
            continue
        key = (match.round, frozenset((match.player_id, match.opponent_id)))
        counts[key] += 1
        samples.setdefault(key, match)
    return [samples[key] for key, count in counts.items() if count == 1]


def mirror_single_entries(matches: Sequence[Match]) -> list[Match]:
    """Add the opponent's side for every one-sided record.

    A record A-vs-B in round r is mirrored unless a B-vs-A record for round r
    already exists. Byes are never mirrored.

    Args:
        matches: Directed match records, possibly one-sided.

    Returns:
        The input records followed by any reconstructed mirrors.
    """
    out = list(matches)
    seen = {
        (m.round, m.player_id, m.opponent_id) for m in matches if m.opponent_id is not None
    }
    for match in matches:
        if match.opponent_id is None:
            continue
        reverse = (match.round, match.opponent_id, match.player_id)
        if reverse not in seen:
            out.append(match.mirrored())
            seen.add(reverse)
    return out
