"""Deterministic string hashing for reproducible tie-breaks."""

from __future__ import annotations

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193
_MASK_32 = 0xFFFFFFFF


def fnv1a(value: str) -> int:
    """Hash a string with 32-bit FNV-1a.

    Not a security primitive: it only has to be stable across runs and
    platforms so that seeded orderings can be reproduced from an event id.

    Args:
        value: Text to hash; each code point is folded in turn.

    Returns:
        Unsigned 32-bit hash.
    """
    h = FNV_OFFSET_BASIS
    for char in value:
        h ^= ord(char)
        h = (h * FNV_PRIME) & _MASK_32
    return h


def fallback_key(event_id: str, role: str, player_id: str) -> int:
    """Seeded ordering key for a competitor inside an otherwise exact tie."""
    return fnv1a(f"{event_id}::{role}::{player_id}")
