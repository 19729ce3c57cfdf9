"""Tests for deterministic hashing."""

from rankings_core.core.hashing import FNV_OFFSET_BASIS, fallback_key, fnv1a


class TestFnv1a:
    """Tests for the 32-bit FNV-1a hash."""

    def test_empty_string_is_offset_basis(self):
        """Test hashing nothing returns the offset basis."""
        assert fnv1a("") == FNV_OFFSET_BASIS

    def test_known_vectors(self):
        """Test published FNV-1a 32-bit reference values."""
        assert fnv1a("a") == 0xE40C292C
        assert fnv1a("foobar") == 0xBF9CF968

    def test_stays_32_bit(self):
        """Test long input never exceeds 32 bits."""
        assert 0 <= fnv1a("x" * 10_000) <= 0xFFFFFFFF

    def test_stable_across_calls(self):
        """Test same input always gives the same hash."""
        assert fnv1a("event::fallback::alice") == fnv1a("event::fallback::alice")


class TestFallbackKey:
    """Tests for the seeded tie-break key."""

    def test_matches_joined_hash(self):
        """Test key is the hash of event, role and player joined by '::'."""
        assert fallback_key("ev", "fallback", "A") == fnv1a("ev::fallback::A")

    def test_role_changes_key(self):
        """Test different roles give independent keys."""
        assert fallback_key("ev", "fallback", "A") != fallback_key("ev", "pairing-fallback", "A")

    def test_event_changes_key(self):
        """Test different events give independent keys."""
        assert fallback_key("ev1", "fallback", "A") != fallback_key("ev2", "fallback", "A")
