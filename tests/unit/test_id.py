"""Tests for ID generation."""

from datetime import datetime, timezone

import pytest

from protostream.core.id import (
    Prefix,
    extract_timestamp,
    is_session_id,
    is_valid,
    new_export_id,
    new_session_id,
)


class TestGeneration:
    """Test prefixed ID generation."""

    @pytest.mark.unit
    def test_unique(self):
        """IDs should be unique."""
        assert new_session_id() != new_session_id()

    @pytest.mark.unit
    def test_prefixes(self):
        """Each kind carries its prefix."""
        assert new_session_id().startswith(f"{Prefix.SESSION}_")
        assert new_export_id().startswith(f"{Prefix.EXPORT}_")

    @pytest.mark.unit
    def test_sortable(self):
        """Later sessions sort after earlier ones."""
        ids = [new_session_id() for _ in range(5)]
        assert [i[:15] for i in ids] == sorted(i[:15] for i in ids)


class TestValidation:
    """Test ID validation and decoding."""

    @pytest.mark.unit
    def test_valid(self):
        """Generated ids validate."""
        sid = new_session_id()
        assert is_valid(sid)
        assert is_session_id(sid)
        assert not is_session_id(new_export_id())

    @pytest.mark.unit
    def test_invalid(self):
        """Malformed ids are rejected."""
        assert not is_valid("sess_short")
        assert not is_valid("sess_" + "!" * 26)
        assert extract_timestamp("nope") is None

    @pytest.mark.unit
    def test_timestamp(self):
        """Timestamps decode to roughly now."""
        created = extract_timestamp(new_session_id())
        assert created.tzinfo == timezone.utc
        assert abs((datetime.now(timezone.utc) - created).total_seconds()) < 60
