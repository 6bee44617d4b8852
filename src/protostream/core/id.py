"""ID Generation.

ULID-based identifiers for generation sessions and exports. ULIDs are
lexicographically sortable, so session ids order by start time in logs.
Screen ids are not generated here: they are derived from screen names
(see protostream.protocol.naming).
"""

from datetime import datetime, timezone
from typing import NewType
from ulid import ULID

SessionID = NewType("SessionID", str)
"""Generation session identifier"""

ExportID = NewType("ExportID", str)
"""Assembled prototype export identifier"""


class Prefix:
    """ID prefix constants."""

    SESSION = "sess"
    EXPORT = "exp"


def _generate(prefix: str) -> str:
    return f"{prefix}_{ULID()}"


def new_session_id() -> SessionID:
    """Generate new session ID."""
    return SessionID(_generate(Prefix.SESSION))


def new_export_id() -> ExportID:
    """Generate new export ID."""
    return ExportID(_generate(Prefix.EXPORT))


def is_valid(id_str: str) -> bool:
    """Check if string is a (optionally prefixed) ULID."""
    ulid_part = id_str.split("_", 1)[1] if "_" in id_str else id_str
    if len(ulid_part) != 26:
        return False
    try:
        ULID.from_str(ulid_part)
    except ValueError:
        return False
    return True


def extract_timestamp(id_str: str) -> datetime | None:
    """Creation time encoded in a ULID, or None if the id is invalid."""
    if not is_valid(id_str):
        return None
    ulid_part = id_str.split("_", 1)[1] if "_" in id_str else id_str
    return datetime.fromtimestamp(ULID.from_str(ulid_part).timestamp, tz=timezone.utc)


def is_session_id(id_str: str) -> bool:
    return id_str.startswith(f"{Prefix.SESSION}_") and is_valid(id_str)
