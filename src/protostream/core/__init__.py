"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .stream import TokenBatcher, StreamCounter, batch_tokens, batch_tokens_sync
from .json import safe_json_dumps, script_literal
from .hash import Algorithm, hash_string, hash_fields, content_hash
from .cache import LRUCache, Stats
from .id import (
    SessionID,
    ExportID,
    new_session_id,
    new_export_id,
    is_valid,
    is_session_id,
    extract_timestamp,
)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # Streaming
    "TokenBatcher",
    "StreamCounter",
    "batch_tokens",
    "batch_tokens_sync",
    # JSON
    "safe_json_dumps",
    "script_literal",
    # Hashing
    "Algorithm",
    "hash_string",
    "hash_fields",
    "content_hash",
    # Caching
    "LRUCache",
    "Stats",
    # IDs
    "SessionID",
    "ExportID",
    "new_session_id",
    "new_export_id",
    "is_valid",
    "is_session_id",
    "extract_timestamp",
]
