"""
Generation protocol
Delimiter tokenizer and re-entrant parser for streamed screen output
"""

from .events import (
    Anomaly,
    AnomalyKind,
    ChatMessage,
    GenerationMode,
    ProjectMeta,
    ProtocolEvent,
    ScreenClosed,
    ScreenContent,
    ScreenMode,
    ScreenOpened,
)
from .naming import SCREEN_ID_PREFIX, screen_id, slugify
from .payload import GridAbsent, GridMalformed, GridPosition, GridSpec, ScreenHeader, parse_screen_header
from .parser import ParseResult, ScreenBlock, StreamParser, parse_stream
from .tokenizer import tokenize

__all__ = [
    "Anomaly",
    "AnomalyKind",
    "ChatMessage",
    "GenerationMode",
    "ProjectMeta",
    "ProtocolEvent",
    "ScreenClosed",
    "ScreenContent",
    "ScreenMode",
    "ScreenOpened",
    "SCREEN_ID_PREFIX",
    "screen_id",
    "slugify",
    "GridAbsent",
    "GridMalformed",
    "GridPosition",
    "GridSpec",
    "ScreenHeader",
    "parse_screen_header",
    "ParseResult",
    "ScreenBlock",
    "StreamParser",
    "parse_stream",
    "tokenize",
]
