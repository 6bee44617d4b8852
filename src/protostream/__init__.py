"""
protostream
Streams generated screen markup into a navigable, self-contained prototype
"""

from .context import build_followup_context, summarize_screens
from .grid import COMPACT, WIDE, DeviceProfile, get_profile
from .protocol import GenerationMode, ParseResult, parse_stream, screen_id
from .prototype import AssemblyOptions, PrototypeBuilder, build_prototype, flow_connections
from .registry import ScreenEntity, ScreenRegistry
from .streaming import GenerationSession, PrototypeExport, SessionUpdate

__version__ = "0.1.0"

__all__ = [
    "build_followup_context",
    "summarize_screens",
    "COMPACT",
    "WIDE",
    "DeviceProfile",
    "get_profile",
    "GenerationMode",
    "ParseResult",
    "parse_stream",
    "screen_id",
    "AssemblyOptions",
    "PrototypeBuilder",
    "build_prototype",
    "flow_connections",
    "ScreenEntity",
    "ScreenRegistry",
    "GenerationSession",
    "PrototypeExport",
    "SessionUpdate",
]
