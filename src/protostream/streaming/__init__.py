"""Streaming sessions that feed model output through the parser."""

from .session import GenerationSession, PrototypeExport, SessionUpdate, options_from_settings

__all__ = ["GenerationSession", "PrototypeExport", "SessionUpdate", "options_from_settings"]
