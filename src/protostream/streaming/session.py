"""Generation Session.

Drives the parser from a model token stream. Each fed chunk is appended to
the session buffer, the whole buffer is re-parsed, and the registry is
rebuilt from the result; the session then reports what changed since the
previous chunk so callers can update a live view.
"""

from collections.abc import AsyncIterable, Iterable
from dataclasses import dataclass, field
from typing import Any

from ..context import build_followup_context
from ..core import (
    ExportID,
    LRUCache,
    LogContext,
    Settings,
    StreamCounter,
    batch_tokens,
    batch_tokens_sync,
    content_hash,
    extract_timestamp,
    get_logger,
    get_settings,
    is_session_id,
    new_export_id,
    new_session_id,
    safe_json_dumps,
)
from ..grid import DeviceProfile, get_profile
from ..protocol import Anomaly, GenerationMode, ParseResult, ProjectMeta, ScreenBlock, parse_stream, slugify
from ..prototype import AssemblyOptions, PrototypeBuilder, render_screen_document
from ..prototype.builder import DEFAULT_PROJECT_NAME
from ..registry import ScreenEntity, ScreenRegistry

logger = get_logger(__name__)


@dataclass
class SessionUpdate:
    """What one feed() changed."""

    result: ParseResult
    project_changed: bool = False
    new_messages: list[str] = field(default_factory=list)
    started: list[str] = field(default_factory=list)
    completed: list[ScreenEntity] = field(default_factory=list)
    streaming: ScreenBlock | None = None
    new_anomalies: list[Anomaly] = field(default_factory=list)


@dataclass(frozen=True)
class PrototypeExport:
    """An assembled document stamped for download or publishing."""

    export_id: ExportID
    project_name: str
    document: str
    fingerprint: str  # SHA256 prefix, usable as an ETag
    screens: int

    @property
    def file_name(self) -> str:
        return f"{slugify(self.project_name) or 'prototype'}-{self.fingerprint[:8]}.html"


def options_from_settings(settings: Settings) -> AssemblyOptions:
    return AssemblyOptions(
        show_hotspots=settings.show_hotspots,
        script_urls=(settings.tailwind_url,) if settings.include_tailwind else (),
    )


class GenerationSession:
    """One streamed generation for one project."""

    def __init__(
        self,
        profile: DeviceProfile | None = None,
        mode: GenerationMode | None = None,
        base_screens: Iterable[ScreenEntity] | None = None,
        batch_size: int | None = None,
        settings: Settings | None = None,
        session_id: str | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if session_id is not None and not is_session_id(session_id):
            raise ValueError(f"Invalid session id: {session_id!r}")
        self.session_id = session_id or new_session_id()
        self.profile = profile or get_profile(self.settings.default_profile)
        self.mode = mode or GenerationMode(self.settings.generation_mode)
        self.batch_size = batch_size or self.settings.stream_batch_size
        self.options = options_from_settings(self.settings)

        self.base_screens = [screen.model_copy() for screen in base_screens or []]
        self.buffer = ""
        self.counter = StreamCounter()
        self.result = ParseResult()
        self.registry = ScreenRegistry.from_entities(self.base_screens)

        cache = (
            LRUCache[str](max_size=self.settings.cache_size, ttl_seconds=self.settings.cache_ttl)
            if self.settings.enable_cache
            else None
        )
        self.builder = PrototypeBuilder(self.profile, self.options, cache)

    @property
    def screens(self) -> list[ScreenEntity]:
        return self.registry.all()

    @property
    def project(self) -> ProjectMeta:
        return self.result.project

    @property
    def messages(self) -> list[str]:
        return self.result.messages

    @property
    def streaming_screen(self) -> ScreenBlock | None:
        return self.result.open_screen

    @property
    def anomalies(self) -> list[Anomaly]:
        return self.result.anomalies + self.registry.anomalies

    def feed(self, chunk: str) -> SessionUpdate:
        """
        Append a chunk and re-parse the whole buffer.

        Args:
            chunk: Newly received model output

        Returns:
            Changes since the previous feed
        """
        previous, previous_registry = self.result, self.registry

        self.buffer += chunk
        self.counter.track(chunk)
        self.result = parse_stream(self.buffer, self.mode)
        self.registry = ScreenRegistry.rebuild(self.result, base=self.base_screens)

        update = self._diff(previous, previous_registry)
        with LogContext(session_id=self.session_id):
            self._log(update)
        return update

    def _diff(self, previous: ParseResult, previous_registry: ScreenRegistry) -> SessionUpdate:
        result = self.result
        old_blocks = previous.blocks

        started = [block.name for block in result.blocks[len(old_blocks):]]
        completed: list[ScreenEntity] = []
        for index, block in enumerate(result.blocks):
            was_closed = index < len(old_blocks) and old_blocks[index].closed
            if block.closed and not was_closed:
                entity = self.registry.by_name(block.name)
                if entity is not None:
                    completed.append(entity)

        new_anomalies = (
            result.anomalies[len(previous.anomalies):]
            + self.registry.anomalies[len(previous_registry.anomalies):]
        )

        return SessionUpdate(
            result=result,
            project_changed=result.project != previous.project,
            new_messages=result.messages[len(previous.messages):],
            started=started,
            completed=completed,
            streaming=result.open_screen,
            new_anomalies=new_anomalies,
        )

    def _log(self, update: SessionUpdate) -> None:
        if update.project_changed:
            logger.info("project_meta", name=self.project.name, icon=self.project.icon)
        for message in update.new_messages:
            logger.info("chat_message", preview=message[:50])
        for name in update.started:
            logger.info("screen_started", screen=name)
        for entity in update.completed:
            logger.info("screen_completed", screen=entity.name, id=entity.id, chars=len(entity.markup))
        for anomaly in update.new_anomalies:
            logger.warning("protocol_anomaly", **anomaly.to_dict())

    def consume(self, chunks: Iterable[str]) -> SessionUpdate:
        """Feed a whole synchronous stream; returns the last update."""
        update = SessionUpdate(result=self.result)
        for batch in batch_tokens_sync(chunks, self.batch_size):
            update = self.feed(batch)
        self._log_totals()
        return update

    async def aconsume(self, chunks: AsyncIterable[str]) -> SessionUpdate:
        """Feed a whole async stream; returns the last update."""
        update = SessionUpdate(result=self.result)
        async for batch in batch_tokens(chunks, self.batch_size):
            update = self.feed(batch)
        self._log_totals()
        return update

    def _log_totals(self) -> None:
        count, chars = self.counter.count, self.counter.chars
        with LogContext(session_id=self.session_id):
            logger.info(
                "stream_consumed",
                chunks=count,
                chars=chars,
                screens=len(self.registry),
                anomalies=len(self.anomalies),
            )

    def preview(self) -> str | None:
        """Standalone document for the screen currently streaming, if any."""
        block = self.streaming_screen
        if block is None:
            return None
        return render_screen_document(block.markup, self.profile, block.name, self.options)

    def finalize(self, project_name: str | None = None, options: AssemblyOptions | None = None) -> str:
        """
        Assemble the closed screens into the prototype document.

        A screen still open when the stream stopped is left out.
        """
        name = project_name or self.project.name
        with LogContext(session_id=self.session_id):
            if self.streaming_screen is not None:
                logger.warning("screen_unfinished", screen=self.streaming_screen.name)
            if options is not None and options != self.options:
                return PrototypeBuilder(self.profile, options).build(self.screens, name)
            return self.builder.build(self.screens, name)

    def export(self, project_name: str | None = None, options: AssemblyOptions | None = None) -> PrototypeExport:
        """Finalize and stamp the document with an export id and fingerprint."""
        name = project_name or self.project.name or DEFAULT_PROJECT_NAME
        document = self.finalize(name, options)
        export = PrototypeExport(
            export_id=new_export_id(),
            project_name=name,
            document=document,
            fingerprint=content_hash(document),
            screens=len(self.registry),
        )
        with LogContext(session_id=self.session_id):
            logger.info(
                "prototype_exported",
                export_id=export.export_id,
                fingerprint=export.fingerprint,
                screens=export.screens,
            )
        return export

    def followup_context(self, request: str) -> str:
        """Prompt for refining this project, described for the session's platform."""
        return build_followup_context(self.screens, request, self.profile.label or "mobile app")

    def to_dict(self) -> dict[str, Any]:
        """Serializable session state for persistence collaborators."""
        snapshot = self.registry.snapshot()
        streaming = self.streaming_screen
        return {
            "session_id": self.session_id,
            "started_at": extract_timestamp(self.session_id).isoformat(),
            "profile": self.profile.name,
            "mode": self.mode.value,
            "project": {"name": self.project.name, "icon": self.project.icon},
            "messages": list(self.messages),
            "screens": [screen.model_dump() for screen in snapshot.screens],
            "entry_id": snapshot.entry_id,
            "streaming": streaming.name if streaming else None,
            "anomalies": [anomaly.to_dict() for anomaly in self.anomalies],
        }

    def to_json(self, indent: int = 0) -> str:
        return safe_json_dumps(self.to_dict(), indent=indent)
