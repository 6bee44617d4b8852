"""Streaming protocol parser.

Each call receives the whole buffer seen so far and rebuilds the complete
state from scratch, so the result for a buffer never depends on how it was
chunked on the way in:

    parse_stream(a + b) == (parse_stream(a); parse_stream(a + b))[-1]

Malformed producer output never raises; it is reported as Anomaly values.
"""

from dataclasses import dataclass, field

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
from .payload import GridAbsent, GridMalformed, parse_screen_header
from .tokenizer import Delimiter, TextSpan, tokenize


@dataclass
class ScreenBlock:
    """One screen opening and the markup that followed it."""

    name: str
    mode: ScreenMode
    grid_column: int | None = None
    grid_row: int | None = None
    is_root: bool = False
    chunks: list[str] = field(default_factory=list)
    closed: bool = False
    offset: int = 0

    @property
    def markup(self) -> str:
        return "".join(self.chunks).strip()


@dataclass
class ParseResult:
    """Best-effort structured state of a (possibly still growing) buffer."""

    events: list[ProtocolEvent] = field(default_factory=list)
    blocks: list[ScreenBlock] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)
    anomalies: list[Anomaly] = field(default_factory=list)
    project_name: str | None = None
    project_icon: str | None = None
    consumed: int = 0
    _project_index: int | None = field(default=None, repr=False, compare=False)

    @property
    def project(self) -> ProjectMeta:
        return ProjectMeta(name=self.project_name, icon=self.project_icon)

    @property
    def completed(self) -> list[ScreenBlock]:
        return [block for block in self.blocks if block.closed]

    @property
    def open_screen(self) -> ScreenBlock | None:
        if self.blocks and not self.blocks[-1].closed:
            return self.blocks[-1]
        return None


class StreamParser:
    """Folds tokens into events and screen blocks."""

    def __init__(self, mode: GenerationMode = GenerationMode.CANVAS) -> None:
        self.mode = mode

    def parse(self, buffer: str) -> ParseResult:
        tokenized = tokenize(buffer)
        result = ParseResult(consumed=tokenized.consumed)
        current: ScreenBlock | None = None

        for token in tokenized.tokens:
            if isinstance(token, TextSpan):
                if current is not None:
                    current.chunks.append(token.text)
                    result.events.append(ScreenContent(token.text, token.start))
                continue

            if not token.known:
                if current is not None:
                    # Unrecognised comments inside a screen are plain markup
                    current.chunks.append(token.raw)
                    result.events.append(ScreenContent(token.raw, token.start))
                else:
                    result.anomalies.append(Anomaly(
                        AnomalyKind.UNKNOWN_KEYWORD,
                        f"Ignored unknown delimiter {token.keyword}",
                        offset=token.start,
                    ))
                continue

            current = self._apply(token, current, result)

        return result

    @staticmethod
    def _emit_project(result: ParseResult, offset: int) -> None:
        # A single ProjectMeta, kept at the first project delimiter
        if result._project_index is None:
            result._project_index = len(result.events)
            result.events.append(ProjectMeta(result.project_name, result.project_icon, offset))
            return
        first = result.events[result._project_index]
        result.events[result._project_index] = ProjectMeta(result.project_name, result.project_icon, first.offset)

    def _apply(self, token: Delimiter, current: ScreenBlock | None, result: ParseResult) -> ScreenBlock | None:
        keyword, payload = token.keyword, token.payload

        if keyword == "PROJECT_NAME":
            if payload:
                result.project_name = payload
                self._emit_project(result, token.start)
            return current

        if keyword == "PROJECT_ICON":
            if payload:
                result.project_icon = payload
                self._emit_project(result, token.start)
            return current

        if keyword == "MESSAGE":
            if payload:
                result.messages.append(payload)
                result.events.append(ChatMessage(payload, token.start))
            return current

        if keyword == "SCREEN_END":
            if current is None:
                result.anomalies.append(Anomaly(
                    AnomalyKind.STRAY_SCREEN_END,
                    "SCREEN_END without an open screen",
                    offset=token.start,
                ))
                return None
            self._close(current, token.start, result)
            return None

        # SCREEN_START / SCREEN_EDIT
        if current is not None:
            result.anomalies.append(Anomaly(
                AnomalyKind.UNTERMINATED_SCREEN,
                f"Screen '{current.name}' was not closed before the next screen opened",
                screen_name=current.name,
                offset=token.start,
            ))
            self._close(current, token.start, result)

        return self._open(token, result)

    def _open(self, token: Delimiter, result: ParseResult) -> ScreenBlock:
        mode = ScreenMode.EDIT if token.keyword == "SCREEN_EDIT" else ScreenMode.CREATE
        header = parse_screen_header(token.payload, mode)

        if header.stripped_layout:
            result.anomalies.append(Anomaly(
                AnomalyKind.EDIT_POSITION_IGNORED,
                f"Position/root marker on edit of '{header.name}' ignored",
                screen_name=header.name,
                offset=token.start,
            ))
        if isinstance(header.grid, GridMalformed):
            result.anomalies.append(Anomaly(
                AnomalyKind.MALFORMED_POSITION,
                f"Malformed position [{header.grid.raw}] for '{header.name}', using [0,0]",
                screen_name=header.name,
                offset=token.start,
            ))
        elif (
            mode is ScreenMode.CREATE
            and self.mode is GenerationMode.CANVAS
            and isinstance(header.grid, GridAbsent)
        ):
            result.anomalies.append(Anomaly(
                AnomalyKind.MISSING_POSITION,
                f"Screen '{header.name}' has no grid position",
                screen_name=header.name,
                offset=token.start,
            ))

        cell = header.cell
        block = ScreenBlock(
            name=header.name,
            mode=mode,
            grid_column=cell[0] if cell else None,
            grid_row=cell[1] if cell else None,
            is_root=header.is_root,
            offset=token.start,
        )
        result.blocks.append(block)
        result.events.append(ScreenOpened(
            name=block.name,
            mode=mode,
            grid_column=block.grid_column,
            grid_row=block.grid_row,
            is_root=block.is_root,
            offset=token.start,
        ))
        return block

    @staticmethod
    def _close(block: ScreenBlock, offset: int, result: ParseResult) -> None:
        block.closed = True
        result.events.append(ScreenClosed(offset))


def parse_stream(buffer: str, mode: GenerationMode = GenerationMode.CANVAS) -> ParseResult:
    """
    Parse everything received so far.

    Args:
        buffer: Full accumulated model output (not just the newest chunk)
        mode: Delimiter grammar variant

    Returns:
        ParseResult with closed screens, the provisional open screen,
        project metadata, chat messages and anomalies
    """
    return StreamParser(mode).parse(buffer)
