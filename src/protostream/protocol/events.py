"""Protocol event types.

The parser turns a generation buffer into a sequence of these events. The set
is closed: consumers dispatch with isinstance over ProtocolEvent.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class ScreenMode(str, Enum):
    """How a screen-opening delimiter relates to existing screens."""

    CREATE = "create"  # SCREEN_START
    EDIT = "edit"      # SCREEN_EDIT (full replacement of an existing screen)


class GenerationMode(str, Enum):
    """Delimiter grammar variant."""

    CANVAS = "canvas"  # SCREEN_START carries [col,row] and optional [ROOT]
    DESIGN = "design"  # Screens are named only


class AnomalyKind(str, Enum):
    """Non-fatal irregularities in producer output."""

    UNTERMINATED_SCREEN = "unterminated_screen"
    STRAY_SCREEN_END = "stray_screen_end"
    EDIT_UNKNOWN_SCREEN = "edit_unknown_screen"
    EDIT_POSITION_IGNORED = "edit_position_ignored"
    DUPLICATE_START = "duplicate_start"
    ID_COLLISION = "id_collision"
    MISSING_POSITION = "missing_position"
    MALFORMED_POSITION = "malformed_position"
    UNKNOWN_KEYWORD = "unknown_keyword"


@dataclass(frozen=True)
class Anomaly:
    """A producer mistake the core recovered from."""

    kind: AnomalyKind
    message: str
    screen_name: str | None = None
    offset: int | None = None

    def to_dict(self) -> dict[str, str | int | None]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "screen_name": self.screen_name,
            "offset": self.offset,
        }


@dataclass(frozen=True)
class ProjectMeta:
    """Project name and icon suggested by the model.

    Emitted once, where the first PROJECT_NAME or PROJECT_ICON appeared, and
    carries the last value of each seen anywhere in the buffer.
    """

    name: str | None = None
    icon: str | None = None
    offset: int = field(default=0, compare=False)

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.icon is None


@dataclass(frozen=True)
class ChatMessage:
    """Narration addressed to the user, not part of any screen."""

    text: str
    offset: int = 0


@dataclass(frozen=True)
class ScreenOpened:
    name: str
    mode: ScreenMode
    grid_column: int | None = None
    grid_row: int | None = None
    is_root: bool = False
    offset: int = 0


@dataclass(frozen=True)
class ScreenContent:
    chunk: str
    offset: int = 0


@dataclass(frozen=True)
class ScreenClosed:
    offset: int = 0


ProtocolEvent = Union[ProjectMeta, ChatMessage, ScreenOpened, ScreenContent, ScreenClosed]
