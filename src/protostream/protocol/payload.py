"""Screen delimiter payload grammar.

    SCREEN_START: <Name> [<col>,<row>] [ROOT]
    SCREEN_EDIT:  <Name>

The grid part is a closed union with an explicit fallback for each branch:

    GridPosition(column, row)   "[1,2]"
    GridAbsent()                no bracket group, or one without a comma
    GridMalformed(raw)          "[a,b]", "[1,2,3]" ... resolves to (0, 0)

A trailing bracket group without a comma ("Settings [v2]") is part of the name.
"""

import re
from dataclasses import dataclass
from typing import Union

from .events import ScreenMode

DEFAULT_NAME = "Untitled"

_ROOT_MARKER = re.compile(r"\[\s*ROOT\s*\]", re.IGNORECASE)
_TRAILING_GROUP = re.compile(r"^(?P<name>.*?)\s*\[(?P<grid>[^\[\]]*)\]\s*$", re.DOTALL)
_POSITION = re.compile(r"\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*")


@dataclass(frozen=True)
class GridPosition:
    column: int
    row: int


@dataclass(frozen=True)
class GridAbsent:
    pass


@dataclass(frozen=True)
class GridMalformed:
    raw: str

    column = 0
    row = 0


GridSpec = Union[GridPosition, GridAbsent, GridMalformed]


@dataclass(frozen=True)
class ScreenHeader:
    """Parsed screen-opening payload."""

    name: str
    grid: GridSpec
    is_root: bool = False
    stripped_layout: bool = False  # Edit carried a position/root marker that was dropped

    @property
    def cell(self) -> tuple[int, int] | None:
        if isinstance(self.grid, (GridPosition, GridMalformed)):
            return self.grid.column, self.grid.row
        return None


def parse_grid(raw: str) -> GridSpec:
    """Classify the contents of a bracket group."""
    if "," not in raw:
        return GridAbsent()
    match = _POSITION.fullmatch(raw)
    if match is None:
        return GridMalformed(raw)
    return GridPosition(int(match.group(1)), int(match.group(2)))


def parse_screen_header(payload: str | None, mode: ScreenMode) -> ScreenHeader:
    """
    Parse a SCREEN_START / SCREEN_EDIT payload. Never raises.

    Edits inherit their position, so any grid or root marker on an edit is
    removed and reported through stripped_layout.
    """
    text = (payload or "").strip()

    is_root = bool(_ROOT_MARKER.search(text))
    if is_root:
        text = _ROOT_MARKER.sub(" ", text).strip()

    grid: GridSpec = GridAbsent()
    match = _TRAILING_GROUP.match(text)
    if match:
        candidate = parse_grid(match.group("grid"))
        if not isinstance(candidate, GridAbsent):
            grid = candidate
            text = match.group("name").strip()

    name = text.strip() or DEFAULT_NAME

    if mode is ScreenMode.EDIT:
        stripped = is_root or not isinstance(grid, GridAbsent)
        return ScreenHeader(name=name, grid=GridAbsent(), is_root=False, stripped_layout=stripped)

    return ScreenHeader(name=name, grid=grid, is_root=is_root)
