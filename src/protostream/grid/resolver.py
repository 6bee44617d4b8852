"""Grid Coordinate Resolver.

Converts (column, row) screen positions into canvas pixel geometry. A cell is
the device frame (screen plus frame margin on both sides) followed by the gap
to the next cell:

    x = column * (screen_width + 2 * frame_margin + horizontal_gap)
    y = row * (screen_height + 2 * frame_margin + vertical_gap)

Every function is pure and total; negative cells give negative coordinates.
"""

from collections.abc import Iterable
from dataclasses import dataclass
import math

from .profiles import DeviceProfile

Cell = tuple[int, int]


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """Canvas bounding box over a set of frames."""

    min_x: float = 0
    min_y: float = 0
    max_x: float = 0
    max_y: float = 0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class Edges:
    """Midpoints of the four sides of a frame."""

    left: Point
    right: Point
    top: Point
    bottom: Point


def frame_size(profile: DeviceProfile) -> tuple[int, int]:
    """Outer size of one device frame."""
    return (
        profile.screen_width + profile.frame_margin * 2,
        profile.screen_height + profile.frame_margin * 2,
    )


def cell_size(profile: DeviceProfile) -> tuple[int, int]:
    """Frame size plus the gap to the next column/row."""
    width, height = frame_size(profile)
    return width + profile.horizontal_gap, height + profile.vertical_gap


def cell_origin(profile: DeviceProfile, column: int, row: int) -> Point:
    """Top-left pixel of the frame at (column, row)."""
    width, height = cell_size(profile)
    return Point(column * width, row * height)


def canvas_bounds(profile: DeviceProfile, cells: Iterable[Cell], padding: float = 0) -> Bounds:
    """
    Bounding box of all frames at the given cells.

    Args:
        profile: Device profile
        cells: (column, row) pairs
        padding: Extra space added on every side

    Returns:
        Bounds; a zero-sized box at the origin when cells is empty
    """
    frame_w, frame_h = frame_size(profile)
    origins = [cell_origin(profile, column, row) for column, row in cells]
    if not origins:
        return Bounds()

    return Bounds(
        min_x=min(p.x for p in origins) - padding,
        min_y=min(p.y for p in origins) - padding,
        max_x=max(p.x for p in origins) + frame_w + padding,
        max_y=max(p.y for p in origins) + frame_h + padding,
    )


def cell_center(profile: DeviceProfile, column: int, row: int) -> Point:
    origin = cell_origin(profile, column, row)
    frame_w, frame_h = frame_size(profile)
    return Point(origin.x + frame_w / 2, origin.y + frame_h / 2)


def cell_edges(profile: DeviceProfile, column: int, row: int) -> Edges:
    """Anchor points on each side of the frame for drawing connectors."""
    origin = cell_origin(profile, column, row)
    frame_w, frame_h = frame_size(profile)
    center = cell_center(profile, column, row)

    return Edges(
        left=Point(origin.x, center.y),
        right=Point(origin.x + frame_w, center.y),
        top=Point(center.x, origin.y),
        bottom=Point(center.x, origin.y + frame_h),
    )


def connector_anchors(profile: DeviceProfile, source: Cell, target: Cell) -> tuple[Point, Point]:
    """
    Pick the facing sides of two frames.

    Mostly-horizontal pairs connect right-to-left (or left-to-right), the
    rest connect bottom-to-top (or top-to-bottom).
    """
    source_edges = cell_edges(profile, *source)
    target_edges = cell_edges(profile, *target)
    source_center = cell_center(profile, *source)
    target_center = cell_center(profile, *target)

    dx = target_center.x - source_center.x
    dy = target_center.y - source_center.y

    if abs(dx) >= abs(dy):
        if dx >= 0:
            return source_edges.right, target_edges.left
        return source_edges.left, target_edges.right

    if dy >= 0:
        return source_edges.bottom, target_edges.top
    return source_edges.top, target_edges.bottom


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _fmt(value: float) -> str:
    # 558.0 -> "558" so paths stay stable across int/float inputs
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return str(value)


def connector_path(start: Point, end: Point, curve_offset: float = 60) -> str:
    """Cubic bezier SVG path between two anchors."""
    dx = end.x - start.x
    bend = min(abs(dx) * 0.3, curve_offset) * _sign(dx)

    cp1 = Point(start.x + bend, start.y)
    cp2 = Point(end.x - bend, end.y)

    return (
        f"M {_fmt(start.x)} {_fmt(start.y)} "
        f"C {_fmt(cp1.x)} {_fmt(cp1.y)}, {_fmt(cp2.x)} {_fmt(cp2.y)}, "
        f"{_fmt(end.x)} {_fmt(end.y)}"
    )
