"""Tests for the grid coordinate resolver."""

import pytest
from hypothesis import given, strategies as st
from pydantic import ValidationError

from protostream.grid import (
    COMPACT,
    WIDE,
    Bounds,
    DeviceProfile,
    Point,
    canvas_bounds,
    cell_center,
    cell_edges,
    cell_origin,
    connector_anchors,
    connector_path,
    frame_size,
    get_profile,
)


# ============================================================================
# Profiles
# ============================================================================

@pytest.mark.unit
def test_profile_constants():
    """Predefined profiles carry the canvas constants."""
    assert (COMPACT.screen_width, COMPACT.screen_height) == (390, 844)
    assert (COMPACT.horizontal_gap, COMPACT.vertical_gap, COMPACT.frame_margin) == (120, 80, 24)
    assert (WIDE.screen_width, WIDE.screen_height) == (1440, 900)
    assert (WIDE.horizontal_gap, WIDE.vertical_gap, WIDE.frame_margin) == (150, 100, 0)


@pytest.mark.unit
def test_get_profile_aliases():
    """Platform aliases resolve to the same profiles."""
    assert get_profile("mobile") is COMPACT
    assert get_profile("Desktop ") is WIDE
    assert get_profile("compact") is COMPACT


@pytest.mark.unit
def test_get_profile_unknown():
    """Unknown profile names are rejected."""
    with pytest.raises(ValueError):
        get_profile("watch")


@pytest.mark.unit
def test_profile_validation():
    """Profiles need a positive viewport."""
    with pytest.raises(ValidationError):
        DeviceProfile(name="bad", screen_width=0, screen_height=10,
                      horizontal_gap=0, vertical_gap=0, frame_margin=0)


# ============================================================================
# Cell geometry
# ============================================================================

@pytest.mark.unit
def test_cell_origin_compact():
    """Second column starts after one frame and one gap."""
    assert cell_origin(COMPACT, 1, 0) == Point(558, 0)
    assert cell_origin(COMPACT, 0, 1) == Point(0, 972)
    assert cell_origin(COMPACT, 0, 0) == Point(0, 0)


@pytest.mark.unit
def test_cell_origin_wide():
    """Wide frames have no margin."""
    assert cell_origin(WIDE, 1, 1) == Point(1590, 1000)


@pytest.mark.unit
def test_negative_cells():
    """Negative cells resolve to negative coordinates."""
    assert cell_origin(COMPACT, -1, -2) == Point(-558, -1944)


@given(column=st.integers(-50, 50), row=st.integers(-50, 50))
def test_cell_origin_linear(column, row):
    """Origins are linear in column and row."""
    origin = cell_origin(COMPACT, column, row)
    assert origin.x == column * 558
    assert origin.y == row * 972


@pytest.mark.unit
def test_frame_and_center():
    """Center sits in the middle of the framed device."""
    assert frame_size(COMPACT) == (438, 892)
    assert cell_center(COMPACT, 1, 0) == Point(558 + 219, 446)


@pytest.mark.unit
def test_cell_edges():
    """Edge midpoints of the first frame."""
    edges = cell_edges(COMPACT, 0, 0)
    assert edges.left == Point(0, 446)
    assert edges.right == Point(438, 446)
    assert edges.top == Point(219, 0)
    assert edges.bottom == Point(219, 892)


# ============================================================================
# Bounds
# ============================================================================

@pytest.mark.unit
def test_canvas_bounds_empty():
    """No cells gives a zero-sized box."""
    bounds = canvas_bounds(COMPACT, [])
    assert bounds == Bounds()
    assert bounds.width == 0
    assert bounds.height == 0


@pytest.mark.unit
def test_canvas_bounds():
    """Bounds cover every frame plus padding."""
    bounds = canvas_bounds(COMPACT, [(0, 0), (1, 0), (0, 1)], padding=10)
    assert bounds.min_x == -10
    assert bounds.min_y == -10
    assert bounds.max_x == 558 + 438 + 10
    assert bounds.max_y == 972 + 892 + 10
    assert bounds.width == 558 + 438 + 20


@pytest.mark.unit
def test_canvas_bounds_accepts_generator():
    """Cells may be any iterable."""
    bounds = canvas_bounds(WIDE, ((c, 0) for c in range(3)))
    assert bounds.max_x == 2 * 1590 + 1440


# ============================================================================
# Connectors
# ============================================================================

@pytest.mark.unit
def test_anchors_horizontal():
    """Side-by-side frames connect right edge to left edge."""
    start, end = connector_anchors(COMPACT, (0, 0), (1, 0))
    assert start == Point(438, 446)
    assert end == Point(558, 446)

    back_start, back_end = connector_anchors(COMPACT, (1, 0), (0, 0))
    assert back_start == Point(558, 446)
    assert back_end == Point(438, 446)


@pytest.mark.unit
def test_anchors_vertical():
    """Stacked frames connect bottom edge to top edge."""
    start, end = connector_anchors(COMPACT, (0, 0), (0, 1))
    assert start == Point(219, 892)
    assert end == Point(219, 972)


@pytest.mark.unit
def test_connector_path_horizontal():
    """Control points bend by 30% of dx, capped at the offset."""
    path = connector_path(Point(438, 446), Point(558, 446))
    assert path == "M 438 446 C 474 446, 522 446, 558 446"


@pytest.mark.unit
def test_connector_path_capped():
    """Long connectors use the fixed curve offset."""
    path = connector_path(Point(0, 0), Point(1000, 0))
    assert path == "M 0 0 C 60 0, 940 0, 1000 0"


@pytest.mark.unit
def test_connector_path_vertical():
    """Vertical connectors are straight."""
    path = connector_path(Point(219, 892), Point(219, 972))
    assert path == "M 219 892 C 219 892, 219 972, 219 972"


@pytest.mark.unit
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_connector_path_non_finite(value):
    """Non-finite anchors still render a path instead of raising."""
    path = connector_path(Point(value, 0), Point(1, 1))
    assert path.startswith(f"M {value} 0 C ")
    assert path.endswith(", 1 1")


@given(
    st.floats(allow_nan=True, allow_infinity=True),
    st.floats(allow_nan=True, allow_infinity=True),
)
def test_connector_path_total(x, y):
    """Any float coordinates produce a path."""
    assert connector_path(Point(x, y), Point(y, x)).startswith("M ")
