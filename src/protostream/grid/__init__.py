"""
Grid layout
Device profiles and canvas coordinate math for positioned screens
"""

from .profiles import DeviceProfile, COMPACT, WIDE, PROFILES, get_profile
from .resolver import (
    Cell,
    Point,
    Bounds,
    Edges,
    frame_size,
    cell_size,
    cell_origin,
    canvas_bounds,
    cell_center,
    cell_edges,
    connector_anchors,
    connector_path,
)

__all__ = [
    "DeviceProfile",
    "COMPACT",
    "WIDE",
    "PROFILES",
    "get_profile",
    "Cell",
    "Point",
    "Bounds",
    "Edges",
    "frame_size",
    "cell_size",
    "cell_origin",
    "canvas_bounds",
    "cell_center",
    "cell_edges",
    "connector_anchors",
    "connector_path",
]
