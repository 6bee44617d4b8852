"""
Prototype assembly
Compiles screens into one navigable document, plus flow extraction and previews
"""

from .builder import (
    AssemblyOptions,
    NAVIGATION_ATTRIBUTE,
    PrototypeBuilder,
    build_prototype,
    entry_screen,
)
from .flows import (
    FlowConnection,
    NavigationEdge,
    extract_navigation_edges,
    extract_targets,
    flow_connections,
    navigation_graph,
)
from .preview import render_screen_document
from .runtime import TAILWIND_CDN

__all__ = [
    "AssemblyOptions",
    "NAVIGATION_ATTRIBUTE",
    "PrototypeBuilder",
    "build_prototype",
    "entry_screen",
    "FlowConnection",
    "NavigationEdge",
    "extract_navigation_edges",
    "extract_targets",
    "flow_connections",
    "navigation_graph",
    "render_screen_document",
    "TAILWIND_CDN",
]
