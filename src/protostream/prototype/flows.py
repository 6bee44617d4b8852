"""Navigation edges between screens.

Edges are read from closed screen markup the way the navigation runtime
resolves a click: an element carrying exactly ``data-flow="<screen-id>"``,
otherwise an ``<a>`` whose href is ``#<screen-id>``. They are derived on
demand and never stored.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from ..grid import DeviceProfile, Point, connector_anchors, connector_path
from ..protocol import screen_id
from ..registry import ScreenEntity
from .builder import NAVIGATION_ATTRIBUTE


@dataclass(frozen=True)
class NavigationEdge:
    from_screen_id: str
    to_screen_id: str


@dataclass(frozen=True)
class FlowConnection:
    """A connector to draw on the canvas between two screens."""

    id: str
    from_screen: str
    to_screen: str
    from_cell: tuple[int, int]
    to_cell: tuple[int, int]
    start: Point
    end: Point
    path: str


_TAG = re.compile(r"""<(?P<tag>[a-zA-Z][\w-]*)(?P<attrs>(?:"[^"]*"|'[^']*'|[^'">])*)>""")


@lru_cache(maxsize=8)
def _attribute_pattern(name: str) -> re.Pattern[str]:
    # Whole attribute names only: data-flow must not match x-data-flow
    return re.compile(
        rf"""(?<![\w-]){re.escape(name)}\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')""",
        re.IGNORECASE,
    )


def _attribute_value(name: str, attrs: str) -> str | None:
    match = _attribute_pattern(name).search(attrs)
    if match is None:
        return None
    return match.group("dq") if match.group("dq") is not None else match.group("sq")


def _tag_target(tag: str, attrs: str, attribute: str) -> str | None:
    target = _attribute_value(attribute, attrs)
    if target is not None:
        return target
    if tag.lower() != "a":
        return None
    href = _attribute_value("href", attrs)
    if href is not None and href.startswith("#"):
        return href[1:]
    return None


def extract_targets(markup: str, attribute: str = NAVIGATION_ATTRIBUTE) -> list[str]:
    """Target ids referenced by navigation triggers, first occurrence order, no repeats."""
    seen: dict[str, None] = {}
    for match in _TAG.finditer(markup):
        target = _tag_target(match.group("tag"), match.group("attrs"), attribute)
        if target and target.strip():
            seen.setdefault(target.strip(), None)
    return list(seen)


def extract_navigation_edges(
    screen_name: str,
    markup: str,
    attribute: str = NAVIGATION_ATTRIBUTE,
) -> list[NavigationEdge]:
    """
    Navigation edges leaving one screen.

    Args:
        screen_name: Display name of the source screen
        markup: Its closed markup
        attribute: Trigger attribute name

    Returns:
        One edge per distinct target; targets are not checked for existence
    """
    source = screen_id(screen_name)
    return [NavigationEdge(source, target) for target in extract_targets(markup, attribute)]


def navigation_graph(
    screens: Iterable[ScreenEntity],
    attribute: str = NAVIGATION_ATTRIBUTE,
) -> list[NavigationEdge]:
    """All edges across screens, in screen order."""
    edges: list[NavigationEdge] = []
    for screen in screens:
        edges.extend(extract_navigation_edges(screen.name, screen.markup, attribute))
    return edges


def flow_connections(
    screens: Iterable[ScreenEntity],
    profile: DeviceProfile,
    attribute: str = NAVIGATION_ATTRIBUTE,
) -> list[FlowConnection]:
    """
    Connectors for the canvas view.

    A pair of screens linked in both directions is drawn once; links to
    unknown screens and links from a screen to itself are skipped.
    """
    ordered = sorted(screens, key=lambda screen: screen.order)
    by_id = {screen.id: screen for screen in ordered}
    seen_pairs: set[tuple[str, str]] = set()
    connections: list[FlowConnection] = []

    for edge in navigation_graph(ordered, attribute):
        source = by_id.get(edge.from_screen_id)
        target = by_id.get(edge.to_screen_id)
        if source is None or target is None or source.id == target.id:
            continue

        pair = tuple(sorted((source.id, target.id)))
        if pair in seen_pairs:
            continue
        seen_pairs.add(pair)

        start, end = connector_anchors(profile, source.cell, target.cell)
        connections.append(FlowConnection(
            id=f"{source.id}->{target.id}",
            from_screen=source.name,
            to_screen=target.name,
            from_cell=source.cell,
            to_cell=target.cell,
            start=start,
            end=end,
            path=connector_path(start, end),
        ))

    return connections
