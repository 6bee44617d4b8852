"""Prototype Assembler.

Compiles a list of screens into one standalone, click-through HTML document:
every screen becomes a <section> container, exactly one container is active
at load, and a small runtime swaps containers when a navigation trigger
(``data-flow="<screen-id>"`` or ``href="#<screen-id>"``) is activated.

Output is a pure function of its inputs, so identical snapshots always
produce byte-identical documents.
"""

import html
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..core import LRUCache, get_logger, hash_fields, safe_json_dumps, script_literal
from ..grid import DeviceProfile
from ..registry import ScreenEntity
from .runtime import (
    ACTIVE_CLASS,
    DEFAULT_CLASS,
    EMPTY_DOCUMENT,
    HOTSPOT_CLASS,
    NAVIGATION_SCRIPT,
    PROTOTYPE_DOCUMENT,
    PROTOTYPE_STYLE,
    TAILWIND_CDN,
)

logger = get_logger(__name__)

DEFAULT_PROJECT_NAME = "Untitled"
NAVIGATION_ATTRIBUTE = "data-flow"


class AssemblyOptions(BaseModel):
    """Presentation switches for assembled documents."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    show_hotspots: bool = Field(default=True, description="Outline navigation triggers on load")
    script_urls: tuple[str, ...] = Field(default=(TAILWIND_CDN,), description="Head scripts (Tailwind runtime)")
    stylesheet_urls: tuple[str, ...] = Field(default=())
    navigation_attribute: str = Field(default=NAVIGATION_ATTRIBUTE, pattern=r"^[a-z][a-z0-9-]*$")


def entry_screen(screens: Sequence[ScreenEntity]) -> ScreenEntity | None:
    """Root-flagged screen, else the first by order."""
    if not screens:
        return None
    return next((screen for screen in screens if screen.is_root), screens[0])


def render_head_links(options: AssemblyOptions) -> str:
    """<script> and <link> tags for external assets, one per line."""
    scripts = "".join(f'  <script src="{html.escape(url)}"></script>\n' for url in options.script_urls)
    links = "".join(
        f'  <link rel="stylesheet" href="{html.escape(url)}">\n' for url in options.stylesheet_urls
    )
    return scripts + links


def document_title(project_name: str | None) -> str:
    return f"{html.escape(project_name or DEFAULT_PROJECT_NAME)} - Prototype"


def _render_section(screen: ScreenEntity, is_entry: bool) -> str:
    classes = f"screen {DEFAULT_CLASS} {ACTIVE_CLASS}" if is_entry else "screen"
    return (
        f'<section id="{html.escape(screen.id)}" class="{classes}" '
        f'data-screen-name="{html.escape(screen.name)}">\n'
        f"{screen.markup}\n"
        f"</section>"
    )


def build_prototype(
    screens: Iterable[ScreenEntity],
    profile: DeviceProfile,
    project_name: str | None,
    options: AssemblyOptions | None = None,
) -> str:
    """
    Assemble screens into one navigable document.

    Args:
        screens: Screens to include (emitted in order)
        profile: Device profile providing the viewport size
        project_name: Document title; empty falls back to "Untitled"
        options: Presentation switches

    Returns:
        Complete HTML document; a placeholder document when screens is empty

    Raises:
        ValueError: If profile is missing (programming error)
    """
    if profile is None:
        raise ValueError("build_prototype requires a device profile")
    options = options or AssemblyOptions()

    ordered = sorted(screens, key=lambda screen: screen.order)
    stylesheets = render_head_links(options)
    title = document_title(project_name)

    if not ordered:
        logger.info("prototype_empty", profile=profile.name)
        return EMPTY_DOCUMENT.substitute(width=profile.screen_width, title=title, stylesheets=stylesheets)

    entry = entry_screen(ordered)
    sections = "\n\n".join(_render_section(screen, screen is entry) for screen in ordered)

    style = PROTOTYPE_STYLE.substitute(
        width=profile.screen_width,
        height=profile.screen_height,
        attr=options.navigation_attribute,
        hotspot=HOTSPOT_CLASS,
    )
    script = NAVIGATION_SCRIPT.substitute(
        entry_id=script_literal(entry.id),
        attr=script_literal(options.navigation_attribute),
        hotspot=script_literal(HOTSPOT_CLASS),
        active=ACTIVE_CLASS,
    )

    document = PROTOTYPE_DOCUMENT.substitute(
        width=profile.screen_width,
        title=title,
        stylesheets=stylesheets,
        style=style,
        body_class=f' class="{HOTSPOT_CLASS}"' if options.show_hotspots else "",
        sections=sections,
        script=script,
    )

    logger.info(
        "prototype_assembled",
        screens=len(ordered),
        entry=entry.id,
        profile=profile.name,
        chars=len(document),
    )
    return document


class PrototypeBuilder:
    """
    Caching front for build_prototype.

    Documents are cached under a digest of everything that affects the
    output, so re-exporting an unchanged project skips assembly.
    """

    def __init__(
        self,
        profile: DeviceProfile,
        options: AssemblyOptions | None = None,
        cache: LRUCache[str] | None = None,
    ) -> None:
        if profile is None:
            raise ValueError("PrototypeBuilder requires a device profile")
        self.profile = profile
        self.options = options or AssemblyOptions()
        self.cache = cache

    def cache_key(self, screens: Sequence[ScreenEntity], project_name: str | None) -> str:
        return hash_fields(
            project_name or "",
            self.profile.model_dump_json(),
            self.options.model_dump_json(),
            safe_json_dumps([screen.model_dump() for screen in screens]),
        )

    def build(self, screens: Iterable[ScreenEntity], project_name: str | None) -> str:
        ordered = sorted(screens, key=lambda screen: screen.order)
        if self.cache is None:
            return build_prototype(ordered, self.profile, project_name, self.options)

        key = self.cache_key(ordered, project_name)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("prototype_cache_hit", key=key)
            return cached

        document = build_prototype(ordered, self.profile, project_name, self.options)
        self.cache.set(key, document)
        return document
