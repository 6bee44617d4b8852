"""Single-screen documents for live preview and per-screen export."""

import html

from ..grid import DeviceProfile
from .builder import AssemblyOptions, render_head_links
from .runtime import SCREEN_DOCUMENT


def render_screen_document(
    markup: str,
    profile: DeviceProfile,
    title: str = "Preview",
    options: AssemblyOptions | None = None,
) -> str:
    """
    Wrap one screen's markup (possibly still streaming) in a standalone document.

    Partial markup is embedded as-is; browsers close dangling tags themselves.
    """
    if profile is None:
        raise ValueError("render_screen_document requires a device profile")
    options = options or AssemblyOptions()

    return SCREEN_DOCUMENT.substitute(
        width=profile.screen_width,
        height=profile.screen_height,
        title=html.escape(title),
        stylesheets=render_head_links(options),
        markup=markup,
    )
