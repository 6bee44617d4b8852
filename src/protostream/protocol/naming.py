"""Screen name <-> screen id mapping.

"Home Screen"     -> "screen-home-screen"
"User Profile!!"  -> "screen-user-profile"
"""

import re

SCREEN_ID_PREFIX = "screen-"
UNTITLED = "untitled"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to '-', trim '-' at the ends."""
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def screen_id(name: str) -> str:
    """Derive the URL-safe container id for a screen name."""
    return SCREEN_ID_PREFIX + (slugify(name) or UNTITLED)
