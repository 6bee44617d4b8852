"""
Follow-up Context
Describes existing screens to the model when a project is refined
"""

from collections.abc import Iterable

from .registry import ScreenEntity

FOLLOWUP_RULES = """IMPORTANT:
- Use <!-- SCREEN_EDIT: Exact Screen Name --> when modifying an existing screen
- Use <!-- SCREEN_START: New Screen Name [col,row] --> when creating a NEW screen
- Preserve grid positions when editing (don't include position in SCREEN_EDIT)
- Do NOT include PROJECT_NAME or PROJECT_ICON for follow-up requests
- Ensure all navigation uses data-flow attributes"""


def _label(screen: ScreenEntity) -> str:
    root = " [ROOT]" if screen.is_root else ""
    return f"{screen.name} [{screen.grid_column},{screen.grid_row}]{root}"


def summarize_screens(screens: Iterable[ScreenEntity]) -> str:
    """One-line inventory: "Home [ROOT] at [0,0], Settings at [1,0]"."""
    return ", ".join(
        f"{screen.name}{' [ROOT]' if screen.is_root else ''} at [{screen.grid_column},{screen.grid_row}]"
        for screen in sorted(screens, key=lambda s: s.order)
    )


def build_followup_context(
    screens: Iterable[ScreenEntity],
    request: str,
    platform_label: str = "mobile app",
) -> str:
    """
    Build the user prompt for a follow-up generation.

    Args:
        screens: Screens already in the project
        request: The user's new request
        platform_label: "mobile app" or "website"

    Returns:
        The request itself when there are no screens, otherwise the request
        wrapped with the screen inventory, current markup and edit rules
    """
    ordered = sorted(screens, key=lambda s: s.order)
    if not ordered:
        return request

    code = "\n".join(f"\n=== {_label(screen)} ===\n{screen.markup}" for screen in ordered)

    return (
        f"You are updating an existing {platform_label} prototype.\n\n"
        f"Current screens: {summarize_screens(ordered)}\n\n"
        f"Here is the complete current HTML code for each screen:\n{code}\n\n"
        f'User\'s request: "{request}"\n\n'
        f"{FOLLOWUP_RULES}"
    )
