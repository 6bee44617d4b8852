"""Device profiles: viewport size plus canvas spacing."""

from pydantic import BaseModel, ConfigDict, Field


class DeviceProfile(BaseModel):
    """Screen viewport and canvas layout constants for one device class."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    screen_width: int = Field(gt=0)
    screen_height: int = Field(gt=0)
    horizontal_gap: int = Field(ge=0, description="Space between columns (room for connectors)")
    vertical_gap: int = Field(ge=0, description="Space between rows")
    frame_margin: int = Field(ge=0, description="Device frame padding on every side")
    label: str = Field(default="", description="Platform name used in follow-up prompts")


COMPACT = DeviceProfile(
    name="compact",
    screen_width=390,
    screen_height=844,
    horizontal_gap=120,
    vertical_gap=80,
    frame_margin=24,
    label="mobile app",
)

WIDE = DeviceProfile(
    name="wide",
    screen_width=1440,
    screen_height=900,
    horizontal_gap=150,
    vertical_gap=100,
    frame_margin=0,  # Browser chrome is drawn separately
    label="website",
)

PROFILES: dict[str, DeviceProfile] = {
    "compact": COMPACT,
    "wide": WIDE,
    "mobile": COMPACT,
    "desktop": WIDE,
}


def get_profile(name: str) -> DeviceProfile:
    """
    Look up a predefined profile by name or platform alias.

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return PROFILES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown device profile: {name!r}") from None
