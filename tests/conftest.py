"""Pytest configuration and fixtures."""

import os

import pytest

from protostream.core import Settings
from protostream.grid import COMPACT, WIDE
from protostream.protocol import parse_stream
from protostream.registry import ScreenEntity, ScreenRegistry


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["PROTO_LOG_LEVEL"] = "DEBUG"
    os.environ["PROTO_ENABLE_CACHE"] = "false"  # Sessions build fresh documents in tests


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings, independent of the process-wide cache."""
    return Settings(enable_cache=False)


@pytest.fixture
def compact():
    """Phone-sized profile."""
    return COMPACT


@pytest.fixture
def wide():
    """Desktop-sized profile."""
    return WIDE


# ============================================================================
# Stream Fixtures
# ============================================================================

@pytest.fixture
def single_screen_stream():
    """Project metadata plus one root screen."""
    return (
        "<!-- PROJECT_NAME: Test -->\n"
        "<!-- PROJECT_ICON: 🧪 -->\n"
        "<!-- SCREEN_START: Home [0,0] [ROOT] -->\n"
        "<div>Hi</div>\n"
        "<!-- SCREEN_END -->"
    )


@pytest.fixture
def flow_stream():
    """Three linked screens with a chat message in between."""
    return (
        "<!-- PROJECT_NAME: Habit Tracker -->\n"
        "<!-- MESSAGE: Building your app -->\n"
        "<!-- SCREEN_START: Home [0,0] [ROOT] -->\n"
        '<div><button data-flow="screen-settings">Settings</button>'
        '<a href="#screen-profile">Profile</a></div>\n'
        "<!-- SCREEN_END -->\n"
        "<!-- SCREEN_START: Settings [1,0] -->\n"
        '<div><button data-flow="screen-home">Back</button></div>\n'
        "<!-- SCREEN_END -->\n"
        "<!-- SCREEN_START: Profile [0,1] -->\n"
        "<div>Me</div>\n"
        "<!-- SCREEN_END -->"
    )


# ============================================================================
# Registry Fixtures
# ============================================================================

@pytest.fixture
def flow_registry(flow_stream):
    """Registry built from the three-screen stream."""
    return ScreenRegistry.rebuild(parse_stream(flow_stream))


@pytest.fixture
def saved_screens():
    """Screens persisted by an earlier generation."""
    return [
        ScreenEntity(name="Home", id="screen-home", markup="<div>Old home</div>",
                     grid_column=0, grid_row=0, is_root=True, order=0),
        ScreenEntity(name="Settings", id="screen-settings", markup="<div>Old settings</div>",
                     grid_column=1, grid_row=0, order=1),
    ]
