"""Tests for follow-up prompt context."""

import pytest

from protostream.context import FOLLOWUP_RULES, build_followup_context, summarize_screens


@pytest.mark.unit
def test_summarize_screens(saved_screens):
    """Inventory lists name, root marker and cell."""
    assert summarize_screens(saved_screens) == "Home [ROOT] at [0,0], Settings at [1,0]"


@pytest.mark.unit
def test_no_screens_returns_request():
    """First generations send the request untouched."""
    assert build_followup_context([], "Make a todo app") == "Make a todo app"


@pytest.mark.unit
def test_followup_context(saved_screens):
    """Existing screens and edit rules wrap the request."""
    prompt = build_followup_context(reversed(saved_screens), "Add dark mode", "website")

    assert prompt.startswith("You are updating an existing website prototype.")
    assert "Current screens: Home [ROOT] at [0,0], Settings at [1,0]" in prompt
    assert "=== Home [0,0] [ROOT] ===\n<div>Old home</div>" in prompt
    assert prompt.index("=== Home") < prompt.index("=== Settings")
    assert 'User\'s request: "Add dark mode"' in prompt
    assert prompt.endswith(FOLLOWUP_RULES)
