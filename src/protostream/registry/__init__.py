"""Screen registry built from parser output."""

from .models import ScreenEntity, RegistrySnapshot
from .registry import ScreenRegistry

__all__ = ["ScreenEntity", "RegistrySnapshot", "ScreenRegistry"]
