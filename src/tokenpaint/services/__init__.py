"""Service layer helpers shared by the command line and embedding surfaces."""

from .settings import Settings, SettingsStore

__all__ = ["Settings", "SettingsStore"]
