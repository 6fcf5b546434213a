"""Configuration for Style-Report."""

from .settings import DEFAULT_COMMAND, ReportSettings, SettingsLoader

__all__ = ["DEFAULT_COMMAND", "ReportSettings", "SettingsLoader"]
