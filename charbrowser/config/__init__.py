"""Configuration management."""

from .paths import AppPaths
from .settings import ApiSettings, AppSettings, DisplaySettings, WindowSettings

__all__ = [
    "ApiSettings",
    "AppSettings",
    "DisplaySettings",
    "WindowSettings",
    "AppPaths",
]
