"""Configuration subpackage."""

from dbadmin.config.config import (
    AppSettings,
    DocsSettings,
    LocaleSettings,
    LoggingSettings,
    ServerSettings,
    Settings,
    ThemeSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "DocsSettings",
    "LocaleSettings",
    "LoggingSettings",
    "ServerSettings",
    "Settings",
    "ThemeSettings",
    "get_settings",
]
