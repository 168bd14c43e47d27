# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, THEME__FALLBACK_THEME.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore", env_prefix="APP__")

    app_name: str = "dbadmin"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"
    version_series: str = Field(
        default="6.0",
        description="Release series that themes must declare in their 'supports' list.",
    )


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore", env_prefix="LOGGING__")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/dbadmin.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class LocaleSettings(BaseSettings):
    """gettext catalog lookup (from env LOCALE__*)."""

    model_config = SettingsConfigDict(extra="ignore", env_prefix="LOCALE__")

    domain: str = Field(default="dbadmin", description="gettext domain (catalog file name).")
    locale_dir: Optional[str] = Field(
        default=None,
        description="Directory holding <lang>/LC_MESSAGES/<domain>.mo; None uses the system default.",
    )
    language: str = Field(default="en", description="Language code used for translations.")


class DocsSettings(BaseSettings):
    """Documentation and outbound link handling for BB-code decoding."""

    model_config = SettingsConfigDict(extra="ignore", env_prefix="DOCS__")

    base_url: str = Field(
        default="https://docs.phpmyadmin.net/en/latest/",
        description="Base URL of the HTML documentation (must end with '/').",
    )
    redirect_url: str = Field(
        default="./url.php?url=",
        description="Redirector prefix used for external links.",
    )
    # Plain string so pydantic-settings does not try to JSON-decode it.
    allowed_link_prefixes: str = Field(
        default="./url.php?url=,https://www.phpmyadmin.net/,https://docs.phpmyadmin.net/",
        description="Comma-separated URL prefixes allowed in [a@...] links. Env: DOCS__ALLOWED_LINK_PREFIXES.",
    )

    @computed_field
    @property
    def allowed_link_prefix_list(self) -> list[str]:
        """Parse comma-separated allowed_link_prefixes into a list of stripped strings."""
        if not self.allowed_link_prefixes or not self.allowed_link_prefixes.strip():
            return []
        return [s.strip() for s in self.allowed_link_prefixes.split(",") if s.strip()]


class ThemeSettings(BaseSettings):
    """Theme location and caching (from env THEME__*)."""

    model_config = SettingsConfigDict(extra="ignore", env_prefix="THEME__")

    themes_url: str = Field(default="./themes/", description="Public URL prefix of the themes directory.")
    themes_fs_dir: str = Field(default="public/themes", description="Filesystem directory holding themes.")
    fallback_theme: str = Field(default="pmahomme", description="Theme used when images are missing.")
    cache_size: int = Field(default=16, ge=1, le=256, description="Maximum loaded themes kept in memory.")


class ServerSettings(BaseSettings):
    """Currently selected database server (from env SERVER__*)."""

    model_config = SettingsConfigDict(extra="ignore", env_prefix="SERVER__")

    index: int = Field(default=1, ge=0, description="Index of the selected server.")
    user: Optional[str] = Field(default=None, description="User name on the selected server.")
    foreign_key_checks: bool = Field(
        default=True,
        description="Default state of the foreign key check toggle on destructive forms.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, LOCALE__LANGUAGE.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    locale: LocaleSettings = Field(default_factory=LocaleSettings)
    docs: DocsSettings = Field(default_factory=DocsSettings)
    theme: ThemeSettings = Field(default_factory=ThemeSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(theme={"fallback_theme": "original"})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from dbadmin.config import get_settings

        settings = get_settings()
        series = settings.app.version_series
        fallback = settings.theme.fallback_theme
    """
    return Settings()
