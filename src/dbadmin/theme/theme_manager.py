# -*- coding: utf-8 -*-
"""Discovery and caching of installed themes."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import structlog
from cachetools import LRUCache

from dbadmin.config import Settings
from dbadmin.exceptions import ThemeNotFoundError
from dbadmin.theme.theme import Theme


class ThemeManager:
    """Load themes from the themes directory.

    Loaded themes are kept in a cachetools.LRUCache; a cached theme is
    refreshed through Theme.load_info, which is a no-op while theme.json is
    unchanged.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._settings = settings
        self._get_logger = get_logger
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._cache: LRUCache[str, Theme] = LRUCache(maxsize=settings.theme.cache_size)

    @property
    def themes_dir(self) -> str:
        """Public URL of the themes directory."""
        return self._settings.theme.themes_url

    @property
    def themes_fs_dir(self) -> Path:
        return Path(self._settings.theme.themes_fs_dir)

    def available_theme_ids(self) -> list[str]:
        """Sorted names of the directories holding a theme.json."""
        if not self.themes_fs_dir.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self.themes_fs_dir.iterdir()
            if entry.is_dir() and (entry / "theme.json").is_file()
        )

    def get_theme(self, theme_id: str) -> Theme:
        """Return the loaded theme theme_id.

        Raises:
            ThemeNotFoundError: If the theme is missing or invalid.
        """
        cached = self._cache.get(theme_id)
        if cached is not None and cached.load_info():
            return cached

        theme = Theme.load(
            f"{self.themes_dir}{theme_id}",
            str(self.themes_fs_dir / theme_id),
            theme_id,
            themes_url=self._settings.theme.themes_url,
            themes_fs_dir=self._settings.theme.themes_fs_dir,
            fallback_theme=self._settings.theme.fallback_theme,
            version_series=self._settings.app.version_series,
            get_logger=self._get_logger,
        )
        if theme is None:
            self._cache.pop(theme_id, None)
            self._logger.warning("theme_load_failed", theme_id=theme_id)
            raise ThemeNotFoundError(theme_id)

        self._cache[theme_id] = theme
        self._logger.debug("theme_loaded", theme_id=theme_id, theme_version=theme.version)
        return theme

    def get_fallback_theme(self) -> Theme:
        return self.get_theme(self._settings.theme.fallback_theme)

    def list_themes(self) -> list[Theme]:
        """Every valid installed theme; invalid ones are skipped."""
        themes: list[Theme] = []
        for theme_id in self.available_theme_ids():
            try:
                themes.append(self.get_theme(theme_id))
            except ThemeNotFoundError:
                continue
        return themes
