# -*- coding: utf-8 -*-
"""Theme metadata and image paths.

A theme lives in its own directory holding a ``theme.json`` file and an
``img/`` directory. Images missing from a theme are taken from the fallback
theme.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Optional, TypedDict, cast

import structlog

from dbadmin.config import Settings


class ThemeInfoSchema(TypedDict, total=False):
    """theme.json contents. name, version and supports are required."""

    name: str
    version: str
    description: str
    author: str
    url: str
    supports: list[str]
    colorModes: list[str]


_REQUIRED_MEMBERS = ("name", "version", "supports")


class Theme:
    """One theme: metadata from theme.json plus URL and filesystem paths."""

    def __init__(
        self,
        *,
        themes_url: str = "./themes/",
        themes_fs_dir: str = "public/themes",
        fallback_theme: str = "pmahomme",
        version_series: str = "6.0",
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._themes_url = themes_url
        self._themes_fs_dir = themes_fs_dir
        self._fallback_theme = fallback_theme
        self._version_series = version_series
        self._logger = get_logger(logger_name or self.__class__.__name__)

        self.id = ""
        self.name = ""
        self.version = "0.0.0.0"
        self.path = ""
        """URL of the theme directory."""
        self.fs_path = ""
        """Filesystem directory of the theme."""
        self.img_path = ""
        self.img_path_fs = ""
        self.mtime_info = 0
        """mtime of theme.json when last loaded."""
        self.filesize_info = 0
        self.color_modes: list[str] = ["light"]

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> Theme:
        return cls(
            themes_url=settings.theme.themes_url,
            themes_fs_dir=settings.theme.themes_fs_dir,
            fallback_theme=settings.theme.fallback_theme,
            version_series=settings.app.version_series,
            **kwargs,
        )

    @classmethod
    def load(
        cls,
        theme_url: str,
        theme_fs_path: str,
        theme_id: str,
        **kwargs: Any,
    ) -> Theme | None:
        """Return a fully loaded theme, or None if its metadata or images are unusable.

        Args:
            theme_url: URL of the theme directory.
            theme_fs_path: Filesystem directory of the theme.
            theme_id: Directory name used as the theme id.
            **kwargs: Passed to the constructor.
        """
        theme = cls(**kwargs)
        theme.path = theme_url
        theme.fs_path = theme_fs_path
        if not theme.load_info():
            return None
        if not theme.check_img_path():
            return None
        theme.id = theme_id
        return theme

    @property
    def info_file(self) -> Path:
        return Path(self.fs_path) / "theme.json"

    def load_info(self) -> bool:
        """Read theme.json. Returns False when it is missing or invalid."""
        info_file = self.info_file
        try:
            stat = info_file.stat()
        except OSError:
            return False
        if not info_file.is_file():
            return False
        if self.mtime_info == int(stat.st_mtime):
            return True

        try:
            data = json.loads(info_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            self._logger.warning(
                "theme_info_unreadable",
                theme_info_file=str(info_file),
                error_type=type(exc).__name__,
            )
            return False
        if not isinstance(data, dict):
            return False
        info = cast(ThemeInfoSchema, data)

        if any(info.get(member) is None for member in _REQUIRED_MEMBERS):
            return False
        supports = info["supports"]
        if not isinstance(supports, list) or self._version_series not in supports:
            self._logger.debug(
                "theme_unsupported_series",
                theme_info_file=str(info_file),
                version_series=self._version_series,
            )
            return False

        self.mtime_info = int(stat.st_mtime)
        self.filesize_info = stat.st_size
        self.version = str(info["version"])
        self.name = str(info["name"])
        color_modes = info.get("colorModes")
        if isinstance(color_modes, list) and color_modes:
            self.color_modes = [str(mode) for mode in color_modes]
        return True

    def check_img_path(self) -> bool:
        """Set the image paths from this theme, else from the fallback theme."""
        own_img_dir = Path(self.fs_path) / "img"
        if own_img_dir.is_dir():
            self.img_path = f"{self.path}/img/"
            self.img_path_fs = f"{own_img_dir}{os.sep}"
            return True

        fallback_img_dir = Path(self._themes_fs_dir) / self._fallback_theme / "img"
        if fallback_img_dir.is_dir():
            self.img_path = f"{self._themes_url}{self._fallback_theme}/img/"
            self.img_path_fs = f"{fallback_img_dir}{os.sep}"
            return True

        self._logger.error("theme_no_valid_image_path", theme_name=self.name)
        return False

    def get_img_path(self, file: str | None = None, fallback: str | None = None) -> str:
        """Return the URL of an image.

        Args:
            file: Image file name; None returns the image directory URL.
            fallback: Image used when file is missing from this theme.
        """
        if file is None:
            return self.img_path

        if self.img_path_fs and os.access(self.img_path_fs + file, os.R_OK):
            return self.img_path + file

        if fallback is not None:
            return self.get_img_path(fallback)

        return f"{self._themes_url}{self._fallback_theme}/img/{file}"

    def check_version(self, version: str) -> bool:
        """Return True if this theme's version is lower than version."""
        return _version_tuple(self.version) < _version_tuple(version)


def _version_tuple(version: str) -> tuple[int, ...]:
    parts: list[int] = []
    for piece in version.split("."):
        digits = "".join(ch for ch in piece if ch.isdigit())
        parts.append(int(digits) if digits else 0)
    return tuple(parts)
