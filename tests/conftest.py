# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import gettext
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

from dbadmin.config import Settings, ThemeSettings
from dbadmin.messages import (
    BBCodeDecoder,
    GettextLocalizer,
    MessageFormatter,
    SpriteIconResolver,
)
from dbadmin.templating import JinjaTemplateRenderer


class CatalogTranslations(gettext.NullTranslations):
    """In-memory gettext catalog: {msgid: msgstr}."""

    def __init__(self, catalog: dict[str, str]) -> None:
        super().__init__()
        self._catalog = catalog

    def gettext(self, message: str) -> str:
        return self._catalog.get(message, message)


@pytest.fixture
def get_logger() -> Callable[[str], Any]:
    """Logger factory returning one Mock, so tests can assert on log calls."""
    logger = Mock()
    return lambda name: logger


@pytest.fixture
def localizer() -> GettextLocalizer:
    """Localizer without a catalog (source language)."""
    return GettextLocalizer()


@pytest.fixture
def catalog_localizer() -> Callable[[dict[str, str]], GettextLocalizer]:
    """Build a localizer over an in-memory catalog."""
    return lambda catalog: GettextLocalizer(CatalogTranslations(catalog))


@pytest.fixture
def icons() -> SpriteIconResolver:
    return SpriteIconResolver("./themes/")


@pytest.fixture
def decoder(icons: SpriteIconResolver, localizer: GettextLocalizer) -> BBCodeDecoder:
    return BBCodeDecoder(
        docs_base_url="https://docs.phpmyadmin.net/en/latest/",
        redirect_url="./url.php?url=",
        allowed_link_prefixes=[
            "./url.php?url=",
            "https://www.phpmyadmin.net/",
            "https://docs.phpmyadmin.net/",
        ],
        icons=icons,
        translate=localizer.lookup,
    )


@pytest.fixture
def renderer() -> JinjaTemplateRenderer:
    return JinjaTemplateRenderer()


@pytest.fixture
def formatter_factory(
    localizer: GettextLocalizer,
    decoder: BBCodeDecoder,
    icons: SpriteIconResolver,
    renderer: JinjaTemplateRenderer,
) -> Callable[..., MessageFormatter]:
    """Build MessageFormatter with default collaborators and easy overrides."""

    def _build(**overrides: Any) -> MessageFormatter:
        return MessageFormatter(
            localizer=overrides.pop("localizer", localizer),
            decoder=overrides.pop("decoder", decoder),
            icons=overrides.pop("icons", icons),
            renderer=overrides.pop("renderer", renderer),
        )

    return _build


@pytest.fixture
def formatter(formatter_factory: Callable[..., MessageFormatter]) -> MessageFormatter:
    return formatter_factory()


@pytest.fixture
def themes_dir(tmp_path: Path) -> Path:
    """Empty themes directory."""
    path = tmp_path / "themes"
    path.mkdir()
    return path


@pytest.fixture
def settings(themes_dir: Path) -> Settings:
    """Settings pointing the theme directory at a temporary location."""
    return Settings(theme=ThemeSettings(themes_fs_dir=str(themes_dir)))


@pytest.fixture
def make_theme(themes_dir: Path) -> Callable[..., Path]:
    """Create themes_dir/<theme_id> with a theme.json and optionally an img/ directory."""

    def _make(
        theme_id: str,
        *,
        info: dict[str, Any] | None = None,
        images: list[str] | None = None,
        with_img: bool = True,
    ) -> Path:
        theme_path = themes_dir / theme_id
        theme_path.mkdir()
        if info is None:
            info = {"name": theme_id.title(), "version": "6.0.0", "supports": ["6.0"]}
        (theme_path / "theme.json").write_text(json.dumps(info), encoding="utf-8")
        if with_img:
            img_dir = theme_path / "img"
            img_dir.mkdir()
            for image in images or []:
                (img_dir / image).write_bytes(b"GIF89a")
        return theme_path

    return _make
