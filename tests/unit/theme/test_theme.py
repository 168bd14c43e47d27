# -*- coding: utf-8 -*-
"""Unit tests for Theme."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from dbadmin.config import Settings
from dbadmin.theme import Theme


@pytest.fixture
def theme_factory(
    settings: Settings,
    get_logger: Callable[[str], Any],
) -> Callable[[Path], Theme]:
    def _build(fs_path: Path) -> Theme:
        theme = Theme.from_settings(settings, get_logger=get_logger)
        theme.path = f"./themes/{fs_path.name}"
        theme.fs_path = str(fs_path)
        return theme

    return _build


def test_load_info_reads_metadata(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
) -> None:
    path = make_theme(
        "pmahomme",
        info={
            "name": "pmahomme",
            "version": "6.0.1",
            "description": "Default theme",
            "supports": ["6.0"],
            "colorModes": ["light", "dark"],
        },
    )
    theme = theme_factory(path)

    assert theme.load_info() is True
    assert theme.name == "pmahomme"
    assert theme.version == "6.0.1"
    assert theme.color_modes == ["light", "dark"]
    assert theme.mtime_info > 0
    assert theme.filesize_info == (path / "theme.json").stat().st_size


def test_load_info_defaults_color_modes_to_light(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
) -> None:
    theme = theme_factory(make_theme("original"))

    assert theme.load_info() is True
    assert theme.color_modes == ["light"]


def test_load_info_returns_true_when_file_unchanged(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
) -> None:
    theme = theme_factory(make_theme("original"))
    assert theme.load_info() is True
    theme.name = "changed in memory"

    assert theme.load_info() is True
    assert theme.name == "changed in memory"


def test_load_info_fails_without_theme_json(
    themes_dir: Path,
    theme_factory: Callable[[Path], Theme],
) -> None:
    path = themes_dir / "empty"
    path.mkdir()

    assert theme_factory(path).load_info() is False


def test_load_info_fails_on_invalid_json(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
    get_logger: Callable[[str], Any],
) -> None:
    path = make_theme("broken")
    (path / "theme.json").write_text("{not json", encoding="utf-8")

    assert theme_factory(path).load_info() is False
    get_logger("Theme").warning.assert_called_once()
    assert get_logger("Theme").warning.call_args.args[0] == "theme_info_unreadable"


@pytest.mark.parametrize(
    "info",
    [
        {"version": "6.0.0", "supports": ["6.0"]},
        {"name": "x", "supports": ["6.0"]},
        {"name": "x", "version": "6.0.0"},
        {"name": "x", "version": "6.0.0", "supports": ["5.2"]},
        {"name": "x", "version": "6.0.0", "supports": "6.0"},
    ],
)
def test_load_info_rejects_incomplete_or_unsupported_metadata(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
    info: dict[str, Any],
) -> None:
    theme = theme_factory(make_theme("bad", info=info))

    assert theme.load_info() is False


def test_load_info_rejects_non_object_json(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
) -> None:
    path = make_theme("list")
    (path / "theme.json").write_text("[1, 2]", encoding="utf-8")

    assert theme_factory(path).load_info() is False


def test_check_img_path_prefers_own_images(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
) -> None:
    theme = theme_factory(make_theme("original"))

    assert theme.check_img_path() is True
    assert theme.img_path == "./themes/original/img/"


def test_check_img_path_uses_fallback_theme(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
) -> None:
    make_theme("pmahomme")
    theme = theme_factory(make_theme("bare", with_img=False))

    assert theme.check_img_path() is True
    assert theme.img_path == "./themes/pmahomme/img/"


def test_check_img_path_fails_without_any_images(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
    get_logger: Callable[[str], Any],
) -> None:
    theme = theme_factory(make_theme("bare", with_img=False))

    assert theme.check_img_path() is False
    get_logger("Theme").error.assert_called_once_with("theme_no_valid_image_path", theme_name="")


def test_get_img_path(
    make_theme: Callable[..., Path],
    theme_factory: Callable[[Path], Theme],
) -> None:
    theme = theme_factory(make_theme("original", images=["logo.png", "default.png"]))
    assert theme.check_img_path() is True

    assert theme.get_img_path() == "./themes/original/img/"
    assert theme.get_img_path("logo.png") == "./themes/original/img/logo.png"
    assert theme.get_img_path("missing.png") == "./themes/pmahomme/img/missing.png"
    assert theme.get_img_path("missing.png", "default.png") == "./themes/original/img/default.png"


def test_load_returns_ready_theme(
    settings: Settings,
    make_theme: Callable[..., Path],
    get_logger: Callable[[str], Any],
) -> None:
    path = make_theme("original")

    theme = Theme.load(
        "./themes/original",
        str(path),
        "original",
        themes_fs_dir=settings.theme.themes_fs_dir,
        get_logger=get_logger,
    )

    assert theme is not None
    assert theme.id == "original"
    assert theme.name == "Original"
    assert theme.img_path == "./themes/original/img/"


def test_load_returns_none_for_invalid_theme(
    settings: Settings,
    themes_dir: Path,
    get_logger: Callable[[str], Any],
) -> None:
    (themes_dir / "nothing").mkdir()

    theme = Theme.load(
        "./themes/nothing",
        str(themes_dir / "nothing"),
        "nothing",
        themes_fs_dir=settings.theme.themes_fs_dir,
        get_logger=get_logger,
    )

    assert theme is None


@pytest.mark.parametrize(
    ("theme_version", "other", "expected"),
    [
        ("6.0.0", "6.0.1", True),
        ("6.0.1", "6.0.1", False),
        ("6.1.0", "6.0.9", False),
        ("5.2", "5.10", True),
        ("6.0.0-dev", "6.0.1", True),
    ],
)
def test_check_version(theme_version: str, other: str, expected: bool) -> None:
    theme = Theme()
    theme.version = theme_version

    assert theme.check_version(other) is expected
