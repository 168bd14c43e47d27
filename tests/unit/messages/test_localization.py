# -*- coding: utf-8 -*-
"""Unit tests for GettextLocalizer."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from dbadmin.config import LocaleSettings
from dbadmin.messages import GettextLocalizer


def test_lookup_without_catalog_returns_key(localizer: GettextLocalizer) -> None:
    assert localizer.lookup("Error") == "Error"


def test_lookup_of_empty_key_returns_empty_string(localizer: GettextLocalizer) -> None:
    assert localizer.lookup("") == ""


def test_lookup_uses_catalog(
    catalog_localizer: Callable[[dict[str, str]], GettextLocalizer],
) -> None:
    localizer = catalog_localizer({"Error": "Fehler"})

    assert localizer.lookup("Error") == "Fehler"
    assert localizer.lookup("Unknown") == "Unknown"


def test_pluralize_selects_form_by_count(localizer: GettextLocalizer) -> None:
    assert localizer.pluralize("%d row", "%d rows", 1) == "%d row"
    assert localizer.pluralize("%d row", "%d rows", 0) == "%d rows"
    assert localizer.pluralize("%d row", "%d rows", 2) == "%d rows"


def test_from_settings_falls_back_without_catalog(
    tmp_path: Path,
    get_logger: Callable[[str], Any],
) -> None:
    settings = LocaleSettings(domain="dbadmin", locale_dir=str(tmp_path), language="de")

    localizer = GettextLocalizer.from_settings(settings, get_logger=get_logger)

    assert localizer.lookup("Error") == "Error"
    get_logger("GettextLocalizer").debug.assert_called_once()
    assert get_logger("GettextLocalizer").debug.call_args.kwargs["locale_fallback"] is True
