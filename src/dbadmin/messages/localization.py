# -*- coding: utf-8 -*-
"""gettext-backed localizer."""

from __future__ import annotations

import gettext
from typing import Any, Callable, Optional

import structlog

from dbadmin.config import LocaleSettings


class GettextLocalizer:
    """Translate strings through a gettext catalog.

    Falls back to the untranslated strings when no catalog is found, so an
    empty deployment behaves like the source language.
    """

    def __init__(
        self,
        translations: gettext.NullTranslations | None = None,
    ) -> None:
        self._translations = translations or gettext.NullTranslations()

    @classmethod
    def from_settings(
        cls,
        settings: LocaleSettings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> GettextLocalizer:
        """Load the catalog described by settings."""
        logger = get_logger(logger_name or cls.__name__)
        translations = gettext.translation(
            settings.domain,
            localedir=settings.locale_dir,
            languages=[settings.language],
            fallback=True,
        )
        logger.debug(
            "localizer_catalog_loaded",
            locale_domain=settings.domain,
            locale_language=settings.language,
            locale_fallback=type(translations) is gettext.NullTranslations,
        )
        return cls(translations)

    def lookup(self, key: str) -> str:
        if not key:
            return key
        return self._translations.gettext(key)

    def pluralize(self, singular: str, plural: str, n: int) -> str:
        return self._translations.ngettext(singular, plural, n)
