"""Collaborator interfaces consumed by the message formatter."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class Localizer(Protocol):
    """Translate message keys and pick plural forms."""

    def lookup(self, key: str) -> str:
        """Return the translation of key (key itself when untranslated)."""
        ...

    def pluralize(self, singular: str, plural: str, n: int) -> str:
        """Return the singular or plural translation selected for n."""
        ...


class HtmlEscaper(Protocol):
    """Escape text for inclusion in HTML."""

    def __call__(self, text: str, *, quotes: bool = False) -> str:
        """Escape text; quotes=True also escapes single quotes."""
        ...


class MarkupDecoder(Protocol):
    """Turn the BB-code-like markup subset into HTML."""

    def decode(self, text: str) -> str: ...


class IconResolver(Protocol):
    """Render an icon as an HTML fragment."""

    def icon_for(self, name: str, alt: str = "") -> str: ...


class TemplateRenderer(Protocol):
    """Render a named template with variables."""

    def render(self, name: str, variables: Mapping[str, Any]) -> str:
        """Return the rendered template.

        Args:
            name: Template name without extension, e.g. 'message'.
            variables: Values exposed to the template.
        """
        ...
