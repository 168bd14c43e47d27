"""Custom exceptions for message formatting, templates and themes."""

from __future__ import annotations


class DbAdminError(Exception):
    """Base exception for dbadmin errors."""

    pass


class MissingRequiredConfigError(DbAdminError):
    """Raised when a required configuration value is missing."""

    pass


class FormatError(DbAdminError, ValueError):
    """Raised when message parameters do not match the format placeholders."""

    def __init__(
        self,
        message: str,
        *,
        template: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.template = template
        self.cause = cause


class TemplateRenderError(DbAdminError):
    """Raised when a template cannot be found or rendered."""

    def __init__(
        self,
        message: str,
        *,
        template_name: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.template_name = template_name
        self.cause = cause


class ThemeNotFoundError(DbAdminError):
    """Raised when a theme id cannot be resolved to a valid theme."""

    def __init__(self, theme_id: str) -> None:
        super().__init__(f"Theme not found: {theme_id}")
        self.theme_id = theme_id
