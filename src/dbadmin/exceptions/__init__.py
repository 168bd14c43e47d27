"""Exceptions subpackage."""

from dbadmin.exceptions.exceptions import (
    DbAdminError,
    FormatError,
    MissingRequiredConfigError,
    TemplateRenderError,
    ThemeNotFoundError,
)

__all__ = [
    "DbAdminError",
    "FormatError",
    "MissingRequiredConfigError",
    "TemplateRenderError",
    "ThemeNotFoundError",
]
