"""Themes."""

from dbadmin.theme.theme import Theme, ThemeInfoSchema
from dbadmin.theme.theme_manager import ThemeManager

__all__ = ["Theme", "ThemeInfoSchema", "ThemeManager"]
