"""HTML escaping in the two entity modes used by messages."""

from __future__ import annotations

from typing import Any

_COMPAT_TABLE = str.maketrans(
    {
        "&": "&amp;",
        '"': "&quot;",
        "<": "&lt;",
        ">": "&gt;",
    }
)

_QUOTES_TABLE = str.maketrans(
    {
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#039;",
        "<": "&lt;",
        ">": "&gt;",
    }
)


def escape_html(text: Any, *, quotes: bool = False) -> str:
    """Escape &, ", < and > in str(text), plus ' when quotes is True.

    Existing entities are encoded again ('&amp;' -> '&amp;amp;').
    """
    return str(text).translate(_QUOTES_TABLE if quotes else _COMPAT_TABLE)
