"""SQL identifier helpers."""

from __future__ import annotations


def backquote(identifier: str) -> str:
    """Quote a database identifier with backticks.

    Embedded backticks are doubled; '*' is returned unquoted.
    """
    if identifier == "*":
        return identifier
    return "`" + identifier.replace("`", "``") + "`"
