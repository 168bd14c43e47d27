"""Icon rendering for messages and markup."""

from __future__ import annotations

from dbadmin.messages.escaping import escape_html


class SpriteIconResolver:
    """Render icons as CSS sprite <img> tags.

    The image itself is a transparent placeholder; the theme stylesheet maps
    the ``ic_<name>`` class to the actual sprite.
    """

    def __init__(self, themes_url: str = "./themes/") -> None:
        self._placeholder = f"{themes_url}dot.gif"

    def icon_for(self, name: str, alt: str = "") -> str:
        alt = escape_html(alt)
        return (
            f'<img src="{self._placeholder}" title="{alt}" alt="{alt}"'
            f' class="icon ic_{name}">'
        )
