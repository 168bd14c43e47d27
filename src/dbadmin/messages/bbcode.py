# -*- coding: utf-8 -*-
"""BB-code decoder for trusted message markup.

Only the small tag set used by message catalogs is recognised:

    [em] [strong] [code] [kbd] [sup] [sub] [br]   simple formatting
    [a@url@target]...[/a]                         links to allowed URLs
    [doc@page@anchor]...[/doc]                    documentation links
    [dochelpicon]                                 documentation help icon

Input is trusted: HTML already present in the text is passed through.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from urllib.parse import quote

from dbadmin.messages.types import IconResolver

_SIMPLE_TAGS: dict[str, str] = {
    "[em]": "<em>",
    "[/em]": "</em>",
    "[strong]": "<strong>",
    "[/strong]": "</strong>",
    "[code]": "<code>",
    "[/code]": "</code>",
    "[kbd]": "<kbd>",
    "[/kbd]": "</kbd>",
    "[br]": "<br>",
    "[/a]": "</a>",
    "[/doc]": "</a>",
    "[sup]": "<sup>",
    "[/sup]": "</sup>",
    "[sub]": "<sub>",
    "[/sub]": "</sub>",
}

_LINK = re.compile(r'\[a@([^\]"@]*)(@([^\]"]*))?\]')
_DOC_LINK = re.compile(r"\[doc@([a-zA-Z0-9_-]+)(@[a-zA-Z0-9_-]*)?\]")
_EXTERNAL = re.compile(r"^https?://", re.IGNORECASE)


class BBCodeDecoder:
    """Decode BB-code markup into HTML."""

    def __init__(
        self,
        *,
        docs_base_url: str,
        redirect_url: str,
        allowed_link_prefixes: Sequence[str],
        icons: IconResolver,
        translate: Callable[[str], str] = lambda text: text,
    ) -> None:
        """Initialize the decoder.

        Args:
            docs_base_url: Base URL of the documentation, ending with '/'.
            redirect_url: Prefix through which external links are routed.
            allowed_link_prefixes: URL prefixes accepted in [a@...] tags.
            icons: Icon resolver for [dochelpicon].
            translate: Localizer lookup used for the help icon alt text.
        """
        self._docs_base_url = docs_base_url
        self._redirect_url = redirect_url
        self._allowed_link_prefixes = tuple(allowed_link_prefixes)
        self._icons = icons
        self._translate = translate

    def decode(self, text: str) -> str:
        """Return text with every recognised tag replaced by HTML."""
        replacements = dict(_SIMPLE_TAGS)
        replacements["[dochelpicon]"] = self._icons.icon_for(
            "b_help", self._translate("Documentation")
        )
        text = _replace_all(text, replacements)
        text = _LINK.sub(self._replace_link, text)
        return _DOC_LINK.sub(self._replace_doc_link, text)

    def is_allowed_link(self, url: str) -> bool:
        """Return True if url starts with one of the allowed prefixes."""
        return url.startswith(self._allowed_link_prefixes)

    def doc_link(self, page: str, anchor: str = "") -> str:
        """Return the documentation URL for page#anchor.

        ``faqN`` pages live in faq.html and ``cfg_*`` pages in config.html.
        """
        if page.startswith("faq"):
            page, anchor = "faq", page
        elif page.startswith("cfg_"):
            page, anchor = "config", page
        url = f"{self._docs_base_url}{page}.html"
        if anchor:
            url += f"#{anchor}"
        return self._external(url)

    def _external(self, url: str) -> str:
        if not self._redirect_url:
            return url
        return self._redirect_url + quote(url, safe="")

    def _replace_link(self, match: re.Match[str]) -> str:
        url = match.group(1)
        if not self.is_allowed_link(url):
            return match.group(0)

        target = ""
        if match.group(3):
            target = f' target="{match.group(3)}"'
            if match.group(3) == "_blank":
                target += ' rel="noopener noreferrer"'

        if _EXTERNAL.match(url):
            url = self._external(url)
        return f'<a href="{url}"{target}>'

    def _replace_doc_link(self, match: re.Match[str]) -> str:
        anchor = (match.group(2) or "")[1:]
        return f'<a href="{self.doc_link(match.group(1), anchor)}" target="documentation">'


def _replace_all(text: str, replacements: dict[str, str]) -> str:
    """Replace every key in one pass, longest key first (like strtr)."""
    pattern = re.compile(
        "|".join(re.escape(key) for key in sorted(replacements, key=len, reverse=True))
    )
    return pattern.sub(lambda m: replacements[m.group(0)], text)
