"""User-facing status messages."""

from dbadmin.messages.bbcode import BBCodeDecoder
from dbadmin.messages.escaping import escape_html
from dbadmin.messages.formatter import MessageFormatter
from dbadmin.messages.icons import SpriteIconResolver
from dbadmin.messages.levels import MessageLevel
from dbadmin.messages.localization import GettextLocalizer
from dbadmin.messages.message import Message, Param
from dbadmin.messages.sprintf import sprintf, stringify
from dbadmin.messages.types import (
    HtmlEscaper,
    IconResolver,
    Localizer,
    MarkupDecoder,
    TemplateRenderer,
)

__all__ = [
    "BBCodeDecoder",
    "GettextLocalizer",
    "HtmlEscaper",
    "IconResolver",
    "Localizer",
    "MarkupDecoder",
    "Message",
    "MessageFormatter",
    "MessageLevel",
    "Param",
    "SpriteIconResolver",
    "TemplateRenderer",
    "escape_html",
    "sprintf",
    "stringify",
]
