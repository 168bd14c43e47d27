# -*- coding: utf-8 -*-
"""Message factory and compiler."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dbadmin.config import Settings
from dbadmin.messages.bbcode import BBCodeDecoder
from dbadmin.messages.escaping import escape_html
from dbadmin.messages.icons import SpriteIconResolver
from dbadmin.messages.levels import MessageLevel
from dbadmin.messages.localization import GettextLocalizer
from dbadmin.messages.message import Message, Param
from dbadmin.messages.sprintf import sprintf
from dbadmin.messages.types import (
    HtmlEscaper,
    IconResolver,
    Localizer,
    MarkupDecoder,
    TemplateRenderer,
)
from dbadmin.templating import JinjaTemplateRenderer

DEFAULT_SUCCESS_TEXT = "Your SQL query has been executed successfully."
DEFAULT_ERROR_TEXT = "Error"


class MessageFormatter:
    """Create messages and compile them to HTML.

    All collaborators are injected once and treated as read-only; messages
    created here keep a reference to the formatter for rendering.
    """

    def __init__(
        self,
        *,
        localizer: Localizer,
        decoder: MarkupDecoder,
        icons: IconResolver,
        renderer: TemplateRenderer,
        escaper: HtmlEscaper = escape_html,
    ) -> None:
        self.localizer = localizer
        self.decoder = decoder
        self.icons = icons
        self.renderer = renderer
        self.escaper = escaper

    @classmethod
    def from_settings(cls, settings: Settings) -> MessageFormatter:
        """Build a formatter wired with the default collaborators."""
        localizer = GettextLocalizer.from_settings(settings.locale)
        icons = SpriteIconResolver(settings.theme.themes_url)
        decoder = BBCodeDecoder(
            docs_base_url=settings.docs.base_url,
            redirect_url=settings.docs.redirect_url,
            allowed_link_prefixes=settings.docs.allowed_link_prefix_list,
            icons=icons,
            translate=localizer.lookup,
        )
        return cls(
            localizer=localizer,
            decoder=decoder,
            icons=icons,
            renderer=JinjaTemplateRenderer(),
        )

    # -- factories -----------------------------------------------------------

    def create(
        self,
        level: MessageLevel,
        text: str = "",
        *,
        raw: bool = False,
        params: Iterable[Param] = (),
    ) -> Message:
        """Create a message of the given level.

        Args:
            level: Severity.
            text: Template key, or the final text when raw is True.
            raw: Store text as raw text and turn decoration off.
            params: Initial substitution arguments, stored unescaped.
        """
        if raw:
            return Message(
                self,
                level=level,
                raw_text=text,
                use_decoration=False,
                params=list(params),
            )
        return Message(self, template_key=text, level=level, params=list(params))

    def success(self, text: str = "") -> Message:
        return self.create(
            MessageLevel.SUCCESS, text or self.localizer.lookup(DEFAULT_SUCCESS_TEXT)
        )

    def error(self, text: str = "") -> Message:
        return self.create(MessageLevel.ERROR, text or self.localizer.lookup(DEFAULT_ERROR_TEXT))

    def notice(self, text: str) -> Message:
        return self.create(MessageLevel.NOTICE, text)

    def raw(self, text: str, level: MessageLevel = MessageLevel.NOTICE) -> Message:
        return self.create(level, text, raw=True)

    def raw_error(self, text: str) -> Message:
        return self.raw(text, MessageLevel.ERROR)

    def raw_notice(self, text: str) -> Message:
        return self.raw(text)

    def raw_success(self, text: str) -> Message:
        return self.raw(text, MessageLevel.SUCCESS)

    def for_affected_rows(self, rows: int) -> Message:
        return self._for_rows("%1$d row affected.", "%1$d rows affected.", rows)

    def for_deleted_rows(self, rows: int) -> Message:
        return self._for_rows("%1$d row deleted.", "%1$d rows deleted.", rows)

    def for_inserted_rows(self, rows: int) -> Message:
        return self._for_rows("%1$d row inserted.", "%1$d rows inserted.", rows)

    def _for_rows(self, singular: str, plural: str, rows: int) -> Message:
        message = self.success(self.localizer.pluralize(singular, plural, rows))
        message.add_param(rows)
        return message

    # -- rendering -------------------------------------------------------------

    def escape(self, text: str, *, quotes: bool = False) -> str:
        return self.escaper(text, quotes=quotes)

    def compile(self, message: Message) -> str:
        """Compile message text.

        Order matters: base text, level icon (only once displayed),
        substitution, BB-code decoding, then children.

        Raises:
            FormatError: If params do not match the placeholders.
        """
        text = message.raw_text or self.localizer.lookup(message.template_key)

        if message.is_displayed():
            text = self.with_icon(message.level, text)

        if message.params:
            text = sprintf(text, message.params)

        if message.use_decoration:
            text = self.decoder.decode(text)

        for separator, child in message.children:
            text += separator + child.get_message()

        return text

    def display(self, message: Message) -> str:
        """Render the 'message' template around the compiled text.

        Marks the message as displayed before compiling, so the output and
        every later compile carry the level icon.
        """
        message.is_displayed(mark=True)
        variables: dict[str, Any] = {
            "context": message.context,
            "message": message.get_message(),
        }
        return self.renderer.render("message", variables)

    def with_icon(self, level: MessageLevel, text: str) -> str:
        icon = self.notice(self.icons.icon_for(level.icon))
        return f"{icon} {text}"
