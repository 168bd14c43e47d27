# -*- coding: utf-8 -*-
"""A single user-facing message.

Simple usage:

    formatter.error().get_display()            # alert box saying 'Error'
    message = formatter.success()              # 'Your SQL query has been executed successfully.'
    message = formatter.notice("Table %1$s has been emptied.")
    message.add_param(table)

Composition:

    hint = formatter.notice("Read the %smanual%s.")
    hint.add_param("[doc@cfg_Example]")
    hint.add_param("[/doc]")
    message.add_message(hint)
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from dbadmin.messages.levels import MessageLevel
from dbadmin.messages.sprintf import stringify

if TYPE_CHECKING:  # pragma: no cover
    from dbadmin.messages.formatter import MessageFormatter

Param = Union[int, float, str, "Message"]
"""Substitution argument: a number, an already escaped string or a nested message."""


@dataclass(eq=False)
class Message:
    """Leveled, parameterized message with nested child messages.

    ``raw_text`` wins over ``template_key`` when non-empty. ``children`` holds
    (separator, message) pairs appended after the message's own text.
    Instances are request-scoped and not safe to share between threads.
    """

    formatter: MessageFormatter = field(repr=False)
    template_key: str = ""
    level: MessageLevel = MessageLevel.NOTICE
    params: list[Param] = field(default_factory=list)
    raw_text: str = ""
    use_decoration: bool = True
    children: list[tuple[str, Message]] = field(default_factory=list)
    _displayed: bool = field(default=False, init=False, repr=False)
    _hash: str | None = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        return self.get_message()

    # -- level -------------------------------------------------------------

    def set_level(self, level: MessageLevel) -> None:
        self.level = MessageLevel(level)

    def is_success(self, set_level: bool = False) -> bool:
        """Return whether this is a success message, optionally making it one first."""
        if set_level:
            self.set_level(MessageLevel.SUCCESS)
        return self.level is MessageLevel.SUCCESS

    def is_notice(self, set_level: bool = False) -> bool:
        """Return whether this is a notice message, optionally making it one first."""
        if set_level:
            self.set_level(MessageLevel.NOTICE)
        return self.level is MessageLevel.NOTICE

    def is_error(self, set_level: bool = False) -> bool:
        """Return whether this is an error message, optionally making it one first."""
        if set_level:
            self.set_level(MessageLevel.ERROR)
        return self.level is MessageLevel.ERROR

    @property
    def level_name(self) -> str:
        return self.level.level_name

    @property
    def context(self) -> str:
        return self.level.context

    # -- text --------------------------------------------------------------

    def set_template_key(self, template_key: str) -> None:
        """Set the localizable text (ignored while raw text is set)."""
        self.template_key = template_key

    def set_message_text(self, text: str) -> None:
        """Set raw text, overriding the template key."""
        self.raw_text = text

    def set_use_decoration(self, use_decoration: bool) -> None:
        self.use_decoration = use_decoration

    def get_only_message(self) -> str:
        """Raw text only, without icon, params or children."""
        return self.raw_text

    # -- params ------------------------------------------------------------

    def set_params(self, params: Iterable[Param]) -> None:
        """Replace all params; values are stored as given, without escaping."""
        self.params = list(params)

    def add_param(self, value: Any) -> None:
        """Add a substitution argument.

        Numbers and messages are kept as they are, anything else is stored as
        escaped text. Use BB-code such as '[em]x[/em]' for formatting.
        """
        if isinstance(value, Message) or (
            isinstance(value, (int, float)) and not isinstance(value, bool)
        ):
            self.params.append(value)
        else:
            self.params.append(self.formatter.escape(stringify(value)))

    def add_param_html(self, html: str) -> None:
        """Add a trusted HTML fragment as a substitution argument."""
        self.params.append(self.formatter.notice(html))

    # -- children ----------------------------------------------------------

    def add_message(self, message: Message, separator: str = " ") -> None:
        """Append another message, preceded by separator when non-empty."""
        self.children.append((separator, message))

    def add_messages(self, messages: Iterable[Message], separator: str = " ") -> None:
        for message in messages:
            self.add_message(message, separator)

    def add_text(self, text: str, separator: str = " ") -> None:
        """Append plain text; it is escaped, single quotes included."""
        escaped = self.formatter.escape(text, quotes=True)
        self.add_message(self.formatter.notice(escaped), separator)

    def add_texts(self, texts: Iterable[str], separator: str = " ") -> None:
        for text in texts:
            self.add_text(text, separator)

    def add_html(self, html: str, separator: str = " ") -> None:
        """Append trusted HTML, bypassing decoration."""
        self.add_message(self.formatter.raw_notice(html), separator)

    # -- identity / display state -------------------------------------------

    @property
    def hash(self) -> str:
        """MD5 of level code, template key and raw text; computed once."""
        if self._hash is None:
            source = f"{int(self.level)}{self.template_key}{self.raw_text}"
            self._hash = hashlib.md5(source.encode("utf-8")).hexdigest()
        return self._hash

    def is_displayed(self, mark: bool = False) -> bool:
        """Return whether the message was displayed, optionally marking it first."""
        if mark:
            self._displayed = True
        return self._displayed

    # -- rendering -----------------------------------------------------------

    def get_message(self) -> str:
        """Compiled message text (see MessageFormatter.compile)."""
        return self.formatter.compile(self)

    def get_display(self) -> str:
        """Whole alert box HTML; marks the message as displayed."""
        return self.formatter.display(self)

    def get_message_with_icon(self, text: str) -> str:
        """Prefix text with the icon matching this message's level."""
        return self.formatter.with_icon(self.level, text)
