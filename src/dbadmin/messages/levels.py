"""Message severity levels."""

from __future__ import annotations

from enum import IntEnum


class MessageLevel(IntEnum):
    """Severity of a user-facing message.

    Numeric codes are bit flags kept stable because they feed the message hash.
    """

    SUCCESS = 1
    NOTICE = 2
    ERROR = 8

    @property
    def level_name(self) -> str:
        """Lower-case name: 'success', 'notice' or 'error'."""
        return self.name.lower()

    @property
    def context(self) -> str:
        """UI context class for the alert box."""
        if self is MessageLevel.ERROR:
            return "danger"
        if self is MessageLevel.SUCCESS:
            return "success"
        return "primary"

    @property
    def icon(self) -> str:
        """Name of the icon shown in front of a displayed message."""
        return f"s_{self.level_name}"
