"""dbadmin: status messages, confirmation forms, session cache and themes for a database admin UI."""

from dbadmin.config import get_settings
from dbadmin.DI import Container
from dbadmin.messages import Message, MessageFormatter, MessageLevel

__version__ = "6.0.0"
__all__ = [
    "Container",
    "Message",
    "MessageFormatter",
    "MessageLevel",
    "get_settings",
]
