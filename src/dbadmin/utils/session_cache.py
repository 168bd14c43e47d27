# -*- coding: utf-8 -*-
"""Per-server key/value cache stored in the user session."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any, Optional

import structlog

_SESSION_KEY = "cache"


class SessionCache:
    """Cache values in ``session["cache"][<server key>]``.

    The server key is ``server_<index>`` or ``server_<index>_<user>`` so
    entries never leak between servers or users sharing one session.
    The session mapping itself is owned by the caller.
    """

    def __init__(
        self,
        session: MutableMapping[str, Any],
        *,
        server: int,
        user: str | None = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._session = session
        self._server = server
        self._user = user
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def key(self) -> str:
        key = f"server_{self._server}"
        if self._user is not None:
            key += f"_{self._user}"
        return key

    def _bucket(self) -> MutableMapping[str, Any]:
        cache = self._session.setdefault(_SESSION_KEY, {})
        return cache.setdefault(self.key, {})

    def has(self, name: str) -> bool:
        """Return True if name holds a value other than None."""
        return self._bucket().get(name) is not None

    def get(self, name: str, default_factory: Callable[[], Any] | None = None) -> Any:
        """Return the cached value, or the default factory's result (not stored)."""
        bucket = self._bucket()
        if name in bucket:
            return bucket[name]
        if default_factory is not None:
            return default_factory()
        return None

    def set(self, name: str, value: Any) -> None:
        self._bucket()[name] = value
        self._logger.debug(
            "session_cache_set",
            session_cache_key=self.key,
            session_cache_name=name,
        )

    def remove(self, name: str) -> None:
        self._bucket().pop(name, None)
