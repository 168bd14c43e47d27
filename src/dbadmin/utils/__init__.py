# -*- coding: utf-8 -*-
"""Utility modules."""

from dbadmin.utils.session_cache import SessionCache
from dbadmin.utils.sql import backquote

__all__ = ["SessionCache", "backquote"]
