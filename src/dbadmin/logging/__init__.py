"""Logging setup."""

from dbadmin.logging.config import configure_logging

__all__ = ["configure_logging"]
