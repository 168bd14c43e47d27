"""Dependency injection."""

from dbadmin.DI.container import Container

__all__ = ["Container"]
