"""HTML templates and their renderer."""

from dbadmin.templating.renderer import JinjaTemplateRenderer

__all__ = ["JinjaTemplateRenderer"]
