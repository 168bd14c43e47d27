# -*- coding: utf-8 -*-
"""Jinja2 template renderer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional

import structlog
from jinja2 import (
    BaseLoader,
    Environment,
    PackageLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)

from dbadmin.exceptions import TemplateRenderError


class JinjaTemplateRenderer:
    """Render templates named like 'database/structure/empty_form'.

    Names map to '<name>.html' under the package templates directory unless
    another loader is injected. Autoescaping is on; trusted HTML must be
    passed through the ``safe`` filter in the template.
    """

    def __init__(
        self,
        loader: BaseLoader | None = None,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._env = Environment(
            loader=loader or PackageLoader("dbadmin.templating", "templates"),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def render(self, name: str, variables: Mapping[str, Any]) -> str:
        """Render template name with variables.

        Raises:
            TemplateRenderError: If the template does not exist.
        """
        template_file = f"{name}.html"
        try:
            template = self._env.get_template(template_file)
        except TemplateNotFound as exc:
            self._logger.error("template_not_found", template_name=template_file)
            raise TemplateRenderError(
                f"Template not found: {template_file}",
                template_name=template_file,
                cause=exc,
            ) from exc
        return template.render(**variables)
