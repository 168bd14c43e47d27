# -*- coding: utf-8 -*-
"""Base controller."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Optional

import structlog

from dbadmin.controllers.response import ResponseRenderer, ServerRequest
from dbadmin.messages.types import TemplateRenderer


class AbstractController(ABC):
    """Controller writing into a ResponseRenderer through a TemplateRenderer."""

    def __init__(
        self,
        response: ResponseRenderer,
        template: TemplateRenderer,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self.response = response
        self.template = template
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @abstractmethod
    def __call__(self, request: ServerRequest) -> None:
        """Handle request, filling self.response."""
        ...

    def render(self, template_name: str, variables: Mapping[str, Any]) -> None:
        self.response.add_html(self.template.render(template_name, variables))
