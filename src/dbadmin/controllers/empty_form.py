# -*- coding: utf-8 -*-
"""Confirmation form shown before emptying the selected tables."""

from __future__ import annotations

from typing import Any, Callable, Optional

import structlog

from dbadmin.controllers.base import AbstractController
from dbadmin.controllers.response import ResponseRenderer, ServerRequest
from dbadmin.messages.escaping import escape_html
from dbadmin.messages.types import Localizer, TemplateRenderer
from dbadmin.utils.sql import backquote


class EmptyFormController(AbstractController):
    """Render the TRUNCATE confirmation for the tables in 'selected_tbl'."""

    def __init__(
        self,
        response: ResponseRenderer,
        template: TemplateRenderer,
        localizer: Localizer,
        is_foreign_key_check: Callable[[], bool],
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(response, template, get_logger=get_logger, logger_name=logger_name)
        self._localizer = localizer
        self._is_foreign_key_check = is_foreign_key_check

    def __call__(self, request: ServerRequest) -> None:
        selected = request.get_parsed_body_param("selected_tbl", [])

        if not selected:
            self._logger.debug("empty_form_no_table_selected", database=request.database)
            self.response.set_request_status(False)
            self.response.add_json("message", self._localizer.lookup("No table selected."))
            return

        full_query = ""
        url_params: dict[str, Any] = {"db": request.database, "selected": []}

        for table in selected:
            full_query += "TRUNCATE "
            full_query += backquote(escape_html(table, quotes=True)) + ";<br>"
            url_params["selected"].append(table)

        self._logger.debug(
            "empty_form_rendered",
            database=request.database,
            empty_form_tables_count=len(url_params["selected"]),
        )
        self.render(
            "database/structure/empty_form",
            {
                "url_params": url_params,
                "full_query": full_query,
                "is_foreign_key_check": self._is_foreign_key_check(),
            },
        )
