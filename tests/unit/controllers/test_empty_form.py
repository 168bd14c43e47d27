# -*- coding: utf-8 -*-
"""Unit tests for EmptyFormController."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

from dbadmin.controllers import EmptyFormController, ResponseRenderer, ServerRequest
from dbadmin.messages import GettextLocalizer
from dbadmin.templating import JinjaTemplateRenderer


def _controller(
    template: Any,
    localizer: GettextLocalizer,
    get_logger: Callable[[str], Any],
    *,
    fk_checks: bool = True,
) -> tuple[EmptyFormController, ResponseRenderer]:
    response = ResponseRenderer()
    controller = EmptyFormController(
        response,
        template,
        localizer,
        lambda: fk_checks,
        get_logger=get_logger,
    )
    return controller, response


def test_without_selection_reports_failure(
    localizer: GettextLocalizer,
    get_logger: Callable[[str], Any],
) -> None:
    template = Mock()
    controller, response = _controller(template, localizer, get_logger)

    controller(ServerRequest(parsed_body={}, database="db1"))

    assert response.is_success is False
    assert response.json == {"message": "No table selected."}
    assert response.get_html() == ""
    template.render.assert_not_called()


def test_empty_selection_list_reports_failure(
    catalog_localizer: Callable[[dict[str, str]], GettextLocalizer],
    get_logger: Callable[[str], Any],
) -> None:
    localizer = catalog_localizer({"No table selected.": "Keine Tabelle ausgewählt."})
    controller, response = _controller(Mock(), localizer, get_logger)

    controller(ServerRequest(parsed_body={"selected_tbl": []}, database="db1"))

    assert response.is_success is False
    assert response.json["message"] == "Keine Tabelle ausgewählt."


def test_selection_renders_truncate_confirmation(
    localizer: GettextLocalizer,
    get_logger: Callable[[str], Any],
) -> None:
    template = Mock()
    template.render.return_value = "<form>"
    controller, response = _controller(template, localizer, get_logger, fk_checks=False)

    controller(ServerRequest(parsed_body={"selected_tbl": ["t1", "a`b", "<x>"]}, database="db1"))

    template.render.assert_called_once_with(
        "database/structure/empty_form",
        {
            "url_params": {"db": "db1", "selected": ["t1", "a`b", "<x>"]},
            "full_query": "TRUNCATE `t1`;<br>TRUNCATE `a``b`;<br>TRUNCATE `&lt;x&gt;`;<br>",
            "is_foreign_key_check": False,
        },
    )
    assert response.is_success is True
    assert response.get_html() == "<form>"
    get_logger("EmptyFormController").debug.assert_called_once_with(
        "empty_form_rendered",
        database="db1",
        empty_form_tables_count=3,
    )


def test_selection_escapes_single_quotes_in_table_names(
    localizer: GettextLocalizer,
    get_logger: Callable[[str], Any],
) -> None:
    template = Mock()
    template.render.return_value = ""
    controller, _ = _controller(template, localizer, get_logger)

    controller(ServerRequest(parsed_body={"selected_tbl": ["it's"]}, database="db1"))

    variables = template.render.call_args.args[1]
    assert variables["full_query"] == "TRUNCATE `it&#039;s`;<br>"
    assert variables["url_params"]["selected"] == ["it's"]


def test_selection_renders_real_template(
    localizer: GettextLocalizer,
    renderer: JinjaTemplateRenderer,
    get_logger: Callable[[str], Any],
) -> None:
    controller, response = _controller(renderer, localizer, get_logger)

    controller(ServerRequest(parsed_body={"selected_tbl": ["t1", "<x>"]}, database="db1"))

    html = response.get_html()
    assert '<input type="hidden" name="db" value="db1">' in html
    assert '<input type="hidden" name="selected[]" value="t1">' in html
    assert '<input type="hidden" name="selected[]" value="&lt;x&gt;">' in html
    assert "<code>TRUNCATE `t1`;<br>TRUNCATE `&lt;x&gt;`;<br></code>" in html
    assert 'value="1" checked>' in html


def test_real_template_leaves_fk_checkbox_unchecked(
    localizer: GettextLocalizer,
    renderer: JinjaTemplateRenderer,
    get_logger: Callable[[str], Any],
) -> None:
    controller, response = _controller(renderer, localizer, get_logger, fk_checks=False)

    controller(ServerRequest(parsed_body={"selected_tbl": ["t1"]}, database="db1"))

    assert 'value="1">' in response.get_html()
    assert "checked" not in response.get_html()
