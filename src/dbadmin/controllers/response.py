"""Request and response objects handed to controllers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ServerRequest:
    """Parsed HTTP request as seen by a controller."""

    parsed_body: dict[str, Any] = field(default_factory=dict)
    database: str = ""
    """Currently selected database."""

    def get_parsed_body_param(self, name: str, default: Any = None) -> Any:
        return self.parsed_body.get(name, default)


@dataclass
class ResponseRenderer:
    """Collect the HTML fragments and JSON values of one response."""

    is_success: bool = True
    json: dict[str, Any] = field(default_factory=dict)
    html: list[str] = field(default_factory=list)

    def set_request_status(self, success: bool) -> None:
        self.is_success = success

    def add_json(self, key: str, value: Any) -> None:
        self.json[key] = value

    def add_html(self, content: str) -> None:
        self.html.append(content)

    def get_html(self) -> str:
        return "".join(self.html)
