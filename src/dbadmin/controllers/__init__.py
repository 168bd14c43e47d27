"""HTTP controllers."""

from dbadmin.controllers.base import AbstractController
from dbadmin.controllers.empty_form import EmptyFormController
from dbadmin.controllers.response import ResponseRenderer, ServerRequest

__all__ = [
    "AbstractController",
    "EmptyFormController",
    "ResponseRenderer",
    "ServerRequest",
]
