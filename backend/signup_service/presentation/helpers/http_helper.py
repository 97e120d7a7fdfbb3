from typing import Any

from signup_service.presentation.errors import ServerError
from signup_service.presentation.protocols.http import HttpResponse


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)


def bad_request(error: Exception) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError())
