from abc import ABC, abstractmethod

from signup_service.presentation.protocols.http import HttpRequest, HttpResponse


class Controller(ABC):
    """Transport-agnostic request handler."""

    @abstractmethod
    async def handle(self, http_request: HttpRequest) -> HttpResponse:
        raise NotImplementedError
