"""Turns a request into a response, negotiating among representations."""

from __future__ import annotations

from typing import Sequence

from .negotiation import negotiate
from .request import HttpRequest
from .response import HttpResponse
from .status import HttpStatus

__all__ = ["HttpProcessor"]


class HttpProcessor:
    """Chooses a response for a request; subclasses supply the representations."""

    def process(
        self,
        request: HttpRequest,
        possible_responses: Sequence[HttpResponse] | None = None,
    ) -> HttpResponse:
        """Negotiate among the given or prepared representations.

        Answers 404 when there is none, and 500 when anything fails.
        """
        try:
            if possible_responses:
                return negotiate(request, possible_responses)
            responses = self.prepare_responses(request)
            if responses:
                return negotiate(request, responses)
            return self.create_error_response(HttpStatus.NOT_FOUND, "Not Found")
        except Exception as exc:
            return self.create_error_response(
                HttpStatus.INTERNAL_SERVER_ERROR, f"Internal Server Error: {exc}"
            )

    def prepare_responses(self, request: HttpRequest) -> list[HttpResponse]:
        """Return the representations available for the request's path."""
        if request.path != "/example":
            return []
        return [
            HttpResponse(HttpStatus.OK, '{"message": "Hello in JSON"}', "application/json"),
            HttpResponse(HttpStatus.OK, "<message>Hello in XML</message>", "application/xml"),
            HttpResponse(
                HttpStatus.OK, "<html><body><h1>Hello in HTML</h1></body></html>", "text/html"
            ),
        ]

    def create_error_response(self, status_code: int, message: str) -> HttpResponse:
        """A plain-text response carrying the message."""
        return HttpResponse(status_code, message, "text/plain")