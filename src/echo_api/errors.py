"""Client input errors and their HTTP rendering.

Validation failures are returned as 400 with a plain-text reason, not
FastAPI's JSON ``{"detail": ...}`` envelope.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse

from echo_api.echo_service import MAX_COUNT, MIN_COUNT

log = logging.getLogger("echo_api.errors")

MESSAGE_REQUIRED = "Message is required"
COUNT_OUT_OF_RANGE = f"Count must be between {MIN_COUNT} and {MAX_COUNT}"


class EchoValidationError(Exception):
    """Raised by route handlers when client input fails a check."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


async def echo_validation_error_handler(
    request: Request, exc: EchoValidationError
) -> PlainTextResponse:
    log.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)
