# /src/echo_api/routes/echo.py
"""
Echo routes.
Purpose: Reflect a client-supplied message back, optionally uppercased, repeated or
tagged with the HTTP method.

Example (PowerShell):
  Invoke-RestMethod -Uri http://localhost:8080/echo/hello -Method Get
  Invoke-RestMethod -Uri http://localhost:8080/echo -Method Post `
    -ContentType "application/json" -Body '{"message": "hi", "uppercase": true}'
  Invoke-RestMethod -Uri "http://localhost:8080/echo/hello?count=3" -Method Put
  Invoke-RestMethod -Uri http://localhost:8080/echo/hello -Method Delete
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from echo_api.deps import get_echo_service
from echo_api.echo_service import EchoRequest, EchoService, count_in_range
from echo_api.errors import COUNT_OUT_OF_RANGE, MESSAGE_REQUIRED, EchoValidationError

log = logging.getLogger("echo_api.routes.echo")

router = APIRouter(default_response_class=PlainTextResponse)

_BAD_REQUEST = {400: {"description": "Invalid input", "content": {"text/plain": {}}}}


@router.get(
    "/{message}",
    name="get_echo",
    summary="Echo a message",
    description="Returns `Echo: {message}`.",
)
def get_echo(message: str, service: EchoService = Depends(get_echo_service)) -> str:
    log.debug("GET echo: %r", message)
    return service.echo(message)


@router.post(
    "",
    name="post_echo",
    summary="Echo a message from a JSON body",
    description="Body `{message, uppercase}`. Returns `Echo [POST]: {message}`, uppercased if requested.",
    responses=_BAD_REQUEST,
)
def post_echo(
    request: Request,
    payload: Optional[EchoRequest] = Body(None),
    service: EchoService = Depends(get_echo_service),
) -> str:
    if payload is None or not payload.message:
        raise EchoValidationError(MESSAGE_REQUIRED)
    log.debug("POST echo: %r (uppercase=%s)", payload.message, payload.uppercase)
    return service.process_echo_request(payload, request.method)


@router.put(
    "/{message}",
    name="put_echo_with_count",
    summary="Echo a message several times",
    description="Returns `count` numbered echo lines; `count` must be between 1 and 10.",
    responses=_BAD_REQUEST,
)
def put_echo_with_count(
    message: str,
    count: Optional[int] = Query(None, description="Number of echo lines (1-10)"),
    service: EchoService = Depends(get_echo_service),
) -> str:
    if not count_in_range(count):
        raise EchoValidationError(COUNT_OUT_OF_RANGE)
    log.debug("PUT echo: %r x%d", message, count)
    return service.echo_with_details(message, count)


@router.delete(
    "/{message}",
    name="delete_echo",
    summary="Echo a message tagged with DELETE",
    description="Returns `Echo [DELETE]: {message}`.",
)
def delete_echo(
    message: str,
    request: Request,
    service: EchoService = Depends(get_echo_service),
) -> str:
    log.debug("DELETE echo: %r", message)
    return service.echo_with_method(message, request.method)
