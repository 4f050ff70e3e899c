# /src/echo_api/routes/health.py
"""
Service endpoints: health and current server time.

Example (PowerShell):
  Invoke-RestMethod -Uri http://localhost:8080/health -Method Get
  Invoke-RestMethod -Uri http://localhost:8080/timestamp -Method Get
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from echo_api import __version__
from echo_api.config import Settings
from echo_api.deps import get_echo_service, get_settings
from echo_api.echo_service import EchoService

router = APIRouter()


@router.get(
    "/health",
    tags=["health"],
    summary="Service health",
    description="Returns status, environment and version.",
)
def health(config: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "service": "echo-api",
        "env": config.ENV,
        "version": __version__,
    }


@router.get(
    "/timestamp",
    tags=["health"],
    summary="Current server time",
    response_class=PlainTextResponse,
)
def timestamp(service: EchoService = Depends(get_echo_service)) -> str:
    return service.get_timestamp()
