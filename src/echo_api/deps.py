"""Shared dependencies for API routes."""

from __future__ import annotations

from fastapi import Request

from echo_api.config import Settings
from echo_api.echo_service import EchoService

# Stateless, so one instance serves every request.
_SERVICE = EchoService()


def get_echo_service() -> EchoService:
    return _SERVICE


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with (see create_app)."""
    return request.app.state.settings
