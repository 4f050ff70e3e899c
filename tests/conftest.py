"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fastapi.testclient import TestClient

from echo_api.app import create_app
from echo_api.config import Settings
from echo_api.echo_service import EchoService


@pytest.fixture
def service():
    """A fresh EchoService (stateless, so any instance behaves the same)."""
    return EchoService()


@pytest.fixture
def test_settings():
    """Settings for testing, independent of the environment."""
    return Settings(ENV="test", DOCS_URL="/docs", REDOC_URL="/redoc")


@pytest.fixture
def client(test_settings):
    """HTTP client bound to an app built from test settings."""
    return TestClient(create_app(test_settings))
