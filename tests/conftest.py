"""Pytest configuration and shared fixtures for all tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from core.config.settings import Settings
from services.api.main import create_app
from services.api.prometheus import WordMetrics


@pytest.fixture
def test_settings() -> Settings:
    """Get test settings with appropriate defaults."""
    return Settings(
        _env_file=None,
        debug=True,
        release="test-release",
        app_port="8080",
    )


@pytest.fixture
def metrics() -> WordMetrics:
    """Fresh counters on their own registry."""
    return WordMetrics()


@pytest.fixture
def app(test_settings, metrics) -> FastAPI:
    """Application wired to the test settings and counters."""
    return create_app(settings=test_settings, metrics=metrics)


@pytest.fixture
def client(app) -> TestClient:
    """Create a test client for the FastAPI app."""
    return TestClient(app)
