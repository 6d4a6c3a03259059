"""Pytest fixtures for the shout server."""

import pytest
from fastapi.testclient import TestClient

from chat_server.app import create_app
from chat_server.config import Settings


@pytest.fixture
def settings():
    return Settings(_env_file=None, ALLOWED_ORIGINS=["http://localhost:3000"])


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
