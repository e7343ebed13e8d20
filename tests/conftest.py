"""Pytest fixtures for the mock server tests."""

import pytest
from fastapi.testclient import TestClient

from sm_mock.server import create_app


@pytest.fixture
def client():
    """Test client bound to a freshly built app."""
    return TestClient(create_app())
