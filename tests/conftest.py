"""
Pytest configuration and shared fixtures for the calculator API tests.
"""

import pytest

from app import create_app


@pytest.fixture
def app():
    """Application configured for testing."""
    return create_app({"TESTING": True, "LOG_LEVEL": "DEBUG"})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def get_json(client):
    """GET a path with query params, return (status_code, json body)."""
    def _get(path, **params):
        response = client.get(path, query_string=params)
        return response.status_code, response.get_json()
    return _get
