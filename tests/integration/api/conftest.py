"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from dockeriq.presentation.api.app import create_app
from dockeriq_config.settings import Settings
from tests.shared.fixtures.api import (
    SUPERVISOR_EMAIL,
    SUPERVISOR_PASSWORD,
    WORKER_PASSWORD,
    bearer,
    login,
)


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings backed by a throwaway SQLite file."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api-test.db'}",
        bootstrap_supervisor_email=SUPERVISOR_EMAIL,
        bootstrap_supervisor_password=SecretStr(SUPERVISOR_PASSWORD),
        bootstrap_supervisor_first_name="Dana",
        bootstrap_supervisor_last_name="Boss",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def test_client(api_settings):
    """Test client; entering it runs startup (schema + initial supervisor)."""
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def supervisor_headers(test_client) -> dict:
    return bearer(login(test_client, SUPERVISOR_EMAIL, SUPERVISOR_PASSWORD))


@pytest.fixture
def create_user(test_client, supervisor_headers):
    """Create a user through the API and return its email."""

    def _create(email: str, role: str = "WORKER", password: str = WORKER_PASSWORD):
        response = test_client.post(
            "/users",
            json={"email": email, "password": password, "role": role},
            headers=supervisor_headers,
        )
        assert response.status_code == 201, response.text
        return email

    return _create


@pytest.fixture
def worker_headers(test_client, create_user) -> dict:
    email = create_user("worker@example.com")
    return bearer(login(test_client, email, WORKER_PASSWORD))
