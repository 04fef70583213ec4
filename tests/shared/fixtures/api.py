"""Helpers for driving the API through a TestClient."""

from fastapi.testclient import TestClient

SUPERVISOR_EMAIL = "boss@example.com"
SUPERVISOR_PASSWORD = "supervisor-password"  # NOQA: S105
WORKER_PASSWORD = "worker-password"  # NOQA: S105


def login(client: TestClient, email: str, password: str) -> str:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def assert_error_body(response, status: int, error: str, message: str) -> None:
    assert response.status_code == status
    body = response.json()
    assert body["status"] == status
    assert body["error"] == error
    assert body["message"] == message
    assert body["timestamp"]
