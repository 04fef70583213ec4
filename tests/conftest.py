"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (mocks only)
    │   ├── dockeriq_auth/     # JWT, password hashing, request authentication
    │   ├── domain/            # Aggregates and value objects
    │   └── application/       # Application services with mocked repositories
    ├── integration/           # Tests against a real SQLite database
    │   ├── persistence/       # SQLAlchemy repositories
    │   └── api/               # FastAPI TestClient end to end
    └── shared/                # Shared fixtures and utilities
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from dockeriq_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.test if present (never the development or production file)
TEST_ENV_FILE = PROJECT_ROOT / "config" / ".env.test"
if TEST_ENV_FILE.exists():
    load_dotenv(TEST_ENV_FILE)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that use a real database",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(autouse=True)
def configure_app_settings():
    """Clear cached settings around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
