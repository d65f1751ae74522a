import pytest
from fastapi.testclient import TestClient

from expense_tracker.core.config import Config
from expense_tracker.main import create_app


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'expenses.db'}"


@pytest.fixture
def settings(db_url):
    return Config(DB_URL=db_url, LOG_LEVEL="WARNING", AUTO_CREATE_TABLES=True)


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_expense(client):
    """POST an expense, asserting it was created, and return its JSON."""

    def _make(amount=12.5, description="Lunch", category="Food"):
        response = client.post(
            "/api/expenses",
            json={"amount": amount, "description": description, "category": category},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make
