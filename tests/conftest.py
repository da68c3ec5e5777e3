# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from clientflow.config import Settings
from clientflow.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'clientflow.db'}",
        env="test",
        static_dir=str(tmp_path / "dist"),
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def engine(client):
    return client.app.state.engine


@pytest.fixture
def make_client(client):
    def _make(**overrides):
        body = {
            "name": "Acme",
            "email": "ops@acme.test",
            "phone": "555-0100",
            "company": "Acme Ltd",
            "services": ["SEO", "Hosting"],
            "total_amount": 1000,
            "advance_paid": 250,
            "notes": None,
            "managed_by": "Dana",
        }
        body.update(overrides)
        response = client.post("/api/clients", json=body)
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _make
