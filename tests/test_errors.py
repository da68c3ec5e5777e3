# tests/test_errors.py

from fastapi.testclient import TestClient

from clientflow.api import clients as clients_api
from clientflow.main import create_app


def test_unexpected_error_is_reported_as_json(settings, monkeypatch):
    def broken_row(row):
        raise ValueError("could not read client row")

    monkeypatch.setattr(clients_api, "_row_to_client", broken_row)
    app = create_app(settings)

    with TestClient(app, raise_server_exceptions=False) as client:
        client.post("/api/clients", json={"name": "Acme"})
        response = client.get("/api/clients")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": "could not read client row"}
