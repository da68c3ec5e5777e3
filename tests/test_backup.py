# tests/test_backup.py

from sqlalchemy import func, select

from clientflow.db.schema import clients, transactions


def _ledger_count(engine):
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(transactions)).scalar_one()


def _seed(client, make_client):
    acme = make_client(name="Acme", services=["SEO", "Hosting"], total_amount=1000, advance_paid=0)
    globex = make_client(name="Globex", services=["Ads"], total_amount=400, advance_paid=100)
    client.post("/api/tasks", json={"client_id": acme, "title": "Kickoff", "due_date": "2026-11-02"})
    client.post("/api/tasks", json={"client_id": globex, "title": "Audit", "assigned_to": "Sam"})
    client.patch(f"/api/payments/{acme}", json={"advance_paid": 200, "amount_added": 200})
    return acme, globex


def test_backup_shape(client, make_client):
    _seed(client, make_client)

    snapshot = client.get("/api/backup").json()

    assert snapshot["version"] == "1.0"
    assert snapshot["timestamp"]
    assert len(snapshot["clients"]) == 2
    assert len(snapshot["services"]) == 3
    assert len(snapshot["payments"]) == 2
    assert len(snapshot["tasks"]) == 2
    assert "transactions" not in snapshot
    assert set(snapshot["clients"][0]) == {
        "id", "name", "email", "phone", "company", "notes", "managed_by", "status", "created_at",
    }


def test_backup_restore_round_trip(client, engine, make_client):
    acme, globex = _seed(client, make_client)
    snapshot = client.get("/api/backup").json()

    # Diverge from the snapshot before restoring it
    client.delete(f"/api/clients/{globex}")
    client.patch(f"/api/clients/{acme}", json={"name": "Renamed", "services": ["Other"]})
    make_client(name="Newcomer")

    response = client.post("/api/restore", json=snapshot)
    assert response.status_code == 200
    assert response.json() == {"success": True}

    restored = client.get("/api/backup").json()
    for table in ("clients", "services", "payments", "tasks"):
        assert restored[table] == snapshot[table]

    assert sorted(c["id"] for c in client.get("/api/clients").json()) == sorted([acme, globex])


def test_restore_leaves_ledger_alone(client, engine, make_client):
    _seed(client, make_client)
    snapshot = client.get("/api/backup").json()
    assert _ledger_count(engine) == 1

    client.post("/api/restore", json=snapshot)
    assert _ledger_count(engine) == 1

    client.post("/api/restore", json={"clients": [], "services": [], "payments": [], "tasks": []})
    assert _ledger_count(engine) == 1
    assert client.get("/api/clients").json() == []
    assert client.get("/api/transactions").json() == []


def test_failed_restore_rolls_back(client, engine, make_client):
    _seed(client, make_client)
    snapshot = client.get("/api/backup").json()
    snapshot["services"].append({"id": 99, "client_id": 12345, "service_type": "Ghost", "price": 0})

    response = client.post("/api/restore", json=snapshot)

    assert response.status_code == 500
    assert "FOREIGN KEY constraint failed" in response.json()["error"]
    with engine.connect() as conn:
        assert conn.execute(select(func.count()).select_from(clients)).scalar_one() == 2


def test_restore_requires_all_tables(client, make_client):
    _seed(client, make_client)

    response = client.post("/api/restore", json={"clients": []})

    assert response.status_code == 500
    assert "error" in response.json()
    assert len(client.get("/api/clients").json()) == 2


def test_restore_accepts_blank_due_date(client, make_client):
    _seed(client, make_client)
    snapshot = client.get("/api/backup").json()
    snapshot["tasks"][0]["due_date"] = ""

    response = client.post("/api/restore", json=snapshot)

    assert response.status_code == 200
    restored = client.get("/api/backup").json()
    assert restored["tasks"] == snapshot["tasks"]
