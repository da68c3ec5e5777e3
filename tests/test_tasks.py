# tests/test_tasks.py


def test_create_task_returns_id(client, make_client):
    client_id = make_client()

    response = client.post(
        "/api/tasks",
        json={"client_id": client_id, "title": "Kickoff", "assigned_to": "Sam", "due_date": "2026-11-02"},
    )

    assert response.status_code == 201
    task_id = response.json()["id"]

    tasks = client.get("/api/tasks").json()
    assert len(tasks) == 1
    assert tasks[0]["id"] == task_id
    assert tasks[0]["client_name"] == "Acme"
    assert tasks[0]["assigned_to"] == "Sam"
    assert tasks[0]["due_date"] == "2026-11-02"
    assert tasks[0]["status"] == "pending"


def test_filter_by_client_and_order_by_due_date(client, make_client):
    acme = make_client(name="Acme")
    other = make_client(name="Globex")

    for title, due in (("March", "2026-03-01"), ("Undated", None), ("January", "2026-01-15")):
        client.post("/api/tasks", json={"client_id": acme, "title": title, "due_date": due})
    client.post("/api/tasks", json={"client_id": other, "title": "Elsewhere", "due_date": "2025-01-01"})

    tasks = client.get("/api/tasks", params={"clientId": acme}).json()

    assert [t["title"] for t in tasks] == ["January", "March", "Undated"]
    assert {t["client_id"] for t in tasks} == {acme}
    assert {t["client_name"] for t in tasks} == {"Acme"}

    assert len(client.get("/api/tasks").json()) == 4


def test_same_due_date_newest_first(client, make_client):
    client_id = make_client()
    first = client.post("/api/tasks", json={"client_id": client_id, "title": "A"}).json()["id"]
    second = client.post("/api/tasks", json={"client_id": client_id, "title": "B"}).json()["id"]

    ids = [t["id"] for t in client.get("/api/tasks").json()]
    assert ids == [second, first]


def test_blank_due_date_is_unset(client, make_client):
    client_id = make_client()

    client.post("/api/tasks", json={"client_id": client_id, "title": "Call", "due_date": ""})

    assert client.get("/api/tasks").json()[0]["due_date"] is None


def test_update_status_accepts_any_string(client, make_client):
    client_id = make_client()
    task_id = client.post("/api/tasks", json={"client_id": client_id, "title": "Call"}).json()["id"]

    response = client.patch(f"/api/tasks/{task_id}", json={"status": "waiting-on-client"})

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/tasks").json()[0]["status"] == "waiting-on-client"


def test_delete_task(client, make_client):
    client_id = make_client()
    task_id = client.post("/api/tasks", json={"client_id": client_id, "title": "Call"}).json()["id"]

    response = client.delete(f"/api/tasks/{task_id}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/api/tasks").json() == []


def test_task_for_unknown_client_fails(client):
    response = client.post("/api/tasks", json={"client_id": 999, "title": "Orphan"})

    assert response.status_code == 500
    assert "FOREIGN KEY constraint failed" in response.json()["error"]


def test_task_without_title_fails(client, make_client):
    client_id = make_client()

    response = client.post("/api/tasks", json={"client_id": client_id})

    assert response.status_code == 500
    assert "tasks.title" in response.json()["error"]
