import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from tasktracker.crud import activity_log as log_store


@pytest.fixture
def created_task(client: TestClient, lead_headers, member):
    response = client.post("/tasks", json={
        "title": "Ship release",
        "description": "Tag and publish",
        "assigned_to_id": member.id,
        "due_date": "2026-12-31",
    }, headers=lead_headers)
    assert response.status_code == 201
    return response.json()

def test_create_task(created_task, lead, member):
    assert created_task["status"] == "not_started"
    assert created_task["created_by_id"] == lead.id
    assert created_task["assigned_to"]["id"] == member.id
    assert created_task["created_by"]["name"] == "Lena Lead"
    assert created_task["due_date"] == "2026-12-31"

def test_create_requires_auth(client: TestClient):
    response = client.post("/tasks", json={"title": "Nope"})
    assert response.status_code == 401

def test_member_cannot_create(client: TestClient, member_headers):
    response = client.post("/tasks", json={"title": "Nope"}, headers=member_headers)
    assert response.status_code == 403

def test_create_validation(client: TestClient, lead_headers, lead):
    blank = client.post("/tasks", json={"title": "   "}, headers=lead_headers)
    assert blank.status_code == 400
    assert blank.json()["error"]["message"] == "Task title is required"

    to_lead = client.post("/tasks", json={"title": "T", "assigned_to_id": lead.id}, headers=lead_headers)
    assert to_lead.status_code == 400

    missing = client.post("/tasks", json={"title": "T", "assigned_to_id": 9999}, headers=lead_headers)
    assert missing.status_code == 404

    no_title = client.post("/tasks", json={}, headers=lead_headers)
    assert no_title.status_code == 400

def test_list_scopes(client: TestClient, created_task, lead_headers, member_headers,
                     other_member_headers, other_lead_headers):
    assert [t["id"] for t in client.get("/tasks", headers=lead_headers).json()] == [created_task["id"]]
    assert [t["id"] for t in client.get("/tasks", headers=member_headers).json()] == [created_task["id"]]
    assert client.get("/tasks", headers=other_member_headers).json() == []
    assert client.get("/tasks", headers=other_lead_headers).json() == []

def test_list_status_filter(client: TestClient, created_task, lead_headers):
    assert len(client.get("/tasks", params={"status": "not_started"}, headers=lead_headers).json()) == 1
    assert client.get("/tasks", params={"status": "done"}, headers=lead_headers).json() == []
    assert len(client.get("/tasks", params={"status": "all"}, headers=lead_headers).json()) == 1

    bad = client.get("/tasks", params={"status": "archived"}, headers=lead_headers)
    assert bad.status_code == 400
    assert "allowed" in bad.json()["error"]["details"]

def test_list_limit_must_be_positive(client: TestClient, lead_headers):
    assert client.get("/tasks", params={"limit": 0}, headers=lead_headers).status_code == 400

def test_get_task_permissions(client: TestClient, created_task, member_headers, other_member_headers):
    task_id = created_task["id"]
    assert client.get(f"/tasks/{task_id}", headers=member_headers).status_code == 200
    assert client.get(f"/tasks/{task_id}", headers=other_member_headers).status_code == 403
    assert client.get("/tasks/9999", headers=member_headers).status_code == 404

def test_member_updates_status(client: TestClient, created_task, member_headers):
    response = client.patch(f"/tasks/{created_task['id']}", json={"status": "in_progress"}, headers=member_headers)
    assert response.status_code == 200
    assert response.json()["status"] == "in_progress"

def test_member_title_change_is_not_applied(client: TestClient, created_task, member_headers):
    response = client.patch(f"/tasks/{created_task['id']}", json={"title": "Hijacked"}, headers=member_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "No valid updates provided"

def test_lead_reassigns(client: TestClient, created_task, lead_headers, other_member):
    response = client.patch(f"/tasks/{created_task['id']}", json={"assigned_to_id": other_member.id},
                            headers=lead_headers)
    assert response.status_code == 200
    assert response.json()["assigned_to"]["id"] == other_member.id

def test_update_forbidden_for_outsiders(client: TestClient, created_task, other_member_headers, other_lead_headers):
    path = f"/tasks/{created_task['id']}"
    assert client.patch(path, json={"status": "done"}, headers=other_member_headers).status_code == 403
    assert client.patch(path, json={"status": "done"}, headers=other_lead_headers).status_code == 403

def test_update_invalid_status(client: TestClient, created_task, lead_headers):
    response = client.patch(f"/tasks/{created_task['id']}", json={"status": "archived"}, headers=lead_headers)
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "validation_error"

def test_summary(client: TestClient, created_task, lead_headers, member_headers):
    client.patch(f"/tasks/{created_task['id']}", json={"status": "done"}, headers=member_headers)
    summary = client.get("/tasks/summary", headers=lead_headers).json()
    assert summary == {"not_started": 0, "in_progress": 0, "done": 1, "rejected": 0, "total": 1}

def test_non_integer_task_id(client: TestClient, lead_headers):
    for response in (
        client.get("/tasks/abc", headers=lead_headers),
        client.patch("/tasks/abc", json={"status": "done"}, headers=lead_headers),
    ):
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "validation_error"

def test_storage_failure_is_internal_error(client: TestClient, created_task, member_headers, monkeypatch):
    def failing_add_log(*args, **kwargs):
        raise OperationalError("INSERT INTO activity_logs", {}, Exception("disk I/O error"))

    monkeypatch.setattr(log_store, "add_log", failing_add_log)
    response = client.patch(f"/tasks/{created_task['id']}", json={"status": "done"}, headers=member_headers)
    assert response.status_code == 500
    assert response.json()["error"]["code"] == "internal_error"

    monkeypatch.undo()
    stored = client.get(f"/tasks/{created_task['id']}", headers=member_headers).json()
    assert stored["status"] == "not_started"
