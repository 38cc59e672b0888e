from fastapi.testclient import TestClient


def test_task_lifecycle_is_logged(client: TestClient, lead_headers, member_headers, lead, member):
    created = client.post("/tasks", json={"title": "Audit me", "assigned_to_id": member.id}, headers=lead_headers)
    task_id = created.json()["id"]
    client.patch(f"/tasks/{task_id}", json={"status": "in_progress"}, headers=member_headers)

    response = client.get("/activity-logs", params={"entity_type": "task"}, headers=lead_headers)
    assert response.status_code == 200
    entries = response.json()
    assert [e["action"] for e in entries] == ["status_changed", "created"]

    newest = entries[0]
    assert newest["user"]["id"] == member.id
    assert newest["details"] == {"previous_status": "not_started", "new_status": "in_progress"}
    assert newest["entity"] == {"type": "task", "id": task_id, "label": "Audit me"}

def test_member_sees_own_entries_only(client: TestClient, lead_headers, member_headers, member):
    client.post("/tasks", json={"title": "Lead work"}, headers=lead_headers)
    entries = client.get("/activity-logs", headers=member_headers).json()
    assert entries
    assert {e["user_id"] for e in entries} == {member.id}

def test_user_entries_carry_name_label(client: TestClient, lead_headers, member):
    entries = client.get("/activity-logs", params={"entity_type": "user"}, headers=lead_headers).json()
    labels = {e["entity"]["id"]: e["entity"]["label"] for e in entries}
    assert labels[member.id] == "Alice Member"

def test_invalid_filters(client: TestClient, lead_headers):
    assert client.get("/activity-logs", params={"entity_type": "project"}, headers=lead_headers).status_code == 400
    assert client.get("/activity-logs", params={"action": "deleted"}, headers=lead_headers).status_code == 400

def test_requires_auth(client: TestClient):
    assert client.get("/activity-logs").status_code == 401
