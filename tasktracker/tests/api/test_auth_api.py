from fastapi.testclient import TestClient


def test_register_returns_user_without_password(client: TestClient):
    response = client.post("/auth/register", json={
        "name": "New Member",
        "email": "new@example.com",
        "password": "longenough",
    })
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "new@example.com"
    assert data["role"] == "team_member"
    assert "password" not in data
    assert "password_hash" not in data

def test_register_duplicate_email_conflict(client: TestClient, member):
    response = client.post("/auth/register", json={
        "name": "Alice Again",
        "email": "ALICE@example.com",
        "password": "longenough",
    })
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "conflict"

def test_register_rejects_bad_payload(client: TestClient):
    response = client.post("/auth/register", json={
        "name": "X",
        "email": "not-an-email",
        "password": "short",
    })
    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "validation_error"
    assert body["detail"] == body["error"]["message"]

def test_login_and_me(client: TestClient, lead):
    response = client.post("/auth/login", data={"username": "lead@example.com", "password": "testpassword"})
    assert response.status_code == 200
    token = response.json()
    assert token["token_type"] == "bearer"
    assert token["expires_in"] > 0

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token['access_token']}"})
    assert me.status_code == 200
    assert me.json()["id"] == lead.id
    assert me.json()["role"] == "lead"

def test_login_wrong_password(client: TestClient, lead):
    response = client.post("/auth/login", data={"username": "lead@example.com", "password": "wrong-password"})
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "unauthenticated"
    assert response.headers["www-authenticate"] == "Bearer"

def test_me_requires_token(client: TestClient):
    assert client.get("/auth/me").status_code == 401
    bad = client.get("/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert bad.status_code == 401

def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}
