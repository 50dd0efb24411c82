from fastapi.testclient import TestClient

JWT_SECRET = "test-secret"
POLKA_KEY = "polka-test-key"


def register(client: TestClient, email: str, password: str = "pw") -> dict:
    resp = client.post("/api/users", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()


def login(client: TestClient, email: str, password: str = "pw") -> dict:
    resp = client.post("/api/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
