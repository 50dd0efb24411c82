import re

from tests.helpers import POLKA_KEY, bearer, login, register


def test_healthz(client):
    resp = client.get("/api/healthz")
    assert resp.status_code == 200
    assert resp.text == "OK"
    assert resp.headers["content-type"].startswith("text/plain")


def test_registration_and_login_round_trip(client):
    resp = client.post("/api/users", json={"email": "a@b", "password": "pw"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "email": "a@b", "is_chirpy_red": False}

    body = login(client, "a@b", "pw")
    assert body["id"] == 1
    assert body["email"] == "a@b"
    assert body["is_chirpy_red"] is False
    assert re.fullmatch(r"[0-9a-f]{64}", body["refresh_token"])
    assert body["token"]
    assert "password" not in body


def test_duplicate_email_is_conflict(client):
    register(client, "a@b")
    resp = client.post("/api/users", json={"email": "a@b", "password": "x"})
    assert resp.status_code == 409
    assert resp.json() == {"error": "A user with that email already exists"}


def test_bad_body_is_400_with_error_payload(client):
    resp = client.post("/api/users", json={"email": "a@b"})
    assert resp.status_code == 400
    assert resp.headers["content-type"] == "application/json"
    assert "error" in resp.json()


def test_login_failures_are_401(client):
    register(client, "a@b")
    wrong = client.post("/api/login", json={"email": "a@b", "password": "nope"})
    unknown = client.post("/api/login", json={"email": "x@y", "password": "pw"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"error": "Unauthorized"}


def test_chirp_length_guard(client):
    register(client, "a@b")
    token = login(client, "a@b")["token"]
    resp = client.post("/api/chirps", json={"body": "x" * 141}, headers=bearer(token))
    assert resp.status_code == 400
    assert resp.json() == {"error": "Chirp is too long"}


def test_profanity_filter(client):
    register(client, "a@b")
    token = login(client, "a@b")["token"]
    resp = client.post(
        "/api/chirps",
        json={"body": "I really need a kerfuffle to go to bed sooner, Fornax !"},
        headers=bearer(token),
    )
    assert resp.status_code == 201
    assert resp.json() == {
        "id": 1,
        "author_id": 1,
        "body": "I really need a **** to go to bed sooner, **** !",
    }


def test_chirp_requires_bearer(client):
    register(client, "a@b")
    assert client.post("/api/chirps", json={"body": "hi"}).status_code == 401
    assert client.post("/api/chirps", json={"body": "hi"}, headers={"Authorization": "Token abc"}).status_code == 401
    assert client.post("/api/chirps", json={"body": "hi"}, headers=bearer("garbage")).status_code == 401


def test_ownership_enforcement(client):
    register(client, "one@x")
    register(client, "two@x")
    t1 = login(client, "one@x")["token"]
    t2 = login(client, "two@x")["token"]
    assert client.post("/api/chirps", json={"body": "mine"}, headers=bearer(t1)).json()["id"] == 1

    resp = client.delete("/api/chirps/1", headers=bearer(t2))
    assert resp.status_code == 403
    assert resp.json() == {"error": "Forbidden"}

    assert client.delete("/api/chirps/1", headers=bearer(t1)).status_code == 204
    resp = client.get("/api/chirps/1")
    assert resp.status_code == 404
    assert resp.json() == {"error": "That chirp does not exist"}


def test_get_chirp_invalid_id(client):
    assert client.get("/api/chirps/abc").status_code == 404


def test_refresh_lifecycle(client):
    register(client, "a@b")
    rt1 = login(client, "a@b")["refresh_token"]

    resp = client.post("/api/refresh", headers=bearer(rt1))
    assert resp.status_code == 200
    assert set(resp.json()) == {"token"}
    # o access token renovado funciona
    chirp = client.post("/api/chirps", json={"body": "hi"}, headers=bearer(resp.json()["token"]))
    assert chirp.status_code == 201

    assert client.post("/api/refresh", headers=bearer(rt1)).status_code == 200
    assert client.post("/api/revoke", headers=bearer(rt1)).status_code == 204
    assert client.post("/api/refresh", headers=bearer(rt1)).status_code == 401
    assert client.post("/api/revoke", headers=bearer(rt1)).status_code == 401


def test_access_token_is_not_a_refresh_token(client):
    register(client, "a@b")
    token = login(client, "a@b")["token"]
    assert client.post("/api/refresh", headers=bearer(token)).status_code == 401


def test_sort_and_author_filter(client):
    register(client, "one@x")
    register(client, "two@x")
    t1 = login(client, "one@x")["token"]
    t2 = login(client, "two@x")["token"]
    for body, token in (("A", t1), ("B", t2), ("C", t1)):
        assert client.post("/api/chirps", json={"body": body}, headers=bearer(token)).status_code == 201

    assert [c["id"] for c in client.get("/api/chirps").json()] == [1, 2, 3]
    assert [c["id"] for c in client.get("/api/chirps?sort=desc").json()] == [3, 2, 1]
    mine = client.get("/api/chirps?author_id=1&sort=asc").json()
    assert [(c["id"], c["body"]) for c in mine] == [(1, "A"), (3, "C")]
    assert client.get("/api/chirps?author_id=nope").json() == []


def test_update_user(client):
    register(client, "a@b")
    token = login(client, "a@b")["token"]
    resp = client.put("/api/users", json={"email": "new@b", "password": "pw2"}, headers=bearer(token))
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "email": "new@b", "is_chirpy_red": False}
    login(client, "new@b", "pw2")

    assert client.put("/api/users", json={"email": "x@y", "password": "p"}).status_code == 401


def test_polka_webhook(client):
    register(client, "a@b")
    upgraded = {"event": "user.upgraded", "data": {"user_id": 1}}

    assert client.post("/api/polka/webhooks", json=upgraded).status_code == 401
    assert client.post(
        "/api/polka/webhooks", json=upgraded, headers={"Authorization": "ApiKey wrong"}
    ).status_code == 401
    assert client.post(
        "/api/polka/webhooks", json=upgraded, headers=bearer(POLKA_KEY)
    ).status_code == 401

    auth = {"Authorization": f"ApiKey {POLKA_KEY}"}
    other = {"event": "user.downgraded", "data": {"user_id": 1}}
    assert client.post("/api/polka/webhooks", json=other, headers=auth).status_code == 204
    assert login(client, "a@b")["is_chirpy_red"] is False

    assert client.post("/api/polka/webhooks", json=upgraded, headers=auth).status_code == 204
    assert login(client, "a@b")["is_chirpy_red"] is True

    missing = {"event": "user.upgraded", "data": {"user_id": 42}}
    assert client.post("/api/polka/webhooks", json=missing, headers=auth).status_code == 404


def test_admin_metrics_counts_fileserver_hits(client):
    client.get("/app/")
    client.get("/app/missing.txt")
    page = client.get("/admin/metrics")
    assert page.status_code == 200
    assert page.headers["content-type"].startswith("text/html")
    assert "Chirpy has been visited 2 times!" in page.text

    assert client.post("/api/reset").status_code == 200
    assert "visited 0 times" in client.get("/admin/metrics").text


def test_data_survives_restart(settings):
    from fastapi.testclient import TestClient

    from chirpy.main import create_app

    with TestClient(create_app(settings)) as c:
        register(c, "a@b")
    with TestClient(create_app(settings)) as c:
        assert login(c, "a@b")["id"] == 1


def test_fileserver_hides_database_file(client, tmp_path):
    register(client, "a@b")
    rt = login(client, "a@b")["refresh_token"]
    (tmp_path / "index.txt").write_text("public")
    (tmp_path / "database.json.tmp").write_text(rt)

    assert client.get("/app/index.txt").text == "public"
    for path in ("/app/database.json", "/app/./database.json", "/app/database.json.tmp"):
        resp = client.get(path)
        assert resp.status_code == 404
        assert rt not in resp.text


def test_hit_counter_ignores_lookalike_paths(client):
    client.get("/apple")
    client.get("/apps/x")
    client.get("/app/anything")
    assert "visited 1 times" in client.get("/admin/metrics").text
