from __future__ import annotations

from fastapi.testclient import TestClient

from dishmatch.app import app
from dishmatch.auth.users import add_user, authenticate

client = TestClient(app)


def _login_user(c):
    c.post("/auth/login", json={"username": "user", "password": "user123"})


def _login_admin(c):
    c.post("/auth/login", json={"username": "admin", "password": "admin123"})


# ── Login / Logout ───────────────────────────────────────────────────────


def test_login_success_user():
    resp = client.post("/auth/login", json={"username": "user", "password": "user123"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["user"] == {"username": "user", "role": "user"}


def test_login_success_admin():
    resp = client.post("/auth/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    assert resp.json()["user"]["role"] == "admin"


def test_login_wrong_password():
    resp = client.post("/auth/login", json={"username": "user", "password": "wrong"})
    assert resp.status_code == 401


def test_login_empty_password_rejected():
    resp = client.post("/auth/login", json={"username": "user", "password": ""})
    assert resp.status_code == 422


def test_auth_me_not_logged_in():
    c = TestClient(app)
    assert c.get("/auth/me").status_code == 401


def test_logout():
    _login_user(client)
    assert client.get("/auth/me").json()["username"] == "user"
    resp = client.post("/auth/logout")
    assert resp.json()["status"] == "logged_out"
    assert client.get("/auth/me").status_code == 401


def test_added_user_can_authenticate():
    add_user("chef", "s3cret", role="user")
    assert authenticate("chef", "s3cret") == {"username": "chef", "role": "user"}
    assert authenticate("chef", "nope") is None


# ── Route protection ─────────────────────────────────────────────────────


def test_recommend_requires_login():
    c = TestClient(app)
    resp = c.post("/recommend", json={"menuText": "Garlic", "profile": {}})
    assert resp.status_code == 401


def test_resolve_requires_login():
    c = TestClient(app)
    assert c.post("/resolve", json={"text": "garlic"}).status_code == 401


def test_profile_requires_login():
    c = TestClient(app)
    assert c.get("/profile").status_code == 401
    assert c.put("/profile", json={}).status_code == 401


def test_cache_stats_requires_admin():
    c = TestClient(app)
    _login_user(c)
    assert c.get("/cache/stats").status_code == 403


def test_cache_stats_allowed_for_admin():
    c = TestClient(app)
    _login_admin(c)
    assert c.get("/cache/stats").status_code == 200


# ── Public endpoints stay public ─────────────────────────────────────────


def test_health_is_public():
    c = TestClient(app)
    assert c.get("/health").status_code == 200


def test_ingredients_is_public():
    c = TestClient(app)
    assert c.get("/ingredients").status_code == 200
