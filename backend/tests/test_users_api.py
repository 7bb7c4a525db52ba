from __future__ import annotations


def test_create_and_read_user(client, make_user):
    user = make_user(parameters={"theme": "dark"})

    assert user["email"] == "alice@example.com"
    assert user["parameters"] == {"theme": "dark"}
    assert "hashed_password" not in user

    response = client.get(f"/users/{user['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == user["id"]


def test_list_users(client, make_user):
    make_user("alice@example.com")
    make_user("bob@example.com")

    response = client.get("/users")

    assert response.status_code == 200
    assert sorted(u["email"] for u in response.json()) == ["alice@example.com", "bob@example.com"]


def test_duplicate_email_rejected(client, make_user):
    make_user()

    response = client.post("/users", json={"email": "alice@example.com", "password": "another-pass"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"


def test_update_user(client, make_user):
    user = make_user()

    response = client.put(
        f"/users/{user['id']}",
        json={"full_name": "Alice M.", "parameters": {"language": "fr"}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["full_name"] == "Alice M."
    assert body["parameters"] == {"language": "fr"}
    assert body["email"] == "alice@example.com"


def test_update_missing_user(client):
    response = client.put("/users/missing", json={"full_name": "Nobody"})

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_delete_user(client, make_user):
    user = make_user()

    response = client.delete(f"/users/{user['id']}")

    assert response.status_code == 204
    assert client.get(f"/users/{user['id']}").status_code == 404
    assert client.get(f"/parameters/{user['id']}").status_code == 404


def test_delete_missing_user(client):
    assert client.delete("/users/missing").status_code == 404


def test_default_admin_bootstrap(client, monkeypatch):
    from app.core.config import settings
    from app.core.database import SessionLocal
    from app.modules.users.bootstrap import ensure_default_admin
    from app.modules.users.repository import UsersRepository

    monkeypatch.setattr(settings, "ADMIN_EMAIL", "admin@example.com")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "admin-password")

    db = SessionLocal()
    try:
        ensure_default_admin(db)
        ensure_default_admin(db)
        admin = UsersRepository(db).get_by_email("admin@example.com")
        assert admin is not None
        assert admin.is_superuser and admin.is_active
    finally:
        db.close()

    login = client.post("/auth/login", json={"email": "admin@example.com", "password": "admin-password"})
    assert login.status_code == 200
