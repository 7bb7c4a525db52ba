from __future__ import annotations


def _register(client, email="carol@example.com", password="s3cret-pass"):
    return client.post("/auth/register", json={"email": email, "password": password})


def test_register_returns_user_and_token(client):
    response = _register(client)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["email"] == "carol@example.com"
    assert body["token"]["token_type"] == "bearer"
    assert body["token"]["access_token"]


def test_register_duplicate(client):
    _register(client)

    response = _register(client)

    assert response.status_code == 400


def test_register_short_password(client):
    response = _register(client, password="short")

    assert response.status_code == 422


def test_login_and_me(client):
    _register(client)

    response = client.post("/auth/login", json={"email": "carol@example.com", "password": "s3cret-pass"})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User logged in successfully"

    token = body["token"]["access_token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "carol@example.com"


def test_login_bad_credentials(client):
    _register(client)

    response = client.post("/auth/login", json={"email": "carol@example.com", "password": "wrong-pass"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_me_requires_token(client):
    assert client.get("/auth/me").status_code == 401
    assert client.get("/auth/me", headers={"Authorization": "Bearer garbage"}).status_code == 401
