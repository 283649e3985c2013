"""
Users API tests: registration, login and the session check.
"""

import jwt

from conftest import TestConfig, auth_header, seed_user


def _register(client, **overrides):
    payload = {
        "email": "new@example.com",
        "name": "Newbie",
        "password": "secret1",
        "type": "pro",
    }
    payload.update(overrides)
    return client.post("/users/register", json=payload)


def test_register_user(client, store):
    response = _register(client)

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "new@example.com"
    assert body["type"] == "pro"
    assert "password" not in body
    assert "passwordHash" not in body

    stored = next(iter(store.users.values()))
    assert stored.password_hash != "secret1"


def test_register_defaults_to_regular(client):
    payload = {"email": "plain@example.com", "name": "Plain", "password": "secret1"}
    response = client.post("/users/register", json=payload)

    assert response.status_code == 201
    assert response.json()["type"] == "regular"


def test_register_duplicate_email_is_409(client):
    _register(client)

    response = _register(client, name="Again")

    assert response.status_code == 409
    assert response.json()["kind"] == "CONFLICT"


def test_register_validation(client, store):
    response = _register(client, email="not-an-email", password="123")

    assert response.status_code == 400
    assert {v["field"] for v in response.json()["details"]} == {"email", "password"}
    assert store.users == {}


def test_login_issues_verifiable_token(client):
    registered = _register(client).json()

    response = client.post(
        "/users/login", json={"email": "new@example.com", "password": "secret1"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "new@example.com"
    claims = jwt.decode(
        body["token"],
        TestConfig.JWT_SECRET,
        algorithms=["HS256"],
        audience=TestConfig.JWT_AUDIENCE,
        issuer=TestConfig.JWT_ISSUER,
    )
    assert claims["sub"] == registered["id"]


def test_login_token_opens_private_routes(client):
    _register(client)
    token = client.post(
        "/users/login", json={"email": "new@example.com", "password": "secret1"}
    ).json()["token"]

    response = client.get("/users/login", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["email"] == "new@example.com"


def test_login_wrong_password_and_unknown_email_look_alike(client):
    _register(client)

    wrong_password = client.post(
        "/users/login", json={"email": "new@example.com", "password": "wrong12"}
    )
    unknown_email = client.post(
        "/users/login", json={"email": "nobody@example.com", "password": "secret1"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_check_auth_requires_token(client):
    assert client.get("/users/login").status_code == 401


def test_check_auth_for_deleted_user_is_401(client, store):
    user = seed_user(store)
    headers = auth_header(user)
    del store.users[user.id]

    assert client.get("/users/login", headers=headers).status_code == 401


def test_logout(client):
    response = client.post("/users/logout")

    assert response.status_code == 204
