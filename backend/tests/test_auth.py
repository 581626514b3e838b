from conftest import ADMIN, login


def test_first_user_bootstraps_as_admin(client):
    response = client.post("/api/auth/register", json={**ADMIN, "role": "editor"})

    assert response.status_code == 201
    body = response.get_json()
    assert body["role"] == "admin"
    assert "password_hash" not in body
    assert "password" not in body


def test_later_registrations_need_an_admin(app, client, auth_headers):
    anonymous = client.post(
        "/api/auth/register",
        json={"username": "editor", "email": "editor@example.com", "password": "long-enough"},
    )
    assert anonymous.status_code == 401

    created = client.post(
        "/api/auth/register",
        json={"username": "editor", "email": "Editor@Example.com", "password": "long-enough"},
        headers=auth_headers,
    )
    assert created.status_code == 201
    assert created.get_json()["role"] == "editor"
    assert created.get_json()["email"] == "editor@example.com"

    editor_headers = login(app, "editor@example.com", "long-enough")
    forbidden = client.post(
        "/api/auth/register",
        json={"username": "other", "email": "other@example.com", "password": "long-enough"},
        headers=editor_headers,
    )
    assert forbidden.status_code == 403


def test_duplicate_username_and_email_are_distinct_conflicts(client, auth_headers):
    same_username = client.post(
        "/api/auth/register",
        json={"username": "admin", "email": "new@example.com", "password": "long-enough"},
        headers=auth_headers,
    )
    same_email = client.post(
        "/api/auth/register",
        json={"username": "new", "email": "admin@example.com", "password": "long-enough"},
        headers=auth_headers,
    )

    assert same_username.status_code == 409
    assert same_username.get_json()["message"] == "Username already exists"
    assert same_email.status_code == 409
    assert same_email.get_json()["message"] == "Email already exists"


def test_short_password_is_rejected(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "admin", "email": "admin@example.com", "password": "short"},
    )
    assert response.status_code == 400


def test_login_failures_are_indistinguishable(client, auth_headers):
    wrong_password = client.post(
        "/api/auth/login", json={"username": "admin", "password": "wrong-password"}
    )
    unknown_user = client.post(
        "/api/auth/login", json={"username": "nobody", "password": "wrong-password"}
    )

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.get_json() == unknown_user.get_json()


def test_login_sets_session_cookie(app):
    app.test_client().post("/api/auth/register", json=ADMIN)
    browser = app.test_client()

    response = browser.post(
        "/api/auth/login", json={"usernameOrEmail": "admin@example.com", "password": ADMIN["password"]}
    )
    assert response.status_code == 200
    assert "auth_token=" in response.headers.get("Set-Cookie", "")
    assert "password_hash" not in response.get_json()["user"]

    # the cookie alone authenticates later requests
    me = browser.get("/api/auth/me")
    assert me.status_code == 200
    assert me.get_json()["username"] == "admin"

    browser.post("/api/auth/logout")
    assert browser.get("/api/auth/me").status_code == 401


def test_me_requires_a_token(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401


def test_garbage_token_is_unauthorized(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_users_listing_is_admin_only(app, client, auth_headers):
    client.post(
        "/api/auth/register",
        json={"username": "editor", "email": "editor@example.com", "password": "long-enough"},
        headers=auth_headers,
    )
    editor_headers = login(app, "editor", "long-enough")

    assert client.get("/api/users", headers=editor_headers).status_code == 403

    users = client.get("/api/users", headers=auth_headers).get_json()
    assert sorted(u["username"] for u in users) == ["admin", "editor"]
    assert all("password_hash" not in u for u in users)


def test_status(client):
    response = client.get("/api/status")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_non_string_credentials_are_rejected_on_register(client, auth_headers):
    response = client.post(
        "/api/auth/register",
        json={"username": "editor", "email": "editor@example.com", "password": 12345678},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.get_json()["error"] == "ValidationError"

    response = client.post(
        "/api/auth/register",
        json={"username": ["editor"], "email": "editor@example.com", "password": "long-enough"},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_non_string_password_on_login_is_the_generic_error(client, auth_headers):
    numeric = client.post("/api/auth/login", json={"usernameOrEmail": "admin", "password": 12345678})
    wrong = client.post("/api/auth/login", json={"usernameOrEmail": "admin", "password": "wrong-password"})

    assert numeric.status_code == 401
    assert numeric.get_json() == wrong.get_json()

    numeric_user = client.post("/api/auth/login", json={"username": 42, "password": "correct-horse"})
    assert numeric_user.status_code == 401
