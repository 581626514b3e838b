# tests/conftest.py

import pytest

from citydir import create_app
from citydir.extensions import db


ADMIN = {
    "username": "admin",
    "email": "admin@example.com",
    "password": "correct-horse",
}


@pytest.fixture(scope="function")
def app(tmp_path):
    """
    Fresh application on an in-memory SQLite database.

    The app context stays pushed for the whole test so data-access
    functions can be called directly next to HTTP requests.
    """
    app = create_app("testing")
    app.config.update(UPLOAD_FOLDER=str(tmp_path / "uploads"))

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


def login(app, username, password):
    """
    Log in through a throwaway client so the session cookie does not
    leak into the client used by the test.
    """
    response = app.test_client().post(
        "/api/auth/login",
        json={"usernameOrEmail": username, "password": password},
    )
    assert response.status_code == 200, response.get_json()
    return {"Authorization": f"Bearer {response.get_json()['access_token']}"}


@pytest.fixture(scope="function")
def auth_headers(app):
    """Bearer header for the bootstrap admin account."""
    response = app.test_client().post("/api/auth/register", json=ADMIN)
    assert response.status_code == 201, response.get_json()
    return login(app, ADMIN["username"], ADMIN["password"])
