from .conftest import login, register


def test_register_creates_user(client):
    response = register(client)

    assert response.status_code == 201
    assert response.json() == {"message": "User registered successfully"}


def test_register_duplicate_username_conflicts(client):
    assert register(client, username="bob", email="bob@example.com").status_code == 201

    response = register(client, username="bob", email="other@example.com")

    assert response.status_code == 400
    assert response.json()["message"] == "Username or email already exists"


def test_register_duplicate_email_conflicts(client):
    register(client, username="bob", email="shared@example.com")

    response = register(client, username="carol", email="shared@example.com")

    assert response.status_code == 400
    assert response.json()["message"] == "Username or email already exists"


def test_register_unused_pair_after_conflict_succeeds(client):
    register(client, username="bob")
    assert register(client, username="bob").status_code == 400

    assert register(client, username="carol").status_code == 201


def test_register_missing_field_is_validation_error(client):
    response = client.post("/api/register", json={"username": "dave", "email": "dave@example.com"})

    assert response.status_code == 400
    body = response.json()
    assert "password" in body["message"]
    assert body["errors"][0]["field"] == "password"


def test_register_empty_username_rejected(client):
    response = register(client, username="", email="empty@example.com")

    assert response.status_code == 400


def test_register_malformed_email_rejected(client):
    response = client.post(
        "/api/register",
        json={"username": "erin", "email": "not-an-email", "password": "pw"},
    )

    assert response.status_code == 400
    assert "email" in response.json()["message"]


def test_register_does_not_echo_password(client):
    response = register(client, password="topsecret")

    assert "topsecret" not in response.text
    assert "password" not in response.json()


def test_login_returns_token_and_user_summary(client):
    register(client, username="frank")

    response = login(client, username="frank")

    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["user"]["username"] == "frank"
    assert isinstance(body["user"]["id"], int)
    assert set(body["user"]) == {"id", "username"}


def test_login_failures_are_indistinguishable(client):
    register(client, username="grace", password="right-password")

    wrong_password = login(client, username="grace", password="wrong-password")
    unknown_user = login(client, username="nobody", password="right-password")

    assert wrong_password.status_code == 400
    assert unknown_user.status_code == 400
    assert wrong_password.json() == unknown_user.json()
    assert wrong_password.json() == {"message": "Invalid username or password"}


def test_login_missing_password_is_validation_error(client):
    response = client.post("/api/login", json={"username": "grace"})

    assert response.status_code == 400
    assert "password" in response.json()["message"]


def test_current_user_profile_has_no_password(client, auth_headers):
    response = client.get("/api/user", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "alice"
    assert body["email"] == "alice@example.com"
    assert body["createdAt"].endswith("+00:00")
    assert not any("password" in key for key in body)
