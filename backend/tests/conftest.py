import pytest
from fastapi.testclient import TestClient

from quizapp.core.config import Settings
from quizapp.core.database import Database
from quizapp.main import create_app


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        db_retry_delay=0,
    )


@pytest.fixture
def database(settings):
    database = Database.from_settings(settings)
    yield database
    database.dispose()


@pytest.fixture
def db_session(database):
    database.create_tables()
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def register(client, username="alice", email=None, password="secret123"):
    return client.post(
        "/api/register",
        json={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        },
    )


def login(client, username="alice", password="secret123"):
    return client.post("/api/login", json={"username": username, "password": password})


def auth_headers_for(client, username="alice", password="secret123"):
    register(client, username=username, password=password)
    token = login(client, username=username, password=password).json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(client):
    return auth_headers_for(client)


def make_question(client, headers, question="2 + 2 = ?", correct="B", **overrides):
    payload = {
        "question": question,
        "optionA": "3",
        "optionB": "4",
        "optionC": "5",
        "optionD": "22",
        "correctAnswer": correct,
    }
    payload.update(overrides)
    response = client.post("/api/questions", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()
