import socket

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from quizapp.core import database as database_module
from quizapp.main import create_app, ensure_port_available
from quizapp.services.question_service import QuestionService


def _operational_error():
    return OperationalError("SELECT 1", {}, Exception("connection refused"))


def test_wait_until_ready_retries_with_fixed_delay(database, monkeypatch):
    outcomes = [_operational_error(), _operational_error(), None]
    sleeps = []

    def fake_ping():
        outcome = outcomes.pop(0)
        if outcome is not None:
            raise outcome

    monkeypatch.setattr(database, "ping", fake_ping)
    monkeypatch.setattr(database_module.time, "sleep", sleeps.append)

    attempts = database.wait_until_ready(retry_delay=5.0)

    assert attempts == 3
    assert sleeps == [5.0, 5.0]


def test_wait_until_ready_gives_up_when_bounded(database, monkeypatch):
    def failing_ping():
        raise _operational_error()

    monkeypatch.setattr(database, "ping", failing_ping)
    monkeypatch.setattr(database_module.time, "sleep", lambda delay: None)

    with pytest.raises(OperationalError):
        database.wait_until_ready(retry_delay=0, max_attempts=2)


def test_health_reports_database(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "healthy"}


def test_store_failure_is_reported_as_500(client, auth_headers, monkeypatch):
    def broken(self):
        raise _operational_error()

    monkeypatch.setattr(QuestionService, "list_questions", broken)

    response = client.get("/api/questions", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch questions"}


def test_unexpected_failure_is_generic_500(settings, database, monkeypatch):
    def explode(self):
        raise RuntimeError("boom")

    monkeypatch.setattr(QuestionService, "list_questions", explode)

    app = create_app(settings, database)
    with TestClient(app, raise_server_exceptions=False) as client:
        client.post(
            "/api/register",
            json={"username": "u", "email": "u@example.com", "password": "pw"},
        )
        token = client.post("/api/login", json={"username": "u", "password": "pw"}).json()["token"]
        response = client.get("/api/questions", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 500
    assert "boom" not in response.text


def test_unknown_route_uses_message_body(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert "message" in response.json()


def test_responses_carry_timing_headers(client):
    response = client.get("/api/health")

    assert "x-process-time" in response.headers
    assert response.headers["x-request-id"]


def test_busy_port_exits_process():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen(1)
        port = listener.getsockname()[1]

        with pytest.raises(SystemExit) as excinfo:
            ensure_port_available("127.0.0.1", port)

    assert excinfo.value.code == 1


def test_free_port_passes():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]

    ensure_port_available("127.0.0.1", port)
