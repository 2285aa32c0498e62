import sqlite3
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from app.core import database
from app.core.database import is_unique_violation
from app.main import app


def test_health_reports_connected_database(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["database"]["connected"] is True
    assert data["database"]["status"] == "connected"
    assert data["database"]["timestamp"]
    assert data["api"] == {"status": "operational", "version": "1.0.0"}


def test_health_failure_is_reported(client):
    with patch("app.api.health.check_database_health", side_effect=RuntimeError("boom")):
        response = client.get("/api/health")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Health check failed"
    assert body["data"]["database"]["status"] == "error"
    assert body["data"]["api"]["status"] == "error"


def test_connection_status_before_first_use(client):
    database.close_database_connection()

    assert database.get_connection_status() == "disconnected"
    assert database.check_database_health() is True
    assert database.get_connection_status() == "connected"


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


def test_unexpected_errors_are_hidden_outside_development():
    with TestClient(app, raise_server_exceptions=False) as test_client:
        with patch("app.api.packages.package_catalog.execute", side_effect=RuntimeError("secret")):
            response = test_client.get("/api/packages")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error"}


def test_request_id_and_security_headers(client):
    response = client.get("/")

    assert response.headers["X-Request-ID"]
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.json()["health"] == "/api/health"


class _PostgresError(Exception):
    def __init__(self, pgcode):
        super().__init__(pgcode)
        self.pgcode = pgcode


def test_only_unique_violations_are_conflicts():
    def integrity_error(orig):
        return IntegrityError("INSERT ...", {}, orig)

    assert is_unique_violation(integrity_error(sqlite3.IntegrityError("UNIQUE constraint failed: blog_post.slug")))
    assert is_unique_violation(integrity_error(_PostgresError("23505")))
    assert not is_unique_violation(integrity_error(sqlite3.IntegrityError("FOREIGN KEY constraint failed")))
    assert not is_unique_violation(integrity_error(_PostgresError("23503")))


def test_constraint_errors_outside_routes_use_envelope(client):
    foreign_key = IntegrityError("INSERT ...", {}, sqlite3.IntegrityError("FOREIGN KEY constraint failed"))
    duplicate = IntegrityError("INSERT ...", {}, sqlite3.IntegrityError("UNIQUE constraint failed: user.email"))

    with patch("app.api.packages.package_catalog.execute", side_effect=foreign_key):
        response = client.get("/api/packages")
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Constraint violation"}

    with patch("app.api.packages.package_catalog.execute", side_effect=duplicate):
        response = client.get("/api/packages")
    assert response.status_code == 409
    assert response.json() == {"success": False, "error": "Duplicate key"}
