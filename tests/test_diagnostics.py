"""Tests for the diagnostic and health endpoints."""
from datetime import date, time


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_db_check_succeeds(client, store):
    store.availability["t-1"] = False

    response = client.get("/api/test-db")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["venue"] == {"id": "venue-1", "name": "The Backroom", "capacity": 500}
    assert body["data"]["tables"] == {"count": 3, "upstairs": 2, "downstairs": 1}
    assert body["data"]["availability_test"] == {"table_id": "t-1", "is_available": False}
    assert store.availability_calls == [("t-1", date.today(), time(23, 0), time(6, 0))]


def test_db_check_without_tables(client, store):
    store.tables = []

    body = client.get("/api/test-db").json()

    assert body["success"] is True
    assert body["data"]["availability_test"] == {"table_id": None, "is_available": None}
    assert store.availability_calls == []


def test_db_check_reports_failure(client, store):
    store.venue_error = ConnectionError("password authentication failed for user postgres")

    response = client.get("/api/test-db")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Database connection failed"
    assert "password" not in body["error"]


def test_lifespan_builds_missing_handles(settings):
    from fastapi.testclient import TestClient

    from app.main import create_app
    from app.services.payment_gateway import PaymentGateway
    from app.services.venue_store import VenueStore

    app = create_app(settings=settings)
    assert app.state.store is None

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        assert isinstance(app.state.store, VenueStore)
        assert isinstance(app.state.payments, PaymentGateway)


def test_module_level_app_routes_every_api():
    import app.main

    paths = {route.path for route in app.main.app.routes}

    assert {
        "/api/venue/{slug}",
        "/api/tables/{venue_id}",
        "/api/payments/create-intent",
        "/api/bookings",
        "/api/webhooks/stripe",
        "/api/test-db",
        "/health",
    } <= paths
