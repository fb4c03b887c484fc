"""Tests for the venue endpoint."""


def test_get_venue_returns_projection(client):
    response = client.get("/api/venue/backroom-leeds")

    assert response.status_code == 200
    venue = response.json()["venue"]
    assert venue["id"] == "venue-1"
    assert venue["slug"] == "backroom-leeds"
    assert venue["capacity"] == {"total": 500, "main_bar": 350, "private_room": 150}
    assert venue["opening_hours"] == {"friday": {"open": "23:00", "close": "06:00"}}
    assert venue["is_active"] is True


def test_unknown_venue_is_404(client):
    response = client.get("/api/venue/nowhere")

    assert response.status_code == 404
    body = response.json()
    assert body == {"error": "Venue not found"}
    assert "venue" not in body


def test_repeated_reads_are_identical(client):
    first = client.get("/api/venue/backroom-leeds").json()
    second = client.get("/api/venue/backroom-leeds").json()

    assert first == second


def test_store_failure_is_generic_500(client, store):
    store.venue_error = RuntimeError("connection refused to 10.0.0.3")

    response = client.get("/api/venue/backroom-leeds")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
