"""Health, API description and the error envelope for unknown routes."""

from __future__ import annotations


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Server is healthy"
    assert body["data"]["status"] == "OK"
    assert body["data"]["version"] == "1.0.0"
    assert body["data"]["uptime"] >= 0


def test_api_description_lists_endpoints(client):
    response = client.get("/api")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["authentication"] == "Bearer token required for protected routes"
    assert data["endpoints"]["products"]["GET /api/products"] == "List Products"
    assert "POST /api/upload/image" in data["endpoints"]["upload"]
    assert "DELETE /api/users/{user_id}" in data["endpoints"]["users"]


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Route /api/nothing-here not found"
    assert "timestamp" in body


def test_request_id_header_is_echoed(client):
    response = client.get("/health", headers={"X-Request-ID": "3b7c1f0e-8d2a-4f6b-9c1e-5a7d2b4e6f80"})

    assert response.headers["X-Request-ID"] == "3b7c1f0e-8d2a-4f6b-9c1e-5a7d2b4e6f80"
