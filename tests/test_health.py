def test_root_reports_healthy(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_security_headers_are_set(client):
    response = client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_unknown_route_uses_message_body(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert "message" in response.json()
