"""
Integration tests for health check endpoints.
"""
import pytest
from django.urls import reverse


@pytest.mark.django_db
@pytest.mark.integration
class TestHealthEndpoints:
    """Tests for health and readiness endpoints."""

    def test_health(self, client):
        response = client.get(reverse("health"))

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "keyguard-service"}

    def test_health_db(self, client):
        response = client.get(reverse("health-db"))

        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    def test_health_cache(self, client):
        response = client.get(reverse("health-cache"))

        assert response.status_code == 200

    def test_ready(self, client):
        response = client.get(reverse("ready"))

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_responses_carry_correlation_id(self, client):
        response = client.get(reverse("health"), HTTP_X_CORRELATION_ID="abc-123")

        assert response["X-Correlation-ID"] == "abc-123"
        assert response["X-Request-Status"] == "success"
