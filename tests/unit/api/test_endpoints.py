"""End-to-end tests for the HTTP API with the database swapped for in-memory SQLite.

The application lifespan is not entered, so neither table creation on disk
nor the reminder scheduler runs.
"""

import datetime

import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from fastapi.testclient import TestClient

from app.core.config import settings
from app.db.session import get_db
from app.longevity.dates import week_key
from app.main import app
from app.notifications.vapid import encode_private_key, public_key_b64
from tests.conftest import cognition_values, fitness_values, health_values


@pytest.fixture
def client(session):
    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _subscribe_body(endpoint="https://push.example.com/send/1", **overrides) -> dict:
    body = {
        "subscription": {"endpoint": endpoint, "keys": {"p256dh": "BPub", "auth": "secret"}},
        "reminder_day": 1,
        "reminder_time": "09:00",
        "timezone": "Europe/Rome",
    }
    body.update(overrides)
    return body


# ======================================================================
# Service
# ======================================================================


class TestServiceRoutes:
    def test_root(self, client):
        assert client.get("/").json()["status"] == "healthy"

    def test_health(self, client):
        assert client.get("/health").json()["service"] == "health-balance-api"


# ======================================================================
# Profile
# ======================================================================


class TestProfileEndpoints:
    def test_missing_profile(self, client):
        assert client.get("/api/v1/profile").status_code == 404

    def test_save_and_read(self, client):
        response = client.put("/api/v1/profile",
                              json={"birth_date": "1990-01-01", "sex": "Male", "height_cm": 180})
        assert response.status_code == 200
        assert response.json()["sex"] == "male"

        profile = client.get("/api/v1/profile").json()
        assert profile["birth_date"] == "1990-01-01"
        assert profile["height_cm"] == 180.0
        assert profile["age"] >= 35

    def test_sex_is_normalised(self, client):
        response = client.put("/api/v1/profile",
                              json={"birth_date": "1990-01-01", "sex": " MALE ", "height_cm": 180})
        assert response.json()["sex"] == "male"

    def test_future_birth_date_rejected(self, client):
        tomorrow = datetime.date.today() + datetime.timedelta(days=1)
        response = client.put("/api/v1/profile",
                              json={"birth_date": tomorrow.isoformat(), "sex": "female", "height_cm": 165})
        assert response.status_code == 400

    def test_invalid_height_rejected(self, client):
        response = client.put("/api/v1/profile",
                              json={"birth_date": "1990-01-01", "sex": "female", "height_cm": 0})
        assert response.status_code == 422


# ======================================================================
# Metrics and scores
# ======================================================================


class TestMetricsEndpoints:
    def test_week_status_fills_up(self, client):
        week = client.get("/api/v1/metrics/week").json()
        assert week["date"] == week_key(datetime.date.today()).isoformat()
        assert week["is_complete"] is False

        assert client.put("/api/v1/metrics/health", json=health_values()).status_code == 200
        assert client.put("/api/v1/metrics/fitness", json=fitness_values()).status_code == 200
        assert client.put("/api/v1/metrics/cognition", json=cognition_values()).status_code == 200

        week = client.get("/api/v1/metrics/week").json()
        assert week["is_complete"] is True
        assert week["health"]["sleep_score"] == 80

    def test_saving_twice_overwrites(self, client):
        client.put("/api/v1/metrics/health", json=health_values(sleep_score=60))
        client.put("/api/v1/metrics/health", json=health_values(sleep_score=85))

        assert client.get("/api/v1/metrics/week").json()["health"]["sleep_score"] == 85

    def test_recent_excludes_current_week(self, client):
        client.put("/api/v1/metrics/fitness", json=fitness_values())
        assert client.get("/api/v1/metrics/fitness").json() == []

    def test_unknown_pillar(self, client):
        assert client.get("/api/v1/metrics/mood").status_code == 422

    def test_delete(self, client):
        client.put("/api/v1/metrics/cognition", json=cognition_values())
        current = week_key(datetime.date.today()).isoformat()

        assert client.delete(f"/api/v1/metrics/cognition/{current}").status_code == 204
        assert client.delete(f"/api/v1/metrics/cognition/{current}").status_code == 404

    def test_validation(self, client):
        assert client.put("/api/v1/metrics/health", json=health_values(sleep_score=140)).status_code == 422


class TestScoreEndpoints:
    def test_history_requires_profile(self, client):
        assert client.get("/api/v1/scores").status_code == 409

    def test_current_defaults_to_starting_score(self, client):
        body = client.get("/api/v1/scores/current").json()
        assert body["is_default"] is True
        assert body["entry"]["score"] == 1000.0

    def test_complete_week_produces_score(self, client):
        client.put("/api/v1/profile", json={"birth_date": "1991-01-01", "sex": "female", "height_cm": 180})
        client.put("/api/v1/metrics/health", json=health_values())
        client.put("/api/v1/metrics/fitness", json=fitness_values())
        client.put("/api/v1/metrics/cognition", json=cognition_values())

        history = client.get("/api/v1/scores").json()
        assert len(history) == 1
        assert history[0]["date"] == week_key(datetime.date.today()).isoformat()

        current = client.get("/api/v1/scores/current").json()
        assert current["is_default"] is False
        assert current["entry"] == history[0]


# ======================================================================
# Notifications
# ======================================================================


class TestNotificationEndpoints:
    def test_public_key_not_configured(self, client, monkeypatch):
        monkeypatch.setattr(settings, "VAPID_PUBLIC_KEY", "")
        monkeypatch.setattr(settings, "VAPID_PRIVATE_KEY", "")
        assert client.get("/api/v1/notifications/vapid-public-key").status_code == 503

    def test_public_key_derived_from_private_key(self, client, monkeypatch):
        key = ec.generate_private_key(ec.SECP256R1())
        monkeypatch.setattr(settings, "VAPID_PUBLIC_KEY", "")
        monkeypatch.setattr(settings, "VAPID_PRIVATE_KEY", encode_private_key(key))

        body = client.get("/api/v1/notifications/vapid-public-key").json()
        assert body["public_key"] == public_key_b64(key)

    def test_subscribe_then_resubscribe(self, client):
        first = client.post("/api/v1/notifications/subscribe", json=_subscribe_body())
        assert first.status_code == 201

        second = client.post("/api/v1/notifications/subscribe",
                             json=_subscribe_body(reminder_day=0, reminder_time="20:15"))
        assert second.status_code == 200
        assert second.json()["reminder_time"] == "20:15"

    def test_subscribe_rejects_bad_slot(self, client):
        assert client.post("/api/v1/notifications/subscribe",
                           json=_subscribe_body(reminder_time="25:00")).status_code == 422
        assert client.post("/api/v1/notifications/subscribe",
                           json=_subscribe_body(reminder_day=7)).status_code == 422

    def test_unsubscribe(self, client):
        client.post("/api/v1/notifications/subscribe", json=_subscribe_body())
        body = {"endpoint": "https://push.example.com/send/1"}

        assert client.post("/api/v1/notifications/unsubscribe", json=body).status_code == 204
        assert client.post("/api/v1/notifications/unsubscribe", json=body).status_code == 404
