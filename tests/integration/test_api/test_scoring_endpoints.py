"""Integration tests for the scoring API endpoints.

Covers submission scoring, raw score grading, the level guide, error
envelopes and request id propagation.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from semf.api.main import app, register_exception_handlers
from semf.utils.constants import LEVEL_DESCRIPTIONS, SemfLevel

API = "/api/v1"


class TestScoringEndpointsIntegration:
    """Integration tests for /scoring endpoints."""

    @pytest.fixture
    def client(self):
        """Create test client."""
        return TestClient(app)

    @pytest.fixture
    async def async_client(self):
        """Create async test client."""
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac

    def test_score_all_correct(self, client, all_correct_answers):
        response = client.post(f"{API}/scoring/semf", json={"answers": all_correct_answers})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Submission scored successfully"

        report = body["data"]
        assert report["overall_level"] == "S5"
        assert report["descriptions"] == {"S5": LEVEL_DESCRIPTIONS[SemfLevel.S5]}
        assert report["completion_percentage"] == 100
        assert [s["skill"] for s in report["skills"]] == ["ReadingWriting", "Listening"]
        assert report["tie_breaker_skill"]["normalized_score"] == 50.0
        assert body["meta"]["request_id"] == response.headers["X-Request-ID"]

    def test_score_near_miss_promotion(self, client, answer_factory):
        answers = answer_factory(grammar=14, story=7, listening=12)
        response = client.post(f"{API}/scoring/semf", json={"answers": answers})

        assert response.status_code == 200
        reading = response.json()["data"]["skills"][0]
        assert reading["normalized_score"] == 14.6
        assert reading["level"] == "S2"
        assert reading["tie_breaker_applied"] is True

    def test_score_empty_submission(self, client):
        response = client.post(f"{API}/scoring/semf", json={"answers": {}})

        assert response.status_code == 200
        report = response.json()["data"]
        assert report["overall_level"] == "S1"
        assert report["completion_percentage"] == 0

    def test_unknown_question_rejected(self, client):
        response = client.post(f"{API}/scoring/semf", json={"answers": {"57": "A"}})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "INVALID_QUESTION_ID"
        assert error["details"]["validation_errors"] == ["Question 57 is outside 1-56"]

    def test_non_numeric_question_id(self, client):
        response = client.post(f"{API}/scoring/semf", json={"answers": {"abc": "A"}})

        assert response.status_code == 422
        assert response.json()["error"]["message"] == "Validation error"

    def test_raw_scores(self, client, answer_factory):
        answers = answer_factory(grammar=3, ordering=1, listening=2)
        response = client.post(f"{API}/scoring/raw-scores", json={"answers": answers})

        assert response.status_code == 200
        assert response.json()["data"] == {
            "grammar_vocabulary": 3,
            "reading_writing": 1,
            "listening": 2,
        }

    def test_list_levels(self, client):
        response = client.get(f"{API}/scoring/levels")

        assert response.status_code == 200
        levels = response.json()["data"]
        assert [entry["level"] for entry in levels] == ["S1", "S2", "S3", "S4", "S5"]
        assert levels[0]["title"] == "Basic User"

    def test_get_level_case_insensitive(self, client):
        response = client.get(f"{API}/scoring/levels/s3")

        assert response.status_code == 200
        entry = response.json()["data"]
        assert entry["level"] == "S3"
        assert entry["title"] == "Independent User"

    def test_get_unknown_level(self, client):
        response = client.get(f"{API}/scoring/levels/S9")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "LEVEL_NOT_FOUND"

    def test_unknown_route(self, client):
        response = client.get(f"{API}/scoring/unknown")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == 404

    def test_request_id_echoed(self, client):
        request_id = "a" * 32
        response = client.get(f"{API}/scoring/levels", headers={"X-Request-ID": request_id})

        assert response.headers["X-Request-ID"] == request_id
        assert "X-Process-Time" in response.headers

    async def test_health(self, async_client):
        response = await async_client.get(f"{API}/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
        assert "X-Request-ID" in response.headers


def test_unhandled_error_uses_internal_error_code():
    failing_app = register_exception_handlers(FastAPI())

    @failing_app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    response = TestClient(failing_app, raise_server_exceptions=False).get("/boom")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
