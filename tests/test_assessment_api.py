"""
Assessment API Tests

Exercises the FastAPI router through TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from app.config import DEFAULT_BOOK_CALL_URL
from main import app


GREEN_ANSWERS = {
    "context_location": "detached",
    "floor_type": "slab",
    "ceiling_height": "h_9plus",
    "above_space": "attic",
    "neighbors": "no_one",
    "use_cases": ["voice"],
    "time_of_use": "day",
    "expectation": "not_notice",
    "mods": "yes",
    "ventilation": "vent_yes",
    "budget": "b_50plus",
    "mindset": "reconsider",
}


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:

    def test_module_health(self, client):
        resp = client.get("/api/v1/assessment/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["question_count"] == 12

    def test_app_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_version(self, client):
        body = client.get("/version").json()
        assert body["engine_version"] == "verdict_engine_v1"


class TestQuestions:

    def test_lists_table(self, client):
        body = client.get("/api/v1/assessment/questions").json()
        assert body["count"] == 12
        assert body["questions"][0]["id"] == "context_location"
        assert body["questions"][5]["multiple"] is True


class TestEvaluate:

    def test_green(self, client):
        resp = client.post("/api/v1/assessment/evaluate", json={"answers": GREEN_ANSWERS})
        assert resp.status_code == 200
        body = resp.json()
        assert body["verdict"]["light"] == "GREEN"
        assert body["verdict"]["meta"]["capability_tier"] == "A"
        assert body["book_call_url"] == DEFAULT_BOOK_CALL_URL

    def test_book_call_url_from_env(self, client, monkeypatch):
        monkeypatch.setenv("BOOK_CALL_URL", "https://example.com/book")
        body = client.post("/api/v1/assessment/evaluate", json={"answers": GREEN_ANSWERS}).json()
        assert body["book_call_url"] == "https://example.com/book"

    def test_partial_answers_allowed_by_default(self, client):
        resp = client.post("/api/v1/assessment/evaluate", json={"answers": {"floor_type": "slab"}})
        assert resp.status_code == 200
        assert resp.json()["verdict"]["meta"]["points"] == 0

    def test_require_complete_rejects_partial(self, client):
        resp = client.post(
            "/api/v1/assessment/evaluate",
            json={"answers": {"floor_type": "slab"}, "require_complete": True},
        )
        assert resp.status_code == 422
        assert "use_cases" in resp.json()["detail"]["missing"]

    def test_require_complete_accepts_full(self, client):
        resp = client.post(
            "/api/v1/assessment/evaluate",
            json={"answers": GREEN_ANSWERS, "require_complete": True},
        )
        assert resp.status_code == 200

    def test_single_select_with_many_ids_rejected(self, client):
        answers = dict(GREEN_ANSWERS, floor_type=["slab", "wood_crawl"])
        resp = client.post("/api/v1/assessment/evaluate", json={"answers": answers})
        assert resp.status_code == 422

    def test_hard_stop_red(self, client):
        answers = dict(GREEN_ANSWERS, ceiling_height="h_under7")
        body = client.post("/api/v1/assessment/evaluate", json={"answers": answers}).json()
        assert body["verdict"]["light"] == "RED"
        assert body["verdict"]["meta"]["hard_stop_triggered"] is True


class TestExplain:

    def test_explain(self, client):
        answers = dict(GREEN_ANSWERS, floor_type="wood_crawl")
        resp = client.post("/api/v1/assessment/explain", json={"answers": answers})
        assert resp.status_code == 200
        result = resp.json()["result"]
        assert result["verdict"]["light"] == "YELLOW"
        assert result["primary_constraints"][0]["option_id"] == "wood_crawl"
        assert len(result["breakdown"]) == 12

    def test_disclaimer(self, client):
        body = client.get("/api/v1/assessment/disclaimer").json()
        assert body["version"] == "disclaimer_v1.0"


class TestToggle:

    def test_toggle(self, client):
        resp = client.post(
            "/api/v1/assessment/answers/toggle",
            json={"answers": {"use_cases": ["voice"]}, "question_id": "use_cases", "option_id": "drums"},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["answers"]["use_cases"] == ["voice", "drums"]
        assert body["complete"] is False

    def test_toggle_completes(self, client):
        answers = dict(GREEN_ANSWERS)
        answers.pop("mindset")
        body = client.post(
            "/api/v1/assessment/answers/toggle",
            json={"answers": answers, "question_id": "mindset", "option_id": "adjust"},
        ).json()
        assert body["complete"] is True
        assert body["missing_required"] == []

    def test_toggle_unknown_question(self, client):
        resp = client.post(
            "/api/v1/assessment/answers/toggle",
            json={"answers": {}, "question_id": "pool", "option_id": "yes"},
        )
        assert resp.status_code == 404
