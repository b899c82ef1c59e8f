"""Tests for the FastAPI study plan endpoints."""

import pytest
from fastapi.testclient import TestClient

import study_planner.main as main
from study_planner.agents import plan_gateway
from study_planner.errors import ConfigurationError

from conftest import FakePlanModel


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(main.settings, "llm_provider", "gemini")
    monkeypatch.setattr(main.settings, "gemini_api_key", "test-key")
    with TestClient(main.app) as test_client:
        yield test_client


def test_generate_endpoint_returns_normalized_plan(monkeypatch, client, constraints_payload, networking_plan):
    model = FakePlanModel(networking_plan)
    monkeypatch.setattr(plan_gateway, "get_plan_model", lambda: model)

    response = client.post("/api/generate-study-plan", json=constraints_payload)

    assert response.status_code == 200
    payload = response.json()
    assert payload["tasks"] == [
        {
            "date": "2024-01-02",
            "topic": "Networking",
            "tasks": ["Read chapter 1"],
            "estimatedHours": 2.0,
            "completed": False,
        }
    ]
    assert payload["startDate"] == "2024-01-01"
    assert payload["deadline"] == "2024-01-07"
    assert payload["totalHours"] == 2.0
    assert len(model.calls) == 1


def test_generate_endpoint_rejects_missing_hours_without_model_call(monkeypatch, client, constraints_payload):
    model = FakePlanModel({})
    monkeypatch.setattr(plan_gateway, "get_plan_model", lambda: model)
    del constraints_payload["hoursPerWeek"]

    response = client.post("/api/generate-study-plan", json=constraints_payload)

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields in request body."
    assert len(model.calls) == 0


def test_generate_endpoint_rejects_deadline_before_start(monkeypatch, client, constraints_payload):
    model = FakePlanModel({})
    monkeypatch.setattr(plan_gateway, "get_plan_model", lambda: model)
    constraints_payload["deadline"] = "2023-12-01"

    response = client.post("/api/generate-study-plan", json=constraints_payload)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body."
    assert len(model.calls) == 0


def test_generate_endpoint_accepts_uploaded_file_metadata(monkeypatch, client, constraints_payload, networking_plan):
    model = FakePlanModel(networking_plan)
    monkeypatch.setattr(plan_gateway, "get_plan_model", lambda: model)
    del constraints_payload["materialNames"]
    constraints_payload["uploadedFiles"] = [{"name": "Security+.pdf", "type": "application/pdf", "size": 2048}]

    response = client.post("/api/generate-study-plan", json=constraints_payload)

    assert response.status_code == 200
    prompt, _schema = model.calls[0]
    assert "Available Study Materials (titles): Security+.pdf" in prompt


def test_generate_endpoint_returns_500_on_transport_error(monkeypatch, client, constraints_payload):
    model = FakePlanModel(error=TimeoutError("read timed out"))
    monkeypatch.setattr(plan_gateway, "get_plan_model", lambda: model)

    response = client.post("/api/generate-study-plan", json=constraints_payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate study plan."}


def test_generate_endpoint_returns_500_on_malformed_response(monkeypatch, client, constraints_payload):
    monkeypatch.setattr(plan_gateway, "get_plan_model", lambda: FakePlanModel('{"tasks": "oops"}'))

    response = client.post("/api/generate-study-plan", json=constraints_payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate study plan."}


def test_generate_endpoint_returns_504_on_timeout(monkeypatch, client, constraints_payload, networking_plan):
    monkeypatch.setattr(plan_gateway, "get_plan_model", lambda: FakePlanModel(networking_plan))
    monkeypatch.setattr(main.concurrent.futures, "wait", lambda *_args, **_kwargs: (set(), set()))

    response = client.post("/api/generate-study-plan", json=constraints_payload)

    assert response.status_code == 504
    assert response.json()["error"] == "Study plan generation timed out."


def test_health_endpoint_reports_provider(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Backend is running", "provider": "gemini"}


def test_quiz_questions_hide_answers(client):
    response = client.get("/api/quiz/questions")

    assert response.status_code == 200
    questions = response.json()
    assert len(questions) == 5
    assert all("correctAnswer" not in q for q in questions)


def test_quiz_weak_topics_endpoint(client):
    response = client.post("/api/quiz/weak-topics", json={"answers": {"1": "Integrity", "2": "DNS"}})

    assert response.status_code == 200
    payload = response.json()
    assert payload["weakTopics"] == ["Security Fundamentals"]
    networking = next(m for m in payload["mastery"] if m["topic"] == "Networking")
    assert networking["mastery"] == 100.0


def test_progress_endpoint_summarizes_plan(client, networking_plan):
    response = client.post(
        "/api/progress",
        json={"plan": networking_plan, "quizAnswers": {}, "today": "2024-01-02"},
    )

    assert response.status_code == 200
    report = response.json()
    assert report["totalTasks"] == 1
    assert report["completedTasks"] == 1
    assert report["completedHours"] == 2.0
    assert report["todayTask"]["topic"] == "Networking"


def test_generate_endpoint_returns_error_envelope_for_deeply_nested_response(monkeypatch, client, constraints_payload):
    monkeypatch.setattr(plan_gateway, "get_plan_model", lambda: FakePlanModel("[" * 100000 + "]" * 100000))

    response = client.post("/api/generate-study-plan", json=constraints_payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate study plan."}


@pytest.mark.parametrize("hours", [0, -3, True])
def test_generate_endpoint_rejects_invalid_hours_without_model_call(monkeypatch, client, constraints_payload, hours):
    model = FakePlanModel({})
    monkeypatch.setattr(plan_gateway, "get_plan_model", lambda: model)
    constraints_payload["hoursPerWeek"] = hours

    response = client.post("/api/generate-study-plan", json=constraints_payload)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body."
    assert len(model.calls) == 0


def test_app_refuses_to_start_without_gemini_key(monkeypatch):
    monkeypatch.setattr(main.settings, "llm_provider", "gemini")
    monkeypatch.setattr(main.settings, "gemini_api_key", "")

    with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
        with TestClient(main.app):
            pass
