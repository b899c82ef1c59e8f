"""Shared fixtures for study planner tests."""

import json

import pytest


class FakePlanModel:
    """Stand-in for the external model; records every call."""

    name = "fake"

    def __init__(self, response=None, error: Exception | None = None):
        self._response = response
        self._error = error
        self.calls: list[tuple[str, dict]] = []

    def generate_json(self, prompt: str, schema: dict) -> str:
        self.calls.append((prompt, schema))
        if self._error is not None:
            raise self._error
        if isinstance(self._response, str):
            return self._response
        return json.dumps(self._response)


@pytest.fixture
def networking_plan() -> dict:
    return {
        "tasks": [
            {
                "date": "2024-01-02",
                "topic": "Networking",
                "tasks": ["Read chapter 1"],
                "estimatedHours": 2,
                "completed": True,
            }
        ],
        "startDate": "2024-01-01",
        "deadline": "2024-01-07",
        "totalHours": 2,
    }


@pytest.fixture
def constraints_payload() -> dict:
    return {
        "hoursPerWeek": 10,
        "startDate": "2024-01-01",
        "deadline": "2024-01-07",
        "weakTopics": ["Networking"],
        "materialNames": [],
    }
