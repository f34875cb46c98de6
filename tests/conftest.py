import json

import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient


# --- Canned payloads ---

CATEGORY_INPUT = {"title": "Buy milk", "description": ""}

REMINDER_INPUT = {
    "taskId": "task123",
    "taskTitle": "Project Report",
    "taskDescription": "Finalize Q3 project report for client.",
    "taskDueDate": "2025-01-01T00:00:00.000Z",
    "userHabits": "Usually free in the evenings after 7 PM and on weekend mornings.",
    "taskUrgency": "high",
}

REMINDER_REPLY = {
    "reminderDateTime": "2024-12-31T19:00:00.000Z",
    "reasoning": "The report is urgent and you are free after 7 PM the evening before.",
}


def gemini_reply(payload) -> MagicMock:
    """A generate_content response whose text is the JSON of payload."""
    response = MagicMock()
    response.text = payload if isinstance(payload, str) or payload is None else json.dumps(payload)
    return response


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Fresh settings per test: in-memory stores and a dummy Gemini key."""
    from smartdo.config import get_settings
    from smartdo.services.preferences import get_preference_store
    from smartdo.services.store import get_task_store

    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("TASK_STORE_FILE", "")
    monkeypatch.setenv("PREFERENCES_FILE", "")
    get_settings.cache_clear()
    get_task_store.cache_clear()
    get_preference_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_task_store.cache_clear()
    get_preference_store.cache_clear()


@pytest.fixture
def mock_gemini_client(mocker):
    """Mocked genai.Client; set models.generate_content.return_value per test."""
    client = MagicMock()
    mocker.patch("smartdo.services.gemini._get_client", return_value=client)
    return client


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from smartdo.main import api
    return TestClient(api)
