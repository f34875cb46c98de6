import json

import pytest

from smartdo.exceptions import TaskNotFoundError, ValidationError
from smartdo.models.actions import CategorySuggestion, ReminderSuggestion
from smartdo.models.tasks import CreateTaskRequest, Task, UpdateTaskRequest
from smartdo.services import preferences
from smartdo.services import tasks as tasks_service
from smartdo.services.store import InMemoryTaskStore, JsonFileTaskStore, get_task_store


def _task(**overrides) -> Task:
    data = {"id": "t1", "title": "Grocery Shopping", "category": "Personal"}
    data.update(overrides)
    return Task(**data)


class TestStores:
    @pytest.fixture(params=["memory", "file"])
    def store(self, request, tmp_path):
        if request.param == "memory":
            return InMemoryTaskStore()
        return JsonFileTaskStore(tmp_path / "tasks.json")

    def test_put_and_get(self, store):
        store.put(_task())
        assert store.get("t1") == _task()

    def test_get_missing(self, store):
        assert store.get("nope") is None

    def test_put_replaces(self, store):
        store.put(_task())
        store.put(_task(title="Renamed"))
        assert [t.title for t in store.list()] == ["Renamed"]

    def test_delete(self, store):
        store.put(_task())
        assert store.delete("t1") is True
        assert store.delete("t1") is False
        assert store.list() == []

    def test_file_is_keyed_by_id_with_camel_case_fields(self, tmp_path):
        path = tmp_path / "tasks.json"
        store = JsonFileTaskStore(path)
        store.put(_task(due_date="2025-01-01T00:00:00.000Z"))
        data = json.loads(path.read_text())
        assert list(data) == ["t1"]
        assert data["t1"]["dueDate"] == "2025-01-01T00:00:00.000Z"

    def test_settings_select_file_store(self, monkeypatch, tmp_path):
        from smartdo.config import get_settings
        monkeypatch.setenv("TASK_STORE_FILE", str(tmp_path / "tasks.json"))
        get_settings.cache_clear()
        get_task_store.cache_clear()
        assert isinstance(get_task_store(), JsonFileTaskStore)

    def test_empty_setting_selects_memory_store(self):
        assert isinstance(get_task_store(), InMemoryTaskStore)


class TestTaskOperations:
    def test_create_applies_defaults(self):
        task = tasks_service.create_task(CreateTaskRequest(title="Buy milk"))
        assert task.id
        assert task.category == "General"
        assert task.urgency == "medium"
        assert task.completed is False
        assert tasks_service.get_task(task.id) == task

    def test_create_ids_are_unique(self):
        a = tasks_service.create_task(CreateTaskRequest(title="A"))
        b = tasks_service.create_task(CreateTaskRequest(title="B"))
        assert a.id != b.id

    def test_get_missing_raises(self):
        with pytest.raises(TaskNotFoundError):
            tasks_service.get_task("missing")

    def test_update_changes_only_provided_fields(self):
        task = tasks_service.create_task(
            CreateTaskRequest(title="Report", description="Q3", category="Work", urgency="high")
        )
        updated = tasks_service.update_task(task.id, UpdateTaskRequest(title="Final report"))
        assert updated.title == "Final report"
        assert updated.description == "Q3"
        assert updated.category == "Work"
        assert updated.urgency == "high"

    def test_update_can_clear_description(self):
        task = tasks_service.create_task(CreateTaskRequest(title="Report", description="Q3"))
        updated = tasks_service.update_task(task.id, UpdateTaskRequest(description=None))
        assert updated.description is None

    def test_create_rejects_blank_title_and_bad_due_date(self):
        from pydantic import ValidationError as PydanticValidationError
        with pytest.raises(PydanticValidationError):
            CreateTaskRequest(title="   ")
        with pytest.raises(PydanticValidationError):
            CreateTaskRequest(title="Report", due_date="not-a-date")

    def test_update_rejects_blank_fields_and_bad_due_date(self):
        from pydantic import ValidationError as PydanticValidationError
        for bad in ({"title": " "}, {"category": "  "}, {"dueDate": "next tuesday"}):
            with pytest.raises(PydanticValidationError):
                UpdateTaskRequest.model_validate(bad)

    def test_update_accepts_iso_due_date(self):
        task = tasks_service.create_task(CreateTaskRequest(title="Report"))
        updated = tasks_service.update_task(
            task.id, UpdateTaskRequest(due_date="2025-01-01T00:00:00.000Z")
        )
        assert updated.due_date == "2025-01-01T00:00:00.000Z"

    def test_update_ignores_null_title(self):
        task = tasks_service.create_task(CreateTaskRequest(title="Report"))
        updated = tasks_service.update_task(task.id, UpdateTaskRequest(title=None))
        assert updated.title == "Report"

    def test_delete(self):
        task = tasks_service.create_task(CreateTaskRequest(title="Delete me"))
        tasks_service.delete_task(task.id)
        assert tasks_service.list_tasks() == []
        with pytest.raises(TaskNotFoundError):
            tasks_service.delete_task(task.id)

    def test_toggle_completion(self):
        task = tasks_service.create_task(CreateTaskRequest(title="Toggle"))
        assert tasks_service.toggle_task_completion(task.id).completed is True
        assert tasks_service.toggle_task_completion(task.id).completed is False

    def test_set_reminder(self):
        task = tasks_service.create_task(CreateTaskRequest(title="Report"))
        updated = tasks_service.set_task_reminder(task.id, "2024-12-31T19:00:00Z", "Evening before")
        assert updated.reminder_date_time == "2024-12-31T19:00:00Z"
        assert updated.reminder_reasoning == "Evening before"
        assert tasks_service.get_task(task.id).reminder_reasoning == "Evening before"

    def test_set_reminder_blank_habits_leaves_task_unchanged(self):
        task = tasks_service.create_task(CreateTaskRequest(title="Report"))
        with pytest.raises(ValidationError):
            tasks_service.set_task_reminder(task.id, "2024-12-31T19:00:00Z", "r", user_habits="   ")
        stored = tasks_service.get_task(task.id)
        assert stored.reminder_date_time is None
        assert stored.reminder_reasoning is None
        assert preferences.get_user_habits() == preferences.DEFAULT_USER_HABITS

    def test_set_reminder_saves_habits(self):
        task = tasks_service.create_task(CreateTaskRequest(title="Report"))
        tasks_service.set_task_reminder(task.id, "2024-12-31T19:00:00Z", "r", user_habits="Early riser")
        assert preferences.get_user_habits() == "Early riser"

    def test_categories_are_sorted_and_distinct(self):
        for category in ("Work", "Personal", "Work"):
            tasks_service.create_task(CreateTaskRequest(title="x", category=category))
        assert tasks_service.list_categories() == ["Personal", "Work"]

    def test_grouping_puts_urgent_first(self):
        for category in ("Work", "urgent", "Personal", "Work"):
            tasks_service.create_task(CreateTaskRequest(title="x", category=category))
        groups = tasks_service.group_tasks_by_category()
        assert [g.category for g in groups] == ["urgent", "Personal", "Work"]
        assert len(groups[2].tasks) == 2

    def test_blank_category_groups_as_uncategorized(self):
        get_task_store().put(_task(category=""))
        groups = tasks_service.group_tasks_by_category()
        assert [g.category for g in groups] == ["Uncategorized"]


class TestPreferences:
    def test_default_habits(self):
        assert preferences.get_user_habits() == preferences.DEFAULT_USER_HABITS

    def test_set_and_get(self):
        preferences.set_user_habits("Night owl")
        assert preferences.get_user_habits() == "Night owl"

    def test_empty_habits_rejected(self):
        with pytest.raises(ValidationError):
            preferences.set_user_habits("  ")

    def test_file_backed(self, monkeypatch, tmp_path):
        from smartdo.config import get_settings
        path = tmp_path / "prefs.json"
        monkeypatch.setenv("PREFERENCES_FILE", str(path))
        get_settings.cache_clear()
        preferences.get_preference_store.cache_clear()
        preferences.set_user_habits("Weekend mornings")
        assert isinstance(preferences.get_preference_store(), preferences.JsonFilePreferenceStore)
        assert json.loads(path.read_text()) == {"userHabits": "Weekend mornings"}
        assert preferences.get_user_habits() == "Weekend mornings"

    def test_empty_setting_selects_memory_store(self):
        assert isinstance(preferences.get_preference_store(), preferences.InMemoryPreferenceStore)


class TestSuggestionsForStoredTasks:
    def test_category_suggestion_leaves_task_unchanged(self, mocker):
        mock_action = mocker.patch(
            "smartdo.services.tasks.actions.get_task_category_suggestion",
            return_value=CategorySuggestion(category="Shopping"),
        )
        task = tasks_service.create_task(CreateTaskRequest(title="Buy milk"))
        result = tasks_service.suggest_category_for_task(task.id)
        assert result.category == "Shopping"
        mock_action.assert_called_once_with({"title": "Buy milk", "description": None})
        assert tasks_service.get_task(task.id).category == "General"

    def test_reminder_without_due_date_skips_call(self, mocker):
        mock_action = mocker.patch("smartdo.services.tasks.actions.get_smart_reminder_suggestion")
        task = tasks_service.create_task(CreateTaskRequest(title="Someday"))
        result = tasks_service.suggest_reminder_for_task(task.id)
        assert result.error == tasks_service.MISSING_DUE_DATE_MESSAGE
        mock_action.assert_not_called()

    def test_reminder_uses_saved_habits(self, mocker):
        mock_action = mocker.patch(
            "smartdo.services.tasks.actions.get_smart_reminder_suggestion",
            return_value=ReminderSuggestion(reminder_date_time="2025-01-01T08:00:00Z", reasoning="r"),
        )
        preferences.set_user_habits("Mornings only")
        task = tasks_service.create_task(
            CreateTaskRequest(title="Report", due_date="2025-01-02T00:00:00Z", urgency="low")
        )
        result = tasks_service.suggest_reminder_for_task(task.id)
        assert result.reminder_date_time == "2025-01-01T08:00:00Z"
        sent = mock_action.call_args.args[0]
        assert sent["userHabits"] == "Mornings only"
        assert sent["taskUrgency"] == "low"
        assert sent["taskId"] == task.id
        assert tasks_service.get_task(task.id).reminder_date_time is None

    def test_reminder_habits_override(self, mocker):
        mock_action = mocker.patch(
            "smartdo.services.tasks.actions.get_smart_reminder_suggestion",
            return_value=ReminderSuggestion(error="x"),
        )
        task = tasks_service.create_task(
            CreateTaskRequest(title="Report", due_date="2025-01-02T00:00:00Z")
        )
        tasks_service.suggest_reminder_for_task(task.id, user_habits="Lunchtime")
        assert mock_action.call_args.args[0]["userHabits"] == "Lunchtime"
