from pydantic import field_validator

from smartdo.models.common import CamelModel, require_text
from smartdo.models.reminder import TaskUrgency, check_due_date


class Task(CamelModel):
    id: str
    title: str
    description: str | None = None
    due_date: str | None = None  # ISO date-time
    category: str
    completed: bool = False
    urgency: TaskUrgency = "medium"
    reminder_date_time: str | None = None
    reminder_reasoning: str | None = None


class TaskGroup(CamelModel):
    category: str
    tasks: list[Task]


class CreateTaskRequest(CamelModel):
    title: str
    description: str | None = None
    due_date: str | None = None
    category: str | None = None
    urgency: TaskUrgency | None = None

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        return require_text(value, "Title is required")

    @field_validator("due_date")
    @classmethod
    def _due_date_parses(cls, value: str | None) -> str | None:
        return check_due_date(value) if value is not None else None


class UpdateTaskRequest(CamelModel):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    category: str | None = None
    completed: bool | None = None
    urgency: TaskUrgency | None = None

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str | None) -> str | None:
        return require_text(value, "Title is required") if value is not None else None

    @field_validator("category")
    @classmethod
    def _category_not_blank(cls, value: str | None) -> str | None:
        return require_text(value, "Category is required") if value is not None else None

    @field_validator("due_date")
    @classmethod
    def _due_date_parses(cls, value: str | None) -> str | None:
        return check_due_date(value) if value is not None else None


class SetReminderRequest(CamelModel):
    reminder_date_time: str
    reasoning: str
    user_habits: str | None = None


class SuggestReminderRequest(CamelModel):
    user_habits: str | None = None


class UserHabits(CamelModel):
    user_habits: str
