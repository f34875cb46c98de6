from pydantic import BaseModel, field_validator, model_validator

from smartdo.models.common import CamelModel, require_text
from smartdo.models.reminder import TaskUrgency, check_due_date


class CategorySuggestionRequest(BaseModel):
    title: str
    description: str | None = None

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        return require_text(value, "Title is required")


class SmartReminderRequest(CamelModel):
    task_id: str | None = None  # context only, not sent to the model
    task_title: str
    task_description: str | None = None
    task_due_date: str
    user_habits: str
    task_urgency: TaskUrgency

    @field_validator("task_title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        return require_text(value, "Title is required")

    @field_validator("task_due_date")
    @classmethod
    def _due_date_parses(cls, value: str) -> str:
        return check_due_date(value)

    @field_validator("user_habits")
    @classmethod
    def _habits_required(cls, value: str) -> str:
        return require_text(value, "User habits are required for smart reminders.")


class CategorySuggestion(BaseModel):
    category: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one(self):
        if (self.category is None) == (self.error is None):
            raise ValueError("exactly one of category or error must be set")
        return self


class ReminderSuggestion(CamelModel):
    reminder_date_time: str | None = None
    reasoning: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one(self):
        has_suggestion = self.reminder_date_time is not None or self.reasoning is not None
        if self.error is not None:
            if has_suggestion:
                raise ValueError("an error result carries no suggestion")
        elif self.reminder_date_time is None or self.reasoning is None:
            raise ValueError("set either reminderDateTime and reasoning, or error")
        return self
