from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from smartdo.models.common import CamelModel, require_text

TaskUrgency = Literal["low", "medium", "high"]


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time, accepting a trailing 'Z' for UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def check_due_date(value: str) -> str:
    try:
        parse_iso_datetime(value)
    except ValueError:
        raise PydanticCustomError("invalid_due_date", "Invalid due date") from None
    return value


class ScheduleReminderInput(CamelModel):
    task_title: str = Field(description="The title of the task.")
    task_description: str = Field(default="", description="A detailed description of the task.")
    task_due_date: str = Field(description="The due date of the task in ISO format.")
    user_habits: str = Field(description="Description of user habits and daily schedule.")
    task_urgency: TaskUrgency = Field(description="The urgency level of the task.")

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


class ScheduleReminderOutput(CamelModel):
    reminder_date_time: str = Field(
        description="The suggested date and time for the reminder in ISO format."
    )
    reasoning: str = Field(description="The reasoning behind the suggested reminder time.")
