"""Action boundary between untrusted caller input and the Gemini flows.

Every function here re-validates its raw input on its own and returns a plain
result carrying either the suggestion or an ``error`` string. Nothing raises.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from smartdo.config import get_settings
from smartdo.flows.categorize_task import categorize_task
from smartdo.flows.schedule_reminder import schedule_reminder
from smartdo.models.actions import (
    CategorySuggestion,
    CategorySuggestionRequest,
    ReminderSuggestion,
    SmartReminderRequest,
)
from smartdo.models.categorize import CategorizeTaskInput
from smartdo.models.reminder import ScheduleReminderInput

logger = logging.getLogger(__name__)

CATEGORY_FAILURE_MESSAGE = "Failed to get category suggestion from AI."
REMINDER_FAILURE_MESSAGE = "Failed to get smart reminder suggestion from AI."


def format_validation_errors(exc: PydanticValidationError, model: type[BaseModel] | None = None) -> str:
    """Render pydantic errors as 'field: message' pairs joined by commas.

    With a model given, field names are reported by their wire alias even when
    the input used the Python name.
    """
    fields = model.model_fields if model is not None else {}
    parts = []
    for error in exc.errors():
        field = ".".join(
            (fields[p].alias or p) if isinstance(p, str) and p in fields else str(p)
            for p in error["loc"]
        )
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return ", ".join(parts)


def get_task_category_suggestion(values: Mapping[str, Any]) -> CategorySuggestion:
    """Suggest one category for a task; falls back to the default on an empty suggestion list."""
    try:
        request = CategorySuggestionRequest.model_validate(values)
    except PydanticValidationError as e:
        return CategorySuggestion(
            error=f"Invalid input for categorization: {format_validation_errors(e, CategorySuggestionRequest)}"
        )

    try:
        result = categorize_task(
            CategorizeTaskInput(title=request.title, description=request.description or "")
        )
    except Exception:
        logger.exception("Error getting category suggestion")
        return CategorySuggestion(error=CATEGORY_FAILURE_MESSAGE)

    if result.categories:
        return CategorySuggestion(category=result.categories[0])
    return CategorySuggestion(category=get_settings().default_category)


def get_smart_reminder_suggestion(values: Mapping[str, Any]) -> ReminderSuggestion:
    """Suggest a reminder time; the upstream values are returned unchanged."""
    try:
        request = SmartReminderRequest.model_validate(values)
    except PydanticValidationError as e:
        return ReminderSuggestion(
            error=f"Invalid input for smart reminder: {format_validation_errors(e, SmartReminderRequest)}"
        )

    try:
        result = schedule_reminder(
            ScheduleReminderInput(
                task_title=request.task_title,
                task_description=request.task_description or "",
                task_due_date=request.task_due_date,
                user_habits=request.user_habits,
                task_urgency=request.task_urgency,
            )
        )
    except Exception:
        logger.exception("Error getting smart reminder suggestion")
        return ReminderSuggestion(error=REMINDER_FAILURE_MESSAGE)

    return ReminderSuggestion(
        reminder_date_time=result.reminder_date_time,
        reasoning=result.reasoning,
    )
