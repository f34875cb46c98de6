from typing import Any

from fastapi import APIRouter, Body

from smartdo import actions
from smartdo.models.actions import CategorySuggestion, ReminderSuggestion

router = APIRouter(prefix="/api/suggestions", tags=["suggestions"])


# Bodies are taken as raw JSON of any shape; the action boundary does its own
# validation and reports problems in the "error" field instead of a 422.


@router.post("/category", response_model_exclude_none=True)
def suggest_category(values: Any = Body(None)) -> CategorySuggestion:
    return actions.get_task_category_suggestion(values)


@router.post("/reminder", response_model_exclude_none=True)
def suggest_reminder(values: Any = Body(None)) -> ReminderSuggestion:
    return actions.get_smart_reminder_suggestion(values)
