"""Smart reminder flow: picks a reminder time from due date, urgency and the user's habits."""

from collections.abc import Mapping
from typing import Any

from smartdo.flows.base import Flow
from smartdo.models.reminder import ScheduleReminderInput, ScheduleReminderOutput
from smartdo.prompts import SCHEDULE_REMINDER_PROMPT
from smartdo.services.gemini import REMINDER_SAFETY_SETTINGS

schedule_reminder_flow = Flow(
    name="scheduleReminderFlow",
    input_model=ScheduleReminderInput,
    output_model=ScheduleReminderOutput,
    template=SCHEDULE_REMINDER_PROMPT,
    safety_settings=REMINDER_SAFETY_SETTINGS,
)


def schedule_reminder(payload: ScheduleReminderInput | Mapping[str, Any]) -> ScheduleReminderOutput:
    """Suggest a reminder date-time with reasoning. Never writes to the task store."""
    return schedule_reminder_flow(payload)
