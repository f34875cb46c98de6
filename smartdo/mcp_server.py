from fastmcp import FastMCP

from smartdo import actions
from smartdo.exceptions import SmartdoError, TaskNotFoundError, ValidationError
from smartdo.models.tasks import CreateTaskRequest
from smartdo.services import tasks as tasks_service

mcp = FastMCP("SmartDo")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, TaskNotFoundError):
        return {"error": "not_found", "message": str(e), "action": "Call list_tasks to find a valid task id"}
    if isinstance(e, ValidationError):
        return {"error": "validation_error", "message": str(e)}
    return {"error": "unknown_error", "message": str(e)}


# --- Suggestion tools ---

@mcp.tool
def suggest_category(title: str, description: str = "") -> dict:
    """Suggest a category for a task from its title and description.
    Returns {"category": ...} on success or {"error": ...} on failure. Never changes stored tasks."""
    return actions.get_task_category_suggestion(
        {"title": title, "description": description}
    ).model_dump(exclude_none=True)


@mcp.tool
def suggest_reminder(
    task_title: str,
    task_due_date: str,
    user_habits: str,
    task_urgency: str = "medium",
    task_description: str = "",
) -> dict:
    """Suggest a reminder date-time for a task. task_due_date is ISO-8601, task_urgency is low, medium or high.
    user_habits is a free-text description of the user's schedule (e.g. 'free after 7 PM').
    Returns reminderDateTime and reasoning, or an error. Use set_task_reminder to store an accepted suggestion."""
    return actions.get_smart_reminder_suggestion(
        {
            "taskTitle": task_title,
            "taskDescription": task_description,
            "taskDueDate": task_due_date,
            "userHabits": user_habits,
            "taskUrgency": task_urgency,
        }
    ).model_dump(by_alias=True, exclude_none=True)


# --- Task tools ---

@mcp.tool
def list_tasks() -> dict:
    """List all tasks with id, title, category, due date, urgency and completion state."""
    tasks = tasks_service.list_tasks()
    return {"tasks": [t.model_dump(by_alias=True) for t in tasks], "count": len(tasks)}


@mcp.tool
def create_task(
    title: str,
    description: str | None = None,
    due_date: str | None = None,
    category: str | None = None,
    urgency: str | None = None,
) -> dict:
    """Create a task. Category defaults to 'General' and urgency to 'medium' when omitted."""
    try:
        request = CreateTaskRequest(
            title=title, description=description, due_date=due_date, category=category, urgency=urgency,
        )
        return tasks_service.create_task(request).model_dump(by_alias=True)
    except ValueError as e:
        return {"error": "validation_error", "message": str(e)}


@mcp.tool
def set_task_reminder(task_id: str, reminder_date_time: str, reasoning: str) -> dict:
    """Store a reminder the user has accepted (usually one returned by suggest_reminder) on a task."""
    try:
        return tasks_service.set_task_reminder(task_id, reminder_date_time, reasoning).model_dump(by_alias=True)
    except SmartdoError as e:
        return _handle_mcp_error(e)
