import logging
import uuid

from smartdo import actions
from smartdo.config import get_settings
from smartdo.exceptions import TaskNotFoundError
from smartdo.models.actions import CategorySuggestion, ReminderSuggestion
from smartdo.models.tasks import CreateTaskRequest, Task, TaskGroup, UpdateTaskRequest
from smartdo.services import preferences
from smartdo.services.store import get_task_store

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"
PINNED_CATEGORY = "urgent"
MISSING_DUE_DATE_MESSAGE = "Please set a due date for the task to get a smart reminder suggestion."
CLEARABLE_FIELDS = {"description", "due_date"}


def list_tasks() -> list[Task]:
    return get_task_store().list()


def get_task(task_id: str) -> Task:
    task = get_task_store().get(task_id)
    if task is None:
        raise TaskNotFoundError(f"Task not found: {task_id}")
    return task


def create_task(request: CreateTaskRequest) -> Task:
    """Create a task. Category defaults to the configured default, urgency to medium."""
    task = Task(
        id=str(uuid.uuid4()),
        title=request.title,
        description=request.description,
        due_date=request.due_date,
        category=request.category or get_settings().default_category,
        completed=False,
        urgency=request.urgency or "medium",
    )
    get_task_store().put(task)
    logger.info("Created task %s", task.id)
    return task


def update_task(task_id: str, request: UpdateTaskRequest) -> Task:
    """Update an existing task. Only provided fields are changed."""
    current = get_task(task_id)
    changes = {
        field: value
        for field, value in request.model_dump(exclude_unset=True).items()
        if value is not None or field in CLEARABLE_FIELDS
    }
    task = current.model_copy(update=changes)
    get_task_store().put(task)
    return task


def delete_task(task_id: str) -> None:
    if not get_task_store().delete(task_id):
        raise TaskNotFoundError(f"Task not found: {task_id}")


def toggle_task_completion(task_id: str) -> Task:
    task = get_task(task_id)
    task = task.model_copy(update={"completed": not task.completed})
    get_task_store().put(task)
    return task


def set_task_reminder(
    task_id: str,
    reminder_date_time: str,
    reasoning: str,
    user_habits: str | None = None,
) -> Task:
    """Store a confirmed reminder on the task, and remember the habits that produced it."""
    task = get_task(task_id)
    if user_habits is not None:
        preferences.check_user_habits(user_habits)
    task = task.model_copy(
        update={"reminder_date_time": reminder_date_time, "reminder_reasoning": reasoning}
    )
    get_task_store().put(task)
    if user_habits is not None:
        preferences.set_user_habits(user_habits)
    return task


def list_categories() -> list[str]:
    return sorted({task.category for task in list_tasks()})


def _category_sort_key(category: str) -> tuple[int, str]:
    return (0 if category.lower() == PINNED_CATEGORY else 1, category)


def group_tasks_by_category() -> list[TaskGroup]:
    """Group tasks by category. 'Urgent' comes first, the rest alphabetically."""
    groups: dict[str, list[Task]] = {}
    for task in list_tasks():
        groups.setdefault(task.category or UNCATEGORIZED, []).append(task)
    return [
        TaskGroup(category=category, tasks=groups[category])
        for category in sorted(groups, key=_category_sort_key)
    ]


# --- AI suggestions for stored tasks ---


def suggest_category_for_task(task_id: str) -> CategorySuggestion:
    """Suggest a category for a stored task. The task itself is left unchanged."""
    task = get_task(task_id)
    return actions.get_task_category_suggestion(
        {"title": task.title, "description": task.description}
    )


def suggest_reminder_for_task(task_id: str, user_habits: str | None = None) -> ReminderSuggestion:
    """Suggest a reminder for a stored task. Apply it with set_task_reminder once confirmed."""
    task = get_task(task_id)
    if not task.due_date:
        return ReminderSuggestion(error=MISSING_DUE_DATE_MESSAGE)
    return actions.get_smart_reminder_suggestion(
        {
            "taskId": task.id,
            "taskTitle": task.title,
            "taskDescription": task.description,
            "taskDueDate": task.due_date,
            "userHabits": user_habits if user_habits is not None else preferences.get_user_habits(),
            "taskUrgency": task.urgency,
        }
    )
