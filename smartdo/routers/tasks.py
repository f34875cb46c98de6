from fastapi import APIRouter

from smartdo.models.actions import CategorySuggestion, ReminderSuggestion
from smartdo.models.tasks import (
    CreateTaskRequest,
    SetReminderRequest,
    SuggestReminderRequest,
    Task,
    TaskGroup,
    UpdateTaskRequest,
    UserHabits,
)
from smartdo.services import preferences
from smartdo.services import tasks as tasks_service

router = APIRouter(prefix="/api", tags=["tasks"])


# --- Tasks ---


@router.get("/tasks")
def list_tasks() -> list[Task]:
    return tasks_service.list_tasks()


@router.get("/tasks/grouped")
def list_grouped_tasks() -> list[TaskGroup]:
    return tasks_service.group_tasks_by_category()


@router.get("/tasks/categories")
def list_categories() -> list[str]:
    return tasks_service.list_categories()


@router.post("/tasks", status_code=201)
def create_task(request: CreateTaskRequest) -> Task:
    return tasks_service.create_task(request)


@router.get("/tasks/{task_id}")
def get_task(task_id: str) -> Task:
    return tasks_service.get_task(task_id)


@router.patch("/tasks/{task_id}")
def update_task(task_id: str, request: UpdateTaskRequest) -> Task:
    return tasks_service.update_task(task_id, request)


@router.delete("/tasks/{task_id}", status_code=204)
def delete_task(task_id: str):
    tasks_service.delete_task(task_id)


@router.post("/tasks/{task_id}/toggle")
def toggle_task(task_id: str) -> Task:
    return tasks_service.toggle_task_completion(task_id)


@router.post("/tasks/{task_id}/reminder")
def set_reminder(task_id: str, request: SetReminderRequest) -> Task:
    return tasks_service.set_task_reminder(
        task_id, request.reminder_date_time, request.reasoning, user_habits=request.user_habits,
    )


# --- AI suggestions for stored tasks ---


@router.post("/tasks/{task_id}/suggest-category", response_model_exclude_none=True)
def suggest_category(task_id: str) -> CategorySuggestion:
    return tasks_service.suggest_category_for_task(task_id)


@router.post("/tasks/{task_id}/suggest-reminder", response_model_exclude_none=True)
def suggest_reminder(task_id: str, request: SuggestReminderRequest | None = None) -> ReminderSuggestion:
    user_habits = request.user_habits if request else None
    return tasks_service.suggest_reminder_for_task(task_id, user_habits=user_habits)


# --- Preferences ---


@router.get("/preferences/habits")
def get_habits() -> UserHabits:
    return UserHabits(user_habits=preferences.get_user_habits())


@router.put("/preferences/habits")
def set_habits(request: UserHabits) -> UserHabits:
    return UserHabits(user_habits=preferences.set_user_habits(request.user_habits))
