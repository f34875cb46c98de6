import json
from functools import lru_cache
from pathlib import Path

from smartdo.config import get_settings
from smartdo.models.tasks import Task


class TaskStore:
    """Task repository keyed by task id. Subclasses choose where the mapping lives."""

    def _read_all(self) -> dict[str, dict]:
        raise NotImplementedError

    def _write_all(self, tasks: dict[str, dict]) -> None:
        raise NotImplementedError

    def get(self, task_id: str) -> Task | None:
        data = self._read_all().get(task_id)
        return Task.model_validate(data) if data is not None else None

    def list(self) -> list[Task]:
        return [Task.model_validate(data) for data in self._read_all().values()]

    def put(self, task: Task) -> None:
        all_tasks = self._read_all()
        all_tasks[task.id] = task.model_dump(by_alias=True)
        self._write_all(all_tasks)

    def delete(self, task_id: str) -> bool:
        all_tasks = self._read_all()
        if task_id not in all_tasks:
            return False
        del all_tasks[task_id]
        self._write_all(all_tasks)
        return True


class InMemoryTaskStore(TaskStore):
    def __init__(self):
        self._tasks: dict[str, dict] = {}

    def _read_all(self) -> dict[str, dict]:
        return dict(self._tasks)

    def _write_all(self, tasks: dict[str, dict]) -> None:
        self._tasks = dict(tasks)


class JsonFileTaskStore(TaskStore):
    """Reads/writes tasks to a local JSON file, one object keyed by task id."""

    def __init__(self, path: Path):
        self.path = path

    def _read_all(self) -> dict[str, dict]:
        if not self.path.exists():
            return {}
        return json.loads(self.path.read_text())

    def _write_all(self, tasks: dict[str, dict]) -> None:
        self.path.write_text(json.dumps(tasks, indent=2))


@lru_cache
def get_task_store() -> TaskStore:
    path = get_settings().task_store_file
    if not path:
        return InMemoryTaskStore()
    return JsonFileTaskStore(Path(path))
