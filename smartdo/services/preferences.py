import json
from functools import lru_cache
from pathlib import Path

from smartdo.config import get_settings
from smartdo.exceptions import ValidationError

DEFAULT_USER_HABITS = "Usually free in the evenings after 7 PM and on weekend mornings."
HABITS_REQUIRED_MESSAGE = "User habits are required for smart reminders."


class PreferenceStore:
    """Flat string preferences keyed by name. Subclasses choose where they live."""

    def _read_all(self) -> dict[str, str]:
        raise NotImplementedError

    def _write_all(self, prefs: dict[str, str]) -> None:
        raise NotImplementedError

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        prefs = self._read_all()
        prefs[key] = value
        self._write_all(prefs)


class InMemoryPreferenceStore(PreferenceStore):
    def __init__(self):
        self._prefs: dict[str, str] = {}

    def _read_all(self) -> dict[str, str]:
        return dict(self._prefs)

    def _write_all(self, prefs: dict[str, str]) -> None:
        self._prefs = dict(prefs)


class JsonFilePreferenceStore(PreferenceStore):
    def __init__(self, path: Path):
        self.path = path

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        return json.loads(self.path.read_text())

    def _write_all(self, prefs: dict[str, str]) -> None:
        self.path.write_text(json.dumps(prefs, indent=2))


@lru_cache
def get_preference_store() -> PreferenceStore:
    path = get_settings().preferences_file
    if not path:
        return InMemoryPreferenceStore()
    return JsonFilePreferenceStore(Path(path))


def check_user_habits(text: str | None) -> str:
    if not text or not text.strip():
        raise ValidationError(HABITS_REQUIRED_MESSAGE)
    return text


def get_user_habits() -> str:
    """Return the saved habits text, or the default when none has been saved."""
    return get_preference_store().get("userHabits") or DEFAULT_USER_HABITS


def set_user_habits(text: str) -> str:
    get_preference_store().set("userHabits", check_user_habits(text))
    return text
