"""Pure task domain logic - no I/O dependencies."""

import json
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field


class TaskDecodeError(ValueError):
    """Raised when stored bytes do not describe a task list."""

    pass


class TaskEncodeError(ValueError):
    """Raised when a task list cannot be serialized."""

    pass


def new_task_id() -> str:
    return str(uuid.uuid4())


@dataclass(eq=False)
class Task:
    """A single to-do entry."""

    title: str
    id: str = field(default_factory=new_task_id)
    is_completed: bool = False
    is_selected: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict:
        """Wire representation (camelCase field names)."""
        return {
            "id": self.id,
            "title": self.title,
            "isCompleted": self.is_completed,
            "isSelected": self.is_selected,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from its wire representation."""
        if not isinstance(data, dict):
            raise TaskDecodeError(f"expected object, got {type(data).__name__}")

        task_id = data.get("id")
        title = data.get("title")
        if not isinstance(task_id, str) or not task_id:
            raise TaskDecodeError("task id must be a non-empty string")
        if not isinstance(title, str):
            raise TaskDecodeError(f"task {task_id}: title must be a string")

        flags = {}
        for key in ("isCompleted", "isSelected"):
            value = data.get(key)
            if not isinstance(value, bool):
                raise TaskDecodeError(f"task {task_id}: {key} must be a boolean")
            flags[key] = value

        return cls(
            id=task_id,
            title=title,
            is_completed=flags["isCompleted"],
            is_selected=flags["isSelected"],
        )


def encode_tasks(tasks: Iterable[Task]) -> bytes:
    """Serialize tasks to UTF-8 JSON, preserving order."""
    try:
        return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError, UnicodeEncodeError) as e:
        raise TaskEncodeError(f"cannot encode tasks: {e}") from e


def decode_tasks(raw: bytes) -> list[Task]:
    """
    Parse stored bytes back into a task list.

    Raises TaskDecodeError on anything that is not a list of well-formed
    tasks with unique ids.
    """
    # JSONDecodeError is a ValueError; deep nesting raises RecursionError
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise TaskDecodeError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskDecodeError(f"expected list, got {type(data).__name__}")

    tasks = [Task.from_dict(item) for item in data]

    seen: set[str] = set()
    for t in tasks:
        if t.id in seen:
            raise TaskDecodeError(f"duplicate task id {t.id}")
        seen.add(t.id)

    return tasks


def remove_at(tasks: list[Task], indices: Iterable[int]) -> list[Task]:
    """
    Drop tasks at the given positions.

    Negative and out-of-range positions are ignored. Survivors keep their
    relative order. Pure function - returns a new list.
    """
    doomed = {i for i in indices if 0 <= i < len(tasks)}
    return [t for i, t in enumerate(tasks) if i not in doomed]


def remove_selected(tasks: list[Task]) -> list[Task]:
    """Drop every selected task, keeping the order of the rest."""
    return [t for t in tasks if not t.is_selected]


def find_index(tasks: list[Task], task_id: str) -> int | None:
    """Position of the task with this id, or None."""
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    return None
