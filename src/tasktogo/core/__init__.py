"""Functional core - task domain logic and the task store."""

from .tasks import (
    Task,
    TaskDecodeError,
    TaskEncodeError,
    decode_tasks,
    encode_tasks,
    remove_at,
    remove_selected,
)
from .store import TASKS_KEY, TaskStore

__all__ = [
    # Tasks
    "Task",
    "TaskDecodeError",
    "TaskEncodeError",
    "decode_tasks",
    "encode_tasks",
    "remove_at",
    "remove_selected",
    # Store
    "TASKS_KEY",
    "TaskStore",
]
