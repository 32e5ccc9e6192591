"""Task store - the ordered task list with write-through persistence."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from tasktogo.core.tasks import (
    Task,
    TaskDecodeError,
    TaskEncodeError,
    decode_tasks,
    encode_tasks,
    find_index,
    remove_at,
    remove_selected,
)
from tasktogo.ports.kv_store import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

TASKS_KEY = "savedTasks"


class TaskStore:
    """
    Owns the task list and keeps it durable.

    Loads once at construction. Every mutating method updates the
    in-memory list and then calls persist(), which writes the whole list
    under a single key. Storage failures never reach the caller.
    """

    def __init__(self, kv: KeyValueStore, key: str = TASKS_KEY):
        self._kv = kv
        self._key = key
        self._tasks: list[Task] = []
        self.load()

    def load(self) -> None:
        """Populate the list from storage; empty on missing or bad data."""
        self._tasks = []
        try:
            raw = self._kv.get(self._key)
        except StorageError as e:
            logger.warning(f"Could not read {self._key}, starting empty: {e}")
            return

        if raw is None:
            logger.debug(f"No stored tasks under {self._key}")
            return

        try:
            self._tasks = decode_tasks(raw)
        except TaskDecodeError as e:
            logger.warning(f"Discarding undecodable {self._key}: {e}")
            return

        logger.debug(f"Loaded {len(self._tasks)} tasks from {self._key}")

    def persist(self) -> None:
        """Write the full list. Best effort: failures are logged, not raised."""
        try:
            self._kv.set(self._key, encode_tasks(self._tasks))
        except (TaskEncodeError, StorageError, OSError) as e:
            logger.error(f"Failed to save tasks under {self._key}: {e}")

    # ---- read access ----

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the current list."""
        return [replace(t) for t in self._tasks]

    def get(self, task_id: str) -> Task | None:
        index = find_index(self._tasks, task_id)
        if index is None:
            return None
        return replace(self._tasks[index])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # ---- mutations ----

    def add(self, title: str) -> Task:
        """Append a new task with a fresh id and both flags cleared."""
        task = Task(title=title)
        self._tasks.append(task)
        logger.debug(f"Added task {task.id}")
        self.persist()
        return replace(task)

    def toggle_completion(self, task_id: str) -> bool:
        """Flip is_completed. Unknown ids are a no-op and skip the write."""
        return self._toggle(task_id, "is_completed")

    def toggle_selection(self, task_id: str) -> bool:
        """Flip is_selected. Unknown ids are a no-op and skip the write."""
        return self._toggle(task_id, "is_selected")

    def _toggle(self, task_id: str, flag: str) -> bool:
        index = find_index(self._tasks, task_id)
        if index is None:
            logger.debug(f"Toggle {flag}: no task {task_id}")
            return False
        task = self._tasks[index]
        setattr(task, flag, not getattr(task, flag))
        logger.debug(f"Toggled {flag} on {task_id} -> {getattr(task, flag)}")
        self.persist()
        return True

    def delete_at(self, indices: Iterable[int]) -> None:
        """Remove tasks at the given positions; invalid positions are ignored."""
        before = len(self._tasks)
        self._tasks = remove_at(self._tasks, indices)
        logger.debug(f"Deleted {before - len(self._tasks)} tasks by position")
        self.persist()

    def delete_selected(self) -> None:
        """Remove every selected task."""
        before = len(self._tasks)
        self._tasks = remove_selected(self._tasks)
        logger.debug(f"Deleted {before - len(self._tasks)} selected tasks")
        self.persist()

    def delete_all(self) -> None:
        self._tasks = []
        logger.debug("Deleted all tasks")
        self.persist()
