"""In-memory task registry with an atomic create operation."""

import logging
from dataclasses import dataclass, field
from threading import Lock
from typing import List

from .errors import TaskIdExhaustedError
from .models import Task

logger = logging.getLogger(__name__)

# Counter ceiling; IDs never wrap around.
MAX_TASK_ID = 2**64 - 1


@dataclass
class RegistryState:
    """Task collection and ID counter, always mutated together."""

    tasks: List[Task] = field(default_factory=list)
    next_id: int = 1

    _lock: Lock = field(default_factory=Lock, init=False, repr=False, compare=False)


class TaskRegistry:
    """
    Process-wide owner of all tasks and the ID counter.

    The task list and the counter live in a single ``RegistryState`` guarded
    by one lock, so no caller can observe a counter increment without the
    matching append. The critical section never awaits, which makes the
    registry safe to call from asyncio handlers and from OS threads alike.
    """

    def __init__(self, max_id: int = MAX_TASK_ID):
        """
        Initialize an empty registry.

        Args:
            max_id: Largest ID the registry may issue
        """
        self.max_id = max_id
        self._state = RegistryState()

    def create_task(self, title: str, description: str) -> Task:
        """
        Create and store a new task.

        Title and description are stored verbatim; no validation happens here.

        Args:
            title: Short task label
            description: Free text, may be empty

        Returns:
            Copy of the stored task

        Raises:
            TaskIdExhaustedError: If every ID up to ``max_id`` has been issued
        """
        state = self._state
        with state._lock:
            task_id = state.next_id
            if task_id > self.max_id:
                raise TaskIdExhaustedError(task_id, self.max_id)

            task = Task(id=task_id, title=title, description=description, completed=False)
            state.tasks.append(task)
            state.next_id = task_id + 1

        logger.debug(f"Created task {task.id}: {task.title!r}")
        return task.model_copy()

    def list_tasks(self) -> List[Task]:
        """Return a snapshot of all tasks in creation order."""
        with self._state._lock:
            return [task.model_copy() for task in self._state.tasks]

    @property
    def next_id(self) -> int:
        """ID that the next created task will receive."""
        with self._state._lock:
            return self._state.next_id

    def __len__(self) -> int:
        with self._state._lock:
            return len(self._state.tasks)
