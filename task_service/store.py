from typing import Dict, List, Optional

from .models import Task


class TaskStore:
    """In-memory mapping of task id to Task.

    Every operation succeeds; absence is reported as None from get() and is
    otherwise a no-op. The store does no locking of its own, callers go
    through TaskDatabase for that.
    """

    def __init__(self, tasks: Optional[Dict[int, Task]] = None):
        self._tasks: Dict[int, Task] = dict(tasks or {})

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: int) -> bool:
        return task_id in self._tasks

    def insert(self, task: Task) -> None:
        self._tasks[task.id] = task

    def get(self, task_id: int) -> Optional[Task]:
        return self._tasks.get(task_id)

    def list(self) -> List[Task]:
        return list(self._tasks.values())

    def update(self, task_id: int, task: Task) -> None:
        """Replace the task at task_id, inserting it if absent.

        The stored record takes task_id; any id carried in the payload is dropped.
        """
        self._tasks[task_id] = task.model_copy(update={"id": task_id})

    def delete(self, task_id: int) -> None:
        self._tasks.pop(task_id, None)

    def to_dict(self) -> Dict[int, Task]:
        """Snapshot of the current id -> Task mapping."""
        return dict(self._tasks)
