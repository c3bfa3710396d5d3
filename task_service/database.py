import json
import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Dict, Iterator, Optional, Union

from fastapi import Request
from pydantic import Field, TypeAdapter, ValidationError

from .models import Task, U64_MAX
from .store import TaskStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_tasks_adapter = TypeAdapter(Dict[Annotated[int, Field(ge=0, le=U64_MAX)], Task])


class PersistenceError(Exception):
    """Raised when the task file cannot be written or read back."""


def save_store(store: TaskStore, path: PathLike) -> None:
    """Write the whole store to path as a JSON object keyed by task id.

    Prior content is truncated; nothing is appended or patched.
    """
    payload = {str(task_id): task.model_dump() for task_id, task in store.to_dict().items()}
    try:
        encoded = json.dumps(payload)
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(encoded)
            fh.flush()
    except (OSError, TypeError, ValueError) as exc:
        raise PersistenceError(f"Failed to save tasks to {path}: {exc}") from exc


def load_store(path: PathLike) -> TaskStore:
    """Build a TaskStore from the JSON file at path.

    A missing file is created empty and an empty file yields an empty store.
    """
    path = Path(path)
    try:
        if not path.exists():
            path.touch()
            logger.info("Created empty task database at %s", path)
            return TaskStore()
        raw = path.read_bytes()
    except OSError as exc:
        raise PersistenceError(f"Failed to open {path}: {exc}") from exc

    if not raw:
        return TaskStore()

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise PersistenceError(f"{path} is not valid JSON: {exc}") from exc

    # Older files wrap the mapping in a {"tasks": ...} envelope.
    if isinstance(data, dict) and set(data) == {"tasks"} and isinstance(data["tasks"], dict):
        data = data["tasks"]

    try:
        tasks = _tasks_adapter.validate_python(data)
    except ValidationError as exc:
        raise PersistenceError(f"{path} does not hold a task mapping: {exc}") from exc

    return TaskStore(tasks)


class TaskDatabase:
    """A TaskStore guarded by one lock and mirrored to a JSON file.

    Usage:
        with db.read() as store:
            task = store.get(1)

        with db.write() as store:
            store.insert(task)

    write() saves the whole store before releasing the lock, so no other
    caller sees a mutation before its save has been attempted.
    """

    def __init__(self, path: PathLike, store: Optional[TaskStore] = None):
        self.path = Path(path)
        self._store = store if store is not None else TaskStore()
        self._lock = threading.Lock()
        self.last_save_ok = True

    @contextmanager
    def read(self) -> Iterator[TaskStore]:
        with self._lock:
            yield self._store

    @contextmanager
    def write(self) -> Iterator[TaskStore]:
        with self._lock:
            yield self._store
            self._persist()

    def _persist(self) -> None:
        # A failed save leaves the in-memory change in place.
        try:
            save_store(self._store, self.path)
        except PersistenceError:
            self.last_save_ok = False
            logger.exception("Task database save failed; memory and %s now differ", self.path)
        else:
            self.last_save_ok = True


def open_database(path: PathLike) -> TaskDatabase:
    """Load the task database, starting empty if the file cannot be read."""
    try:
        store = load_store(path)
    except PersistenceError as exc:
        logger.error("Failed to load database: %s", exc)
        store = TaskStore()
    logger.info("Task database ready path=%s total=%s", path, len(store))
    return TaskDatabase(path, store)


def get_db(request: Request) -> TaskDatabase:
    """Dependency to get the task database."""
    return request.app.state.db
