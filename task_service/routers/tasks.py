from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response, status

from ..database import TaskDatabase, get_db
from ..models import Task, U64_MAX

router = APIRouter()

TaskId = Annotated[int, Path(ge=0, le=U64_MAX)]


@router.post("/tasks")
def create_task(task: Task, db: TaskDatabase = Depends(get_db)):
    """Store a task under its own id, replacing any task already there."""
    with db.write() as store:
        store.insert(task)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/tasks", response_model=List[Task])
def get_tasks(db: TaskDatabase = Depends(get_db)):
    with db.read() as store:
        return store.list()


@router.get("/tasks/{task_id}", response_model=Task)
def get_task(task_id: TaskId, db: TaskDatabase = Depends(get_db)):
    """Get a specific task by ID; 404 with an empty body when absent."""
    with db.read() as store:
        task = store.get(task_id)
    if task is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return task


@router.put("/tasks/{task_id}")
def update_task(task: Task, task_id: TaskId, db: TaskDatabase = Depends(get_db)):
    """Replace the task at task_id, creating it if it does not exist."""
    with db.write() as store:
        store.update(task_id, task)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/tasks/{task_id}")
def delete_task(task_id: TaskId, db: TaskDatabase = Depends(get_db)):
    """Delete a task. Deleting an unknown id still succeeds."""
    with db.write() as store:
        store.delete(task_id)
    return Response(status_code=status.HTTP_200_OK)
