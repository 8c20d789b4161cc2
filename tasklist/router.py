from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status

from tasklist.dependencies import get_task_store
from tasklist.exceptions import (
    TaskNotFoundError,
    task_not_found_response,
    task_validation_response,
)
from tasklist.models import HealthResponse, Statistics, Task
from tasklist.store import TaskStore, parse_task_id, validate_batch, validate_update

router = APIRouter(
    prefix="/tareas",
    tags=["Tareas"],
)

statistics_router = APIRouter(tags=["Estadísticas"])

health_router = APIRouter(tags=["System"])


def _find_or_404(store: TaskStore, task_id: str) -> Task:
    task = store.get(parse_task_id(task_id))
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


@router.post(
    "",
    response_model=list[Task],
    status_code=status.HTTP_201_CREATED,
    responses={**task_validation_response},
)
def create_tasks(
    payload: Any = Body(None),
    store: TaskStore = Depends(get_task_store),
) -> list[Task]:
    """Create a batch of tasks. Either every task is created or none is."""
    return store.create_many(validate_batch(payload))


@router.get("", response_model=list[Task])
def list_tasks(store: TaskStore = Depends(get_task_store)) -> list[Task]:
    """List all tasks in creation order."""
    return store.list_all()


@router.get(
    "/{task_id}",
    response_model=Task,
    responses={**task_not_found_response},
)
def get_task(task_id: str, store: TaskStore = Depends(get_task_store)) -> Task:
    """Get a specific task by ID."""
    return _find_or_404(store, task_id)


@router.put(
    "/{task_id}",
    response_model=Task,
    responses={**task_not_found_response, **task_validation_response},
)
def update_task(
    task_id: str,
    payload: Any = Body(None),
    store: TaskStore = Depends(get_task_store),
) -> Task:
    """Update an existing task. The id is looked up before the body is read."""
    _find_or_404(store, task_id)
    task = store.update(parse_task_id(task_id), validate_update(payload))
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**task_not_found_response},
)
def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)) -> None:
    """Delete a task."""
    if not store.delete(parse_task_id(task_id)):
        raise TaskNotFoundError(task_id)


@statistics_router.get("/estadisticas", response_model=Statistics)
def get_statistics(store: TaskStore = Depends(get_task_store)) -> Statistics:
    """Task counts plus the titles of the newest and oldest tasks."""
    return store.statistics()


@health_router.get("/health", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(version=request.app.version)
