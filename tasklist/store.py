"""In-memory task storage.

Tasks live in a plain list kept in creation order. Ids come from a counter
that only moves forward, so deleted ids are never handed out again. Each
public method runs under a single lock: FastAPI executes sync routes in a
threadpool and the id assignment, append and search-then-mutate steps must
not interleave.
"""

import logging
import re
import threading
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from tasklist.exceptions import TaskValidationError
from tasklist.models import Statistics, Task, TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_task_id(raw: str) -> int | None:
    """Parse the leading integer of a path segment, ``None`` if there is none.

    ``"12abc"`` gives 12, ``"0x1f"`` gives 31 and ``"abc"`` gives None. Only
    ASCII digits count. A ``None`` id matches no task.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def _only_completado_failed(error: ValidationError) -> bool:
    return all(e["loc"][:1] == ("completado",) for e in error.errors())


def validate_batch(payload: Any) -> list[TaskCreate]:
    """Validate a creation payload as a whole before anything is stored."""
    if not isinstance(payload, list):
        raise TaskValidationError("El body de la solicitud debe ser un array de tareas")

    candidates: list[TaskCreate] = []
    for position, item in enumerate(payload):
        try:
            candidates.append(TaskCreate.model_validate(item))
        except ValidationError as e:
            if _only_completado_failed(e):
                message = f"La tarea en la posición {position} tiene un valor de completado inválido"
            else:
                message = f"La tarea en la posición {position} no tiene un título o descripción válidos"
            raise TaskValidationError(message) from e
    return candidates


def validate_update(payload: Any) -> TaskUpdate:
    """Validate an update body; a missing body is an empty patch."""
    try:
        return TaskUpdate.model_validate(payload if payload is not None else {})
    except ValidationError as e:
        raise TaskValidationError("Cuerpo de la solicitud inválido") from e


class TaskStore:
    """Simple in-memory task storage."""

    def __init__(self) -> None:
        """Initialize an empty task store."""
        self._tasks: list[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> list[Task]:
        """Return all tasks in creation order."""
        with self._lock:
            return list(self._tasks)

    def get(self, task_id: int | None) -> Task | None:
        """Get a task by its ID, or None if not found."""
        with self._lock:
            return self._find(task_id)

    def create_many(self, batch: list[TaskCreate]) -> list[Task]:
        """Create one task per candidate, in order, and return them."""
        with self._lock:
            created: list[Task] = []
            for data in batch:
                task = Task(
                    id=self._next_id,
                    titulo=data.titulo,
                    descripcion=data.descripcion,
                    completado=data.completado or False,
                    fecha_creacion=datetime.now(UTC),
                )
                self._next_id += 1
                created.append(task)
            self._tasks.extend(created)

        logger.info("Created %d task(s)", len(created))
        return created

    def update(self, task_id: int | None, data: TaskUpdate) -> Task | None:
        """Update an existing task in place. Returns None if not found."""
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return None

            update_data = data.model_dump(exclude_unset=True, exclude_none=True)
            for field, value in update_data.items():
                setattr(task, field, value)

        if update_data:
            logger.debug("Updated task %s fields=%s", task_id, sorted(update_data))
        return task

    def delete(self, task_id: int | None) -> bool:
        """Delete a task. Returns True if deleted, False if not found."""
        with self._lock:
            for index, task in enumerate(self._tasks):
                if task.id == task_id:
                    del self._tasks[index]
                    break
            else:
                return False

        logger.info("Deleted task %s", task_id)
        return True

    def statistics(self) -> Statistics:
        """Count tasks and find the newest and oldest ones.

        Comparisons are strict, so on equal timestamps the earlier task in
        the list wins.
        """
        with self._lock:
            newest: Task | None = None
            oldest: Task | None = None
            completed = 0
            for task in self._tasks:
                if newest is None or task.fecha_creacion > newest.fecha_creacion:
                    newest = task
                if oldest is None or task.fecha_creacion < oldest.fecha_creacion:
                    oldest = task
                if task.completado:
                    completed += 1
            total = len(self._tasks)

        return Statistics(
            total_tareas=total,
            tarea_mas_reciente=newest.titulo if newest else None,
            tarea_mas_antigua=oldest.titulo if oldest else None,
            cantidad_completadas=completed,
            cantidad_pendientes=total - completed,
        )

    def clear(self) -> None:
        """Clear all tasks and reset the id counter. Useful for testing."""
        with self._lock:
            self._tasks.clear()
            self._next_id = 1

    def _find(self, task_id: int | None) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None
