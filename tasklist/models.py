"""Pydantic models for the Tareas API.

Field names follow the JSON contract in Spanish; multi-word fields are
exposed in camelCase (``fechaCreacion``, ``totalTareas``...).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TaskCreate(BaseModel):
    """A single candidate inside the creation batch."""

    titulo: str = Field(..., min_length=1, description="Título de la tarea (obligatorio)")
    descripcion: str = Field(
        ..., min_length=1, description="Descripción de la tarea (obligatoria)"
    )
    completado: bool | None = Field(
        default=None,
        description="Estado inicial; se asume false si no se indica",
    )


class TaskUpdate(BaseModel):
    """Request body for updating an existing task. Absent fields are left unchanged."""

    titulo: str | None = Field(default=None, description="Nuevo título")
    descripcion: str | None = Field(default=None, description="Nueva descripción")
    completado: bool | None = Field(default=None, description="Nuevo estado")


class Task(BaseModel):
    """A task record owned by the store."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., description="Identificador secuencial, nunca reutilizado")
    titulo: str
    descripcion: str
    completado: bool = False
    fecha_creacion: datetime = Field(..., description="Momento de creación (UTC)")


class Statistics(BaseModel):
    """Aggregate view over the current store contents."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_tareas: int
    tarea_mas_reciente: str | None = Field(
        default=None, description="Título de la tarea creada más recientemente"
    )
    tarea_mas_antigua: str | None = Field(
        default=None, description="Título de la tarea más antigua"
    )
    cantidad_completadas: int
    cantidad_pendientes: int


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "healthy"
    version: str = "1.0.0"
