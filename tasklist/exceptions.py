import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

TASK_NOT_FOUND_MESSAGE = "Tarea no encontrada"
ROUTE_NOT_FOUND_MESSAGE = "Ruta no encontrada"


# Exceptions
class TaskValidationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TaskNotFoundError(Exception):
    def __init__(self, identifier: str):
        self.identifier = identifier
        self.message = TASK_NOT_FOUND_MESSAGE
        super().__init__(f"Task '{identifier}' not found")


# Exception handlers
def task_validation_handler(request: Request, exc: TaskValidationError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message},
    )


def task_not_found_handler(request: Request, exc: TaskNotFoundError):
    logger.warning(exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": exc.message},
    )


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and unsupported methods on known paths are both "no route".
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        logger.warning("No route for %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": ROUTE_NOT_FOUND_MESSAGE},
        )

    logger.warning(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Error inesperado"},
    )


def validation_exception_handler(request: Request, exc: RequestValidationError):
    def loc_to_dot_sep(loc: tuple[Any, ...]) -> str:
        """Convert a tuple of location parts to a dot-separated string"""
        path = ""
        for i, x in enumerate(loc):
            if isinstance(x, str):
                if i > 0:
                    path += "."
                path += x
            elif isinstance(x, int):
                path += f"[{x}]"
            else:
                raise TypeError("Unexpected type")
        return path

    errors = [
        {
            "type": error["type"],
            "loc": loc_to_dot_sep(tuple(error["loc"])),
            "msg": error["msg"],
        }
        for error in exc.errors()
    ]
    logger.warning("Invalid request body for %s %s", request.method, request.url.path)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Cuerpo de la solicitud inválido", "errors": errors},
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


task_not_found_response: ResponseDict = {
    404: {
        "description": "Task not found",
        "content": {
            "application/json": {"example": {"message": TASK_NOT_FOUND_MESSAGE}}
        },
    }
}

task_validation_response: ResponseDict = {
    400: {
        "description": "Invalid task batch",
        "content": {
            "application/json": {
                "example": {
                    "message": "La tarea en la posición 0 no tiene un título o descripción válidos"
                }
            }
        },
    }
}

internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {"application/json": {"example": {"message": "Error inesperado"}}},
    }
}
