"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasklist.config import Settings, get_settings
from tasklist.exceptions import (
    TaskNotFoundError,
    TaskValidationError,
    http_exception_handler,
    internal_error_response,
    task_not_found_handler,
    task_validation_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from tasklist.router import health_router, router, statistics_router
from tasklist.store import TaskStore

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the application with its own, empty task store."""
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.API_NAME,
        summary=app_settings.API_SUMMARY,
        version=app_settings.API_VERSION,
        responses={**internal_error_response},
    )
    app.state.task_store = TaskStore()

    if app_settings.CORS_ENABLED:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.exception_handler(RequestValidationError)(validation_exception_handler)
    app.exception_handler(TaskValidationError)(task_validation_handler)
    app.exception_handler(TaskNotFoundError)(task_not_found_handler)
    app.exception_handler(StarletteHTTPException)(http_exception_handler)
    app.exception_handler(Exception)(unexpected_exception_handler)

    app.include_router(health_router)
    app.include_router(router)
    app.include_router(statistics_router)

    return app


app = create_app()
