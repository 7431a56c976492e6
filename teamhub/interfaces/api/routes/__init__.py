from fastapi import FastAPI

from .projects import router as projects_router
from .tasks import router as tasks_router
from .teams import router as teams_router
from .templates import router as templates_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(templates_router)
    app.include_router(projects_router)
    app.include_router(tasks_router)
    app.include_router(teams_router)
