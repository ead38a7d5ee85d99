"""
FastAPI application for the employee CRUD service.

Three things happen here beyond mounting the routes under ``/api``:

* ``lifespan`` runs ``init_db`` before the first request, so the
  SQLite file and the ``employees`` table (with its ``UNIQUE`` email
  column) exist by the time a handler opens a connection;
* ``employee_conflict_handler`` turns ``EmployeeAlreadyExistsError``,
  whether raised by the service's email check or by the store's
  constraint, into a 409 with a ``detail`` message;
* logging is configured from ``settings`` before the app is built.

``app`` is created at import time for ``uvicorn employee_api.app.main:app``;
tests call ``create_app()`` for a fresh instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .core.db import init_db, get_database_path
from .core.exceptions import EmployeeAlreadyExistsError
from .api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Create the database file and table before serving requests.
    init_db()
    logger.info("Database ready at %s", get_database_path())
    yield


async def employee_conflict_handler(request: Request, exc: EmployeeAlreadyExistsError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the modules
    # below can log safely.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_exception_handler(EmployeeAlreadyExistsError, employee_conflict_handler)
    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
