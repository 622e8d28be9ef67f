"""
Main entrypoint for the Product API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module
import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn product_catalog_api.app.main:app --port 3002 --reload

or through ``run.py`` in the project root.  Interactive API docs are
served at ``settings.docs_url`` (``/api-docs`` by default).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.exceptions import StorageError
from .core.logging_config import setup_logging
from .core.store import init_store
from .api.v1.router import router as v1_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, mounts the versioned routers and registers the
    error handler for storage failures.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(
        title=settings.project_name,
        description=settings.description,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=settings.docs_url,
    )

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {"message": f"Welcome to the {settings.project_name}"}

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Product storage is unavailable"},
        )

    # Create the products file on first start.
    @app.on_event("startup")
    async def startup_event() -> None:
        init_store()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
