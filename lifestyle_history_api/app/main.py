"""
Main entrypoint for the Lifestyle and History API.

This module assembles the FastAPI application, sets up logging and
mounts the v1 router under ``settings.api_prefix``.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn lifestyle_history_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import get_database_path, init_db
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application whose startup hook creates the
        database tables.
    """
    # Logging first, so that anything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        init_db()
        logging.getLogger(__name__).info("Database ready at %s", get_database_path())
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


app = create_app()
