"""
Main entrypoint for the PackPal API.

This module assembles the FastAPI application, sets up logging, CORS
and includes the versioned routers.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn packpal_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import init_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Create the database file if needed and bring the schema up to date.
    init_db()
    logging.getLogger(__name__).info("%s %s started", settings.project_name, settings.api_version)
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    # The docs routes are mounted by the v1 router behind the login check.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Browser clients send the session cookie, so credentials must be allowed
    # and origins listed explicitly.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Routes are served at the root (``/auth/login``, ``/event/create``) to
    # match the paths existing clients call.
    app.include_router(v1_router)

    return app


app = create_app()
