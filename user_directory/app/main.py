"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application: logging, CORS, error
handlers, routes and the in‑memory user store.  ``create_app`` builds
a fully configured instance; the module‑level ``app`` is the one
served by ``run.py`` or directly by uvicorn::

    uvicorn user_directory.app.main:app --port 8080

Every application owns its own ``UserStore`` (exposed as
``app.state.store``), so building a second application, as the tests
do, starts again from the seed users.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import settings
from .core.exceptions import (
    UserDirectoryError,
    request_validation_exception_handler,
    user_directory_exception_handler,
)
from .core.logging_config import setup_logging
from .core.store import UserStore
from .services.user_service import UserService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Sample users loaded: %d users in memory", len(app.state.store))
    yield
    logger.info("Shutting down %s", settings.project_name)


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store holding the user collection.  A freshly seeded store is
        created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can already log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    app.state.store = store if store is not None else UserStore()
    app.state.user_service = UserService(app.state.store)

    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed requests to a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(UserDirectoryError, user_directory_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
