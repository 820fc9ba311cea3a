"""
Main entrypoint for the Customer API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn customer_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from functools import partial
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.error_handlers import register_exception_handlers
from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import get_connection, init_db
from .core.logging_config import setup_logging
from .repositories.customer_repository import CustomerRepository
from .services.customer_service import CustomerService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration for this application instance.  Defaults to the
        settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file if needed and applies migrations.
        init_db(settings)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    repository = CustomerRepository(partial(get_connection, settings))
    app.state.settings = settings
    app.state.customer_service = CustomerService(
        repository, logger=logging.getLogger("customer_api.customer_service")
    )

    register_exception_handlers(app)
    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
