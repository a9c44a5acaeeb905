"""
Main entrypoint for the Catalog API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory stores and includes the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Run it with
uvicorn or another ASGI server, e.g.::

    uvicorn catalog_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.product_service import ProductService
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call constructs fresh, empty stores and attaches them to
    ``app.state``; handlers reach them through the providers in
    ``api.deps``.  Two applications therefore never share records.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else logs.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.product_service = ProductService()
    app.state.user_service = UserService()

    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info(
        "%s %s ready, serving %s under prefix %r",
        settings.project_name,
        settings.api_version,
        ", ".join(s.resource for s in (app.state.product_service, app.state.user_service)),
        settings.api_prefix,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
