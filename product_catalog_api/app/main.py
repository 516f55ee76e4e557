"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application, sets up logging,
creates the product store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn product_catalog_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.product_store import ProductStore


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ProductStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module-level settings
        read from the environment.
    store : Optional[ProductStore]
        Product store to serve.  When omitted a new store is created,
        seeded with the default products unless
        ``settings.seed_products`` is false.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if store is None:
        store = ProductStore() if settings.seed_products else ProductStore(seed=[])
    app.state.settings = settings
    app.state.product_store = store

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
