"""
FastAPI dependencies shared by the route modules.

The product store is created by ``create_app`` and kept on
``app.state``; routes receive it through ``Depends(get_product_store)``
instead of importing a module-level collection.
"""

from fastapi import Request

from product_catalog_api.app.services.product_store import ProductStore


def get_product_store(request: Request) -> ProductStore:
    """Return the store owned by the application serving ``request``."""
    return request.app.state.product_store
