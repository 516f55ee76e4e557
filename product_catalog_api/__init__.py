"""
Top‑level package for the Product Catalog API.

All functionality lives in submodules under ``app``; run the service
with ``uvicorn product_catalog_api.app.main:app`` or ``python run.py``.
"""

__all__ = []
