"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, dependencies),
``schemas`` (pydantic payloads), ``services`` (the product store) and
``api`` (versioned routers).
"""

from .main import app  # noqa: F401
