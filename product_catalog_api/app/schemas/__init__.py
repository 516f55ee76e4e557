"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the stored records so that the API
representation can differ from the in‑memory one.
"""
