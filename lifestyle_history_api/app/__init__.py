"""
Application package for the lifestyle and history service.

The service is organised in layers: ``api`` (HTTP routes),
``services`` (business logic), ``repositories`` (SQLite access) and
``schemas`` (pydantic models shared by all layers).
"""

from .main import app  # noqa: F401
