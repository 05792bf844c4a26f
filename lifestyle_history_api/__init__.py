"""
Top-level package for the lifestyle and history API.

All functionality lives in the ``app`` subpackage; the ASGI
application is ``lifestyle_history_api.app.main:app``.
"""

__all__ = []
