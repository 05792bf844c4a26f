"""
Top-level router for version 1 of the API.

This router aggregates the resource routers.  It is mounted by
``main.create_app`` under ``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import lifestyle, medical_history

router = APIRouter()

router.include_router(lifestyle.router, prefix="/lifeStyle", tags=["lifeStyle"])
router.include_router(medical_history.router, prefix="/medicalHistory", tags=["medicalHistory"])
