"""
Shared dependencies for the API routes.

The service providers build a service around its SQLite repository
for each request.  Tests replace them through
``app.dependency_overrides``.  ``unwrap`` converts a service
:class:`Result` into its value, raising HTTP 404 for
``RecordNotFound``.
"""

from typing import TypeVar

from fastapi import HTTPException, status

from ..core.results import Result
from ..repositories.lifestyle_repository import LifeStyleRepository
from ..repositories.medical_history_repository import MedicalHistoryRepository
from ..services.lifestyle_service import LifeStyleService
from ..services.medical_history_service import MedicalHistoryService

T = TypeVar("T")


def get_lifestyle_service() -> LifeStyleService:
    return LifeStyleService(LifeStyleRepository())


def get_medical_history_service() -> MedicalHistoryService:
    return MedicalHistoryService(MedicalHistoryRepository())


def unwrap(result: Result[T]) -> T:
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error.message)
    return result.value
