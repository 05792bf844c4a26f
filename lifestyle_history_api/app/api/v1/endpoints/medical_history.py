"""
Medical history endpoints for API v1.

Mirrors the lifestyle routes, with two differences: ``PUT`` merges
only the clinical fields into the stored record, and records can be
deleted in bulk for a ``(patientId, userId)`` pair.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse

from ...deps import get_medical_history_service, unwrap
from ....schemas.medical_history import MedicalHistory, MedicalHistoryCreate, MedicalHistoryUpdate
from ....services.medical_history_service import MedicalHistoryService

router = APIRouter()


@router.get("", response_class=PlainTextResponse)
def hello(request: Request) -> str:
    return f"Hello from {request.url.path.rstrip('/')}/"


@router.get("/all", response_model=List[MedicalHistory])
def get_all_medical_histories(
    service: MedicalHistoryService = Depends(get_medical_history_service),
) -> List[MedicalHistory]:
    return service.get_all_medical_histories()


@router.get("/patient/{patient_id}/user/{user_id}", response_model=List[MedicalHistory])
def get_medical_histories_by_patient_and_user(
    patient_id: int,
    user_id: int,
    service: MedicalHistoryService = Depends(get_medical_history_service),
) -> List[MedicalHistory]:
    """Return all records of a patient/user pair; an empty list when there are none."""
    return service.get_medical_histories_by_patient_id_and_user_id(patient_id, user_id)


@router.get("/{record_id}", response_model=MedicalHistory)
def get_medical_history(
    record_id: int,
    service: MedicalHistoryService = Depends(get_medical_history_service),
) -> MedicalHistory:
    return unwrap(service.get_medical_history_by_record_id(record_id))


@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
def create_medical_history(
    medical_history_in: MedicalHistoryCreate,
    request: Request,
    response: Response,
    service: MedicalHistoryService = Depends(get_medical_history_service),
) -> str:
    """Create a record.  The ``Location`` header points to the new ``recordId``."""
    created = service.create_medical_history(medical_history_in)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{created.record_id}"
    return "MedicalHistory Created Successfully"


@router.put("/{record_id}", response_class=PlainTextResponse)
def update_medical_history(
    record_id: int,
    medical_history_in: MedicalHistoryUpdate,
    service: MedicalHistoryService = Depends(get_medical_history_service),
) -> str:
    """Merge the clinical fields into a record.  Returns HTTP 404 if it does not exist."""
    unwrap(service.update_medical_history(record_id, medical_history_in))
    return "MedicalHistory Updated Successfully"


@router.delete("/patient/{patient_id}/user/{user_id}", response_class=PlainTextResponse)
def delete_medical_histories_by_patient_and_user(
    patient_id: int,
    user_id: int,
    service: MedicalHistoryService = Depends(get_medical_history_service),
) -> str:
    """Delete every record of a patient/user pair.  Returns HTTP 404 when there are none."""
    unwrap(service.delete_medical_history_by_patient_id_and_user_id(patient_id, user_id))
    return "MedicalHistory Deleted Successfully"


@router.delete("/{record_id}", response_class=PlainTextResponse)
def delete_medical_history(
    record_id: int,
    service: MedicalHistoryService = Depends(get_medical_history_service),
) -> str:
    unwrap(service.delete_medical_history_by_record_id(record_id))
    return "MedicalHistory Deleted Successfully"
