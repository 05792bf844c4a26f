"""
Pydantic schemas for medical history records.

Each record belongs to a ``(patientId, userId)`` pair and stores six
free text clinical fields.  Those six fields are the only ones an
update may change; see ``MERGE_FIELDS``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Fields copied from an update payload onto the stored record.
MERGE_FIELDS = (
    "allergies",
    "current_medication",
    "past_medication",
    "chronic_diseases",
    "injuries",
    "surgeries",
)


class MedicalHistoryUpdate(BaseModel):
    """Schema for updating a medical history record.

    Other keys in the payload (``patientId``, ``userId``, ``recordId``)
    are ignored so an update can never re-link a record to another
    patient.
    """

    model_config = ConfigDict(populate_by_name=True)

    allergies: Optional[str] = None
    current_medication: Optional[str] = Field(None, alias="currentMedication")
    past_medication: Optional[str] = Field(None, alias="pastMedication")
    chronic_diseases: Optional[str] = Field(None, alias="chronicDiseases")
    injuries: Optional[str] = None
    surgeries: Optional[str] = None


class MedicalHistoryCreate(MedicalHistoryUpdate):
    """Schema for creating a medical history record."""

    patient_id: Optional[int] = Field(None, alias="patientId", description="Identifier of the patient")
    user_id: Optional[int] = Field(None, alias="userId", description="Identifier of the user who owns the record")


class MedicalHistory(MedicalHistoryCreate):
    """A stored medical history record."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    record_id: Optional[int] = Field(None, alias="recordId", description="Server-assigned identifier")
