"""
Pydantic schemas for lifestyle records.

A lifestyle record links a patient and a user to a handful of free
text lifestyle attributes (smoking, diet, sleep, ...).  The service
treats those attributes as opaque.  JSON payloads use camelCase names
(``lID``, ``patientId``); snake_case names are accepted on input too.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

LIFESTYLE_FIELDS = (
    "patient_id",
    "user_id",
    "smoking",
    "alcohol_consumption",
    "physical_activity",
    "diet",
    "sleep_pattern",
    "stress_level",
    "occupation",
)


class LifeStyleCreate(BaseModel):
    """Schema for creating or fully replacing a lifestyle record.

    Any ``lID`` in the payload is ignored; identifiers are assigned by
    the database.
    """

    model_config = ConfigDict(populate_by_name=True)

    patient_id: Optional[int] = Field(None, alias="patientId", description="Identifier of the patient")
    user_id: Optional[int] = Field(None, alias="userId", description="Identifier of the user who owns the record")
    smoking: Optional[str] = Field(None, description="Smoking habits")
    alcohol_consumption: Optional[str] = Field(None, alias="alcoholConsumption")
    physical_activity: Optional[str] = Field(None, alias="physicalActivity")
    diet: Optional[str] = None
    sleep_pattern: Optional[str] = Field(None, alias="sleepPattern")
    stress_level: Optional[str] = Field(None, alias="stressLevel")
    occupation: Optional[str] = None


class LifeStyle(LifeStyleCreate):
    """A stored lifestyle record.  ``l_id`` is ``None`` until it is saved."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    l_id: Optional[int] = Field(None, alias="lID", description="Server-assigned identifier")
