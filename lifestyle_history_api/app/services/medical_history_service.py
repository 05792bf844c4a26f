"""
Service layer for medical history records.

Apart from existence checks the service carries one business rule:
an update copies only the six clinical fields listed in
``MERGE_FIELDS`` onto the stored record.  ``patient_id`` and
``user_id`` are left untouched so an update cannot move a record to a
different patient.  A field absent from the update payload is copied
as ``None``.

Records can also be removed in bulk for a ``(patient_id, user_id)``
pair; an empty match set is reported as ``RecordNotFound`` and nothing
is deleted.
"""

import logging
from typing import List

from ..core.results import Result
from ..repositories.base import Repository
from ..schemas.medical_history import (
    MERGE_FIELDS,
    MedicalHistory,
    MedicalHistoryCreate,
    MedicalHistoryUpdate,
)

logger = logging.getLogger(__name__)


class MedicalHistoryService:
    """Business logic for medical history records."""

    def __init__(self, repository: Repository[MedicalHistory]) -> None:
        self.repository = repository

    def get_all_medical_histories(self) -> List[MedicalHistory]:
        return self.repository.list_all()

    def get_medical_history_by_record_id(self, record_id: int) -> Result[MedicalHistory]:
        medical_history = self.repository.get_by_id(record_id)
        if medical_history is None:
            logger.info("MedicalHistory %s not found", record_id)
            return Result.not_found(f"Medical history not found with recordId: {record_id}")
        return Result.found(medical_history)

    def get_medical_histories_by_patient_id_and_user_id(
        self, patient_id: int, user_id: int
    ) -> List[MedicalHistory]:
        return self.repository.find_by_patient_id_and_user_id(patient_id, user_id)

    def create_medical_history(self, data: MedicalHistoryCreate) -> MedicalHistory:
        created = self.repository.save(MedicalHistory(**data.model_dump()))
        logger.info(
            "Created MedicalHistory %s for patient %s and user %s",
            created.record_id,
            created.patient_id,
            created.user_id,
        )
        return created

    def update_medical_history(self, record_id: int, data: MedicalHistoryUpdate) -> Result[MedicalHistory]:
        """Merge the clinical fields of ``data`` into the stored record ``record_id``."""
        existing = self.repository.get_by_id(record_id)
        if existing is not None:
            merged = existing.model_copy(update={field: getattr(data, field) for field in MERGE_FIELDS})
            # the row may have been deleted since it was read
            if self.repository.update(merged):
                logger.info("Updated MedicalHistory %s", record_id)
                return Result.found(merged)
        logger.info("MedicalHistory %s not found for update", record_id)
        return Result.not_found(f"Medical history not found with recordId: {record_id}")

    def delete_medical_history_by_record_id(self, record_id: int) -> Result[None]:
        if not self.repository.exists_by_id(record_id):
            logger.info("MedicalHistory %s not found for deletion", record_id)
            return Result.not_found(f"MedicalHistory not found with recordId: {record_id}")
        self.repository.delete_by_id(record_id)
        logger.info("Deleted MedicalHistory %s", record_id)
        return Result.found()

    def delete_medical_history_by_patient_id_and_user_id(self, patient_id: int, user_id: int) -> Result[int]:
        """Delete every record of the pair and return how many were removed."""
        medical_histories = self.repository.find_by_patient_id_and_user_id(patient_id, user_id)
        if not medical_histories:
            logger.info("No MedicalHistory for patient %s and user %s", patient_id, user_id)
            return Result.not_found(
                f"MedicalHistory not found with patientId: {patient_id} and userId: {user_id}"
            )
        deleted = self.repository.delete_many(medical_histories)
        logger.info(
            "Deleted %d MedicalHistory records for patient %s and user %s",
            deleted,
            patient_id,
            user_id,
        )
        return Result.found(deleted)
