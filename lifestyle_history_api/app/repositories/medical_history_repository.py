"""SQLite repository for medical history records."""

from ..schemas.medical_history import MERGE_FIELDS, MedicalHistory
from .base import SqliteRepository


class MedicalHistoryRepository(SqliteRepository[MedicalHistory]):
    table = "medical_histories"
    id_column = "record_id"
    columns = ("patient_id", "user_id") + MERGE_FIELDS
    model = MedicalHistory
