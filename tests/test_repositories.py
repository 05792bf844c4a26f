import sqlite3

from lifestyle_history_api.app.core.db import get_connection, init_db
from lifestyle_history_api.app.repositories.lifestyle_repository import LifeStyleRepository
from lifestyle_history_api.app.repositories.medical_history_repository import MedicalHistoryRepository
from lifestyle_history_api.app.schemas.lifestyle import LifeStyle
from lifestyle_history_api.app.schemas.medical_history import MedicalHistory


def test_init_db_creates_tables_and_is_idempotent(db_path):
    init_db()

    conn = sqlite3.connect(db_path)
    try:
        tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    finally:
        conn.close()
    assert {"lifestyles", "medical_histories"} <= tables


def test_save_assigns_increasing_ids(db_path):
    repo = MedicalHistoryRepository()

    first = repo.save(MedicalHistory(patient_id=1, user_id=2, allergies="none"))
    second = repo.save(MedicalHistory(patient_id=1, user_id=2))

    assert first.record_id is not None
    assert second.record_id > first.record_id
    assert repo.get_by_id(first.record_id) == first


def test_save_with_existing_id_overwrites_row(db_path):
    repo = MedicalHistoryRepository()
    stored = repo.save(MedicalHistory(patient_id=1, user_id=2, allergies="none"))

    repo.save(stored.model_copy(update={"allergies": "pollen"}))

    assert repo.get_by_id(stored.record_id).allergies == "pollen"
    assert len(repo.list_all()) == 1


def test_get_by_id_and_exists_for_missing_row(db_path):
    repo = LifeStyleRepository()

    assert repo.get_by_id(1) is None
    assert repo.exists_by_id(1) is False


def test_lifestyle_round_trip(db_path):
    repo = LifeStyleRepository()
    lifestyle = LifeStyle(
        patient_id=3,
        user_id=4,
        smoking="never",
        alcohol_consumption="occasional",
        physical_activity="running",
        diet="mediterranean",
        sleep_pattern="7h",
        stress_level="low",
        occupation="nurse",
    )

    saved = repo.save(lifestyle)

    assert repo.get_by_id(saved.l_id) == saved
    assert saved.model_dump(exclude={"l_id"}) == lifestyle.model_dump(exclude={"l_id"})


def test_delete_many_removes_only_given_rows(db_path):
    repo = MedicalHistoryRepository()
    a = repo.save(MedicalHistory(patient_id=1, user_id=2))
    b = repo.save(MedicalHistory(patient_id=1, user_id=2))
    c = repo.save(MedicalHistory(patient_id=1, user_id=3))

    assert repo.delete_many([a, b]) == 2
    assert repo.list_all() == [c]
    assert repo.delete_many([]) == 0


def test_find_by_patient_id_and_user_id(db_path):
    repo = MedicalHistoryRepository()
    a = repo.save(MedicalHistory(patient_id=1, user_id=2))
    repo.save(MedicalHistory(patient_id=2, user_id=1))
    b = repo.save(MedicalHistory(patient_id=1, user_id=2))

    assert repo.find_by_patient_id_and_user_id(1, 2) == [a, b]
    assert repo.find_by_patient_id_and_user_id(5, 5) == []


def test_delete_by_id(db_path):
    repo = LifeStyleRepository()
    saved = repo.save(LifeStyle(smoking="never"))

    repo.delete_by_id(saved.l_id)

    assert repo.list_all() == []


def test_update_overwrites_existing_row(db_path):
    repo = LifeStyleRepository()
    saved = repo.save(LifeStyle(patient_id=1, user_id=2, diet="keto"))

    assert repo.update(saved.model_copy(update={"diet": "vegan", "user_id": 3})) is True

    stored = repo.get_by_id(saved.l_id)
    assert (stored.diet, stored.user_id) == ("vegan", 3)


def test_update_missing_row_inserts_nothing(db_path):
    repo = MedicalHistoryRepository()

    assert repo.update(MedicalHistory(record_id=7, patient_id=1, user_id=2)) is False
    assert repo.list_all() == []


def test_connection_returns_rows_keyed_by_column(db_path):
    conn = get_connection()
    try:
        conn.execute("INSERT INTO lifestyles (diet) VALUES (?)", (" keto ",))
        row = conn.execute("SELECT l_id, diet FROM lifestyles").fetchone()
        foreign_keys = conn.execute("PRAGMA foreign_keys").fetchone()[0]
    finally:
        conn.close()

    assert row["diet"] == " keto "
    assert foreign_keys == 0
