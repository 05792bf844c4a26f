from typing import Dict, Iterable, List, Optional

import pytest
from fastapi.testclient import TestClient

from lifestyle_history_api.app.core.config import settings
from lifestyle_history_api.app.core.db import init_db
from lifestyle_history_api.app.main import create_app
from lifestyle_history_api.app.repositories.base import Repository


class InMemoryRepository(Repository):
    """Dict-backed repository used to test services without SQLite."""

    def __init__(self, id_column: str) -> None:
        self.id_column = id_column
        self.rows: Dict[int, object] = {}
        self._next_id = 1

    def get_by_id(self, record_id: int) -> Optional[object]:
        return self.rows.get(record_id)

    def list_all(self) -> List[object]:
        return [self.rows[key] for key in sorted(self.rows)]

    def exists_by_id(self, record_id: int) -> bool:
        return record_id in self.rows

    def save(self, record):
        record_id = getattr(record, self.id_column)
        if record_id is None:
            record_id = self._next_id
            self._next_id += 1
            record = record.model_copy(update={self.id_column: record_id})
        self.rows[record_id] = record
        return record

    def update(self, record) -> bool:
        record_id = getattr(record, self.id_column)
        if record_id not in self.rows:
            return False
        self.rows[record_id] = record
        return True

    def delete_by_id(self, record_id: int) -> None:
        self.rows.pop(record_id, None)

    def delete_many(self, records: Iterable) -> int:
        deleted = 0
        for record in records:
            if self.rows.pop(getattr(record, self.id_column), None) is not None:
                deleted += 1
        return deleted

    def find_by_patient_id_and_user_id(self, patient_id: int, user_id: int) -> List[object]:
        return [
            record
            for record in self.list_all()
            if record.patient_id == patient_id and record.user_id == user_id
        ]


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "lifestyle_history.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lifestyle_repo() -> InMemoryRepository:
    return InMemoryRepository("l_id")


@pytest.fixture
def medical_history_repo() -> InMemoryRepository:
    return InMemoryRepository("record_id")
