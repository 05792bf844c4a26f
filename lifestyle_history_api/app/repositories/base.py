"""
Repository interface and its SQLite implementation.

``Repository`` lists the persistence operations the services rely on.
``SqliteRepository`` implements them once for any flat table whose
rows map 1:1 onto a pydantic model; concrete repositories only declare
the table, the identifier column, the data columns and the model.

All queries use parameterized statements.  Table and column names are
class constants and never come from request data.
"""

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from ..core.db import get_connection

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class Repository(ABC, Generic[R]):
    """Persistence operations for one record type."""

    @abstractmethod
    def get_by_id(self, record_id: int) -> Optional[R]:
        """Return the record with ``record_id`` or ``None``."""

    @abstractmethod
    def list_all(self) -> List[R]:
        """Return every stored record ordered by identifier."""

    @abstractmethod
    def exists_by_id(self, record_id: int) -> bool:
        """Return ``True`` if a record with ``record_id`` is stored."""

    @abstractmethod
    def save(self, record: R) -> R:
        """Insert the record, or overwrite it if its identifier is already stored.

        A record without an identifier is inserted and returned with
        the identifier assigned by the store.
        """

    @abstractmethod
    def update(self, record: R) -> bool:
        """Overwrite the stored row with the record's identifier.

        Returns ``False`` when no such row exists; nothing is inserted.
        """

    @abstractmethod
    def delete_by_id(self, record_id: int) -> None:
        """Delete the record with ``record_id`` if it exists."""

    @abstractmethod
    def delete_many(self, records: Iterable[R]) -> int:
        """Delete all given records at once and return how many were removed."""

    @abstractmethod
    def find_by_patient_id_and_user_id(self, patient_id: int, user_id: int) -> List[R]:
        """Return all records linked to the ``(patient_id, user_id)`` pair."""


class SqliteRepository(Repository[R]):
    """``Repository`` backed by one SQLite table."""

    table: str
    id_column: str
    columns: Tuple[str, ...]
    model: Type[R]

    def get_by_id(self, record_id: int) -> Optional[R]:
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT * FROM {self.table} WHERE {self.id_column} = ?",
                (record_id,),
            ).fetchone()
            if row is None:
                return None
            return self._row_to_model(row)
        finally:
            conn.close()

    def list_all(self) -> List[R]:
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT * FROM {self.table} ORDER BY {self.id_column} ASC"
            ).fetchall()
            return [self._row_to_model(row) for row in rows]
        finally:
            conn.close()

    def exists_by_id(self, record_id: int) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT 1 FROM {self.table} WHERE {self.id_column} = ?",
                (record_id,),
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def save(self, record: R) -> R:
        record_id = getattr(record, self.id_column)
        all_columns = (self.id_column,) + self.columns
        placeholders = ", ".join("?" for _ in all_columns)
        assignments = ", ".join(f"{col} = excluded.{col}" for col in self.columns)
        # A NULL identifier lets SQLite assign the next one; a known
        # identifier upserts in place.
        query = (
            f"INSERT INTO {self.table} ({', '.join(all_columns)}) VALUES ({placeholders}) "
            f"ON CONFLICT({self.id_column}) DO UPDATE SET {assignments}"
        )
        values = (record_id,) + tuple(getattr(record, col) for col in self.columns)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(query, values)
            if record_id is None:
                record_id = cursor.lastrowid
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Failed to save %s row: %s", self.table, e)
            raise
        finally:
            conn.close()
        return record.model_copy(update={self.id_column: record_id})

    def update(self, record: R) -> bool:
        record_id = getattr(record, self.id_column)
        assignments = ", ".join(f"{col} = ?" for col in self.columns)
        values = tuple(getattr(record, col) for col in self.columns) + (record_id,)
        conn = get_connection()
        try:
            cursor = conn.execute(
                f"UPDATE {self.table} SET {assignments} WHERE {self.id_column} = ?",
                values,
            )
            affected = cursor.rowcount
            conn.commit()
            return affected > 0
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Failed to update %s row %s: %s", self.table, record_id, e)
            raise
        finally:
            conn.close()

    def delete_by_id(self, record_id: int) -> None:
        conn = get_connection()
        try:
            conn.execute(
                f"DELETE FROM {self.table} WHERE {self.id_column} = ?",
                (record_id,),
            )
            conn.commit()
        finally:
            conn.close()

    def delete_many(self, records: Iterable[R]) -> int:
        ids = [getattr(record, self.id_column) for record in records]
        if not ids:
            return 0
        placeholders = ", ".join("?" for _ in ids)
        conn = get_connection()
        try:
            cursor = conn.execute(
                f"DELETE FROM {self.table} WHERE {self.id_column} IN ({placeholders})",
                ids,
            )
            affected = cursor.rowcount
            conn.commit()
            return affected
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Failed to delete %d %s rows: %s", len(ids), self.table, e)
            raise
        finally:
            conn.close()

    def find_by_patient_id_and_user_id(self, patient_id: int, user_id: int) -> List[R]:
        conn = get_connection()
        try:
            rows = conn.execute(
                f"SELECT * FROM {self.table} WHERE patient_id = ? AND user_id = ? "
                f"ORDER BY {self.id_column} ASC",
                (patient_id, user_id),
            ).fetchall()
            return [self._row_to_model(row) for row in rows]
        finally:
            conn.close()

    def _row_to_model(self, row: sqlite3.Row) -> R:
        """Convert a database row to an instance of ``model``."""
        return self.model.model_validate(dict(row))
