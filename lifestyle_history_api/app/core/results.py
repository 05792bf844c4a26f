"""
Outcome types returned by the service layer.

Service operations that look a record up by id do not raise on a
miss.  They return a :class:`Result` which either holds the value or a
:class:`RecordNotFound` describing what was missing.  The API layer
unwraps the result and turns ``RecordNotFound`` into an HTTP 404.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RecordNotFound:
    """A lookup or delete targeted an identifier with no stored record."""

    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """Tagged success/not-found outcome of a service call."""

    value: Optional[T] = None
    error: Optional[RecordNotFound] = None

    @classmethod
    def found(cls, value: T = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def not_found(cls, message: str) -> "Result[T]":
        return cls(error=RecordNotFound(message))

    @property
    def ok(self) -> bool:
        return self.error is None
