"""Domain error model shared by the scoring core.

Errors are plain values: the core returns them inside ``Err`` and the HTTP
adapter decides how they are rendered.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

__all__ = ["DomainErrorType", "DomainError"]


class DomainErrorType(str, Enum):
    VALIDATION = "Validation"
    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    UNEXPECTED = "Unexpected"


@dataclass(frozen=True)
class DomainError:
    """Category, stable code, readable message and optional offending field."""

    type: DomainErrorType
    code: str
    message: str
    field: Optional[str] = None
    exception: Optional[BaseException] = dataclasses.field(default=None, compare=False, repr=False)

    @classmethod
    def validation(cls, code: str, message: str, field: Optional[str] = None) -> "DomainError":
        return cls(DomainErrorType.VALIDATION, code, message, field)

    @classmethod
    def not_found(cls, code: str, message: str) -> "DomainError":
        return cls(DomainErrorType.NOT_FOUND, code, message)

    @classmethod
    def conflict(cls, code: str, message: str, field: Optional[str] = None) -> "DomainError":
        return cls(DomainErrorType.CONFLICT, code, message, field)

    @classmethod
    def unexpected(
        cls,
        code: str,
        message: str,
        exception: Optional[BaseException] = None,
    ) -> "DomainError":
        return cls(DomainErrorType.UNEXPECTED, code, message, exception=exception)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "DomainError":
        return cls.unexpected("UNEXPECTED_ERROR", "An unexpected error occurred.", exception=exc)

    def wrap(self, prefix: str) -> "DomainError":
        return replace(self, message=f"{prefix}: {self.message}")

    def __str__(self) -> str:
        return f"{self.type.value} {self.code} {self.message}"
