"""Structured validation results.

Validators collect every field problem before returning so a form can be
re-rendered with all messages at once. Callers inspect ``is_valid`` and decide
what to do; services turn an invalid result into a ``ValidationFailedError``.
"""

from dataclasses import dataclass, field
from enum import Enum


class ErrorCode(str, Enum):
    """Kind of field-level validation failure."""

    REQUIRED = "required"
    TOO_LONG = "too_long"
    OUT_OF_RANGE = "out_of_range"
    INVALID_FORMAT = "invalid_format"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class FieldError:
    field: str
    code: ErrorCode
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "code": self.code.value, "message": self.message}


@dataclass
class ValidationResult:
    """Ordered collection of field errors. Empty means valid."""

    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, code: ErrorCode, message: str) -> None:
        self.errors.append(FieldError(field_name, code, message))

    def has_error(self, field_name: str, code: ErrorCode | None = None) -> bool:
        return any(
            e.field == field_name and (code is None or e.code == code) for e in self.errors
        )

    def to_list(self) -> list[dict[str, str]]:
        return [e.to_dict() for e in self.errors]
