"""Errors raised by the timer configuration engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    """One rejected field: camelCase path plus a readable message."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ConfigValidationError(ValueError):
    """Submitted configuration failed validation.

    Always carries at least one :class:`FieldViolation`.  Resubmitting
    the same input reproduces the same violations; callers must change
    the input.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, violations: list[FieldViolation] | tuple[FieldViolation, ...]) -> None:
        if not violations:
            raise ValueError("ConfigValidationError needs at least one violation")
        self.violations: tuple[FieldViolation, ...] = tuple(violations)
        super().__init__(
            "Validation failed: "
            + "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        )

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.violations]

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": "Validation failed",
            "details": [v.to_dict() for v in self.violations],
        }
