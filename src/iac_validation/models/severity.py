"""Severity levels reported by SCC IaC validation."""

from __future__ import annotations

from enum import Enum

from ..errors import IaCValidationError


class InvalidSeverityError(IaCValidationError):
    """Raised when a severity is not one of the recognised levels."""

    def __init__(self, severity: object) -> None:
        self.severity = severity
        super().__init__(f"invalid severity: {severity!r}")


class Severity(str, Enum):
    """Severity levels understood by the validator and the SARIF converter."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @classmethod
    def parse(cls, value: object) -> "Severity":
        """Return the canonical severity for ``value`` (case-insensitive)."""

        if isinstance(value, Severity):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass

        raise InvalidSeverityError(value)


__all__ = ["InvalidSeverityError", "Severity"]
