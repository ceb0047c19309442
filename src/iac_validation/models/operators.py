"""Boolean operators used to combine per-severity breach flags."""

from __future__ import annotations

from enum import Enum

from ..errors import IaCValidationError


class InvalidOperatorError(IaCValidationError):
    """Raised when an operator other than ``AND``/``OR`` is supplied."""

    def __init__(self, operator: object) -> None:
        self.operator = operator
        super().__init__(f"invalid operator: {operator!r}")


class Operator(str, Enum):
    """Combining operator of a failure expression."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def parse(cls, value: object) -> "Operator":
        if isinstance(value, Operator):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass

        raise InvalidOperatorError(value)


__all__ = ["InvalidOperatorError", "Operator"]
