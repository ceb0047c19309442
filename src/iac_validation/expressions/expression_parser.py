"""Parser for failure expressions such as ``critical:2,high:1,operator:or``.

The grammar is a flat, comma separated list of ``key:value`` pairs. The
special ``OPERATOR`` key selects how per-severity breach flags are combined;
every other key names a severity and carries the minimum number of
violations at that severity that counts as a breach.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

from ..errors import IaCValidationError
from ..models import InvalidOperatorError, InvalidSeverityError, Operator, Severity

logger = logging.getLogger(__name__)

OPERATOR_KEY = "OPERATOR"

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

DEFAULT_THRESHOLDS: Mapping[Severity, int] = MappingProxyType(
    {
        Severity.CRITICAL: 1,
        Severity.HIGH: 1,
        Severity.MEDIUM: 1,
        Severity.LOW: 1,
    }
)


class InvalidExpressionError(IaCValidationError):
    """Raised when a failure expression is malformed or contradictory."""


@dataclass(frozen=True, slots=True)
class FailurePolicy:
    """Operator and per-severity thresholds extracted from an expression."""

    operator: Operator
    thresholds: Mapping[Severity, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "thresholds", MappingProxyType(dict(self.thresholds)))

    def __iter__(self):
        yield self.operator
        yield self.thresholds


def default_policy() -> FailurePolicy:
    """Return the policy used when no expression is supplied."""

    return FailurePolicy(operator=Operator.OR, thresholds=DEFAULT_THRESHOLDS)


def parse_failure_expression(expression: str) -> FailurePolicy:
    """Parse ``expression`` into a :class:`FailurePolicy`.

    An empty expression yields the default policy (``OR`` with a threshold of
    one for every severity). Any malformed pair, repeated key, negative or
    non-integer count, unknown key or invalid operator raises
    :class:`InvalidExpressionError`.
    """

    if expression == "":
        logger.debug("No failure expression supplied; using default policy")
        return default_policy()

    operator: Operator | None = None
    thresholds: Dict[Severity, int] = {}

    for pair in expression.split(","):
        key, value = _split_pair(pair)

        if key == OPERATOR_KEY:
            operator = _parse_operator(operator, value)
            continue

        severity = _parse_severity_key(key)
        if severity in thresholds:
            raise InvalidExpressionError(f"duplicate severity found: {severity.value}")

        thresholds[severity] = _parse_count(severity, value)

    if not thresholds:
        raise InvalidExpressionError("no violation parameter found in expression")

    if operator is None:
        raise InvalidExpressionError("no operator found in expression")

    return FailurePolicy(operator=operator, thresholds=thresholds)


# ----------------------------------------------------------------------
def _split_pair(pair: str) -> tuple[str, str]:
    key, separator, value = pair.partition(":")
    if not separator:
        raise InvalidExpressionError(f"expected key:value pair, got {pair!r}")
    return key.strip().upper(), value.strip()


def _parse_operator(current: Operator | None, value: str) -> Operator:
    if current is not None:
        raise InvalidExpressionError(
            f"more than one operator found in the expression: {current.value}"
        )

    try:
        return Operator.parse(value)
    except InvalidOperatorError as exc:
        raise InvalidExpressionError(f"invalid operator: {value!r}") from exc


def _parse_severity_key(key: str) -> Severity:
    try:
        return Severity.parse(key)
    except InvalidSeverityError as exc:
        raise InvalidExpressionError(f"invalid severity expression: {key!r}") from exc


def _parse_count(severity: Severity, value: str) -> int:
    if not _INTEGER_LITERAL.fullmatch(value):
        raise InvalidExpressionError(
            f"threshold for {severity.value} is not an integer: {value!r}"
        )

    count = int(value)

    if count < 0:
        raise InvalidExpressionError(
            f"validation expression can not have negative values: {severity.value}:{count}"
        )

    return count


__all__ = [
    "DEFAULT_THRESHOLDS",
    "FailurePolicy",
    "InvalidExpressionError",
    "default_policy",
    "parse_failure_expression",
]
