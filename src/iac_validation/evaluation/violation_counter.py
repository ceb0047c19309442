"""Count report violations by severity."""

from __future__ import annotations

from typing import Dict, Iterable

from ..models import Severity, Violation


def count_violations(violations: Iterable[Violation]) -> Dict[Severity, int]:
    """Return the number of violations observed at each severity.

    Severities with no violations are absent from the result. The first
    violation carrying an unrecognised severity raises
    :class:`~iac_validation.models.InvalidSeverityError`.
    """

    counts: Dict[Severity, int] = {}
    for violation in violations:
        severity = Severity.parse(violation.severity)
        counts[severity] = counts.get(severity, 0) + 1
    return counts


__all__ = ["count_violations"]
