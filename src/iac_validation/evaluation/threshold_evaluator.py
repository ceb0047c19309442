"""Compare severity counts against failure thresholds."""

from __future__ import annotations

import logging
from typing import Dict, Mapping

from ..models import Operator, Severity

logger = logging.getLogger(__name__)


def compute_breach_flags(
    counts: Mapping[Severity, int],
    thresholds: Mapping[Severity, int],
) -> Dict[Severity, bool]:
    """Return a breach flag for every severity named in ``thresholds``.

    A severity with no observed violations never breaches, even when its
    threshold is ``0``.
    """

    flags: Dict[Severity, bool] = {}
    for key, threshold in thresholds.items():
        severity = Severity.parse(key)
        observed = counts.get(severity, 0)
        if observed == 0:
            flags[severity] = False
            continue
        flags[severity] = observed >= threshold
    return flags


def is_breaching_threshold(operator: Operator | str, flags: Mapping[Severity, bool]) -> bool:
    """Fold breach ``flags`` with ``operator``; an empty flag set never breaches."""

    resolved = Operator.parse(operator)
    if not flags:
        return False

    if resolved is Operator.AND:
        return all(flags.values())
    return any(flags.values())


def evaluate(
    counts: Mapping[Severity, int],
    thresholds: Mapping[Severity, int],
    operator: Operator | str,
) -> bool:
    """Return ``True`` when the counts breach the thresholds under ``operator``."""

    flags = compute_breach_flags(counts, thresholds)
    breached = is_breaching_threshold(operator, flags)
    logger.debug("Breach flags %s combined with %s -> %s", flags, operator, breached)
    return breached


__all__ = ["compute_breach_flags", "evaluate", "is_breaching_threshold"]
