"""Severity counting and threshold evaluation."""

from .threshold_evaluator import compute_breach_flags, evaluate, is_breaching_threshold
from .violation_counter import count_violations

__all__ = [
    "compute_breach_flags",
    "count_violations",
    "evaluate",
    "is_breaching_threshold",
]
