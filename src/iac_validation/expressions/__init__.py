"""Failure expression parsing."""

from .expression_parser import (
    DEFAULT_THRESHOLDS,
    FailurePolicy,
    InvalidExpressionError,
    default_policy,
    parse_failure_expression,
)

__all__ = [
    "DEFAULT_THRESHOLDS",
    "FailurePolicy",
    "InvalidExpressionError",
    "default_policy",
    "parse_failure_expression",
]
