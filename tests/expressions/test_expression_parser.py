from __future__ import annotations

import pytest

from iac_validation.errors import IaCValidationError
from iac_validation.expressions import (
    DEFAULT_THRESHOLDS,
    InvalidExpressionError,
    default_policy,
    parse_failure_expression,
)
from iac_validation.models import Operator, Severity


@pytest.mark.parametrize(
    ("expression", "operator", "thresholds"),
    [
        ("critical:2,operator:and", Operator.AND, {Severity.CRITICAL: 2}),
        (
            "critical:2,high:1,medium:3,operator:or",
            Operator.OR,
            {Severity.CRITICAL: 2, Severity.HIGH: 1, Severity.MEDIUM: 3},
        ),
        (
            "CrItICal:2,HiGH:1,medium:3,oPERATOR:oR",
            Operator.OR,
            {Severity.CRITICAL: 2, Severity.HIGH: 1, Severity.MEDIUM: 3},
        ),
        ("operator:and,low:0", Operator.AND, {Severity.LOW: 0}),
        (" high : 4 , operator : or ", Operator.OR, {Severity.HIGH: 4}),
    ],
)
def test_parses_valid_expressions(
    expression: str, operator: Operator, thresholds: dict[Severity, int]
) -> None:
    policy = parse_failure_expression(expression)

    assert policy.operator is operator
    assert dict(policy.thresholds) == thresholds


def test_empty_expression_returns_default_policy() -> None:
    operator, thresholds = parse_failure_expression("")

    assert operator is Operator.OR
    assert dict(thresholds) == {
        Severity.CRITICAL: 1,
        Severity.HIGH: 1,
        Severity.MEDIUM: 1,
        Severity.LOW: 1,
    }
    assert dict(thresholds) == dict(DEFAULT_THRESHOLDS)
    assert default_policy() == parse_failure_expression("")


@pytest.mark.parametrize(
    ("expression", "message"),
    [
        ("high:-1,operator:or", "negative"),
        ("critical:2,operator:or,operator:and", "more than one operator"),
        ("critical:2,operator:or,operator:or", "more than one operator"),
        ("critical:2,high:1,medium:3", "no operator"),
        ("operator:or", "no violation parameter"),
        ("critical:2,high:1,medium:3,medium:4,operator:or", "duplicate severity"),
        ("critical:2,critical:2,operator:or", "duplicate severity"),
        ("critical:invalid,high:1,operator:or", "not an integer"),
        ("critical:1.5,operator:or", "not an integer"),
        ("critical:1_0,operator:or", "not an integer"),
        ("critical:\u0663,operator:or", "not an integer"),
        ("critical: ,operator:or", "not an integer"),
        ("informational:1,operator:or", "invalid severity"),
        ("critical:1,operator:not", "invalid operator"),
        ("critical:1,operator:", "invalid operator"),
        ("critical,operator:or", "key:value"),
        ("critical:1,,operator:or", "key:value"),
    ],
)
def test_rejects_invalid_expressions(expression: str, message: str) -> None:
    with pytest.raises(InvalidExpressionError) as excinfo:
        parse_failure_expression(expression)

    assert message in str(excinfo.value)


def test_missing_operator_and_severity_still_errors() -> None:
    with pytest.raises(InvalidExpressionError):
        parse_failure_expression("garbage")


def test_expression_errors_share_base_class() -> None:
    with pytest.raises(IaCValidationError):
        parse_failure_expression("low:-3,operator:and")


def test_threshold_keys_match_supplied_severities() -> None:
    policy = parse_failure_expression("low:5,medium:0,operator:and")

    assert set(policy.thresholds) == {Severity.LOW, Severity.MEDIUM}
    assert Severity.CRITICAL not in policy.thresholds


def test_thresholds_are_read_only() -> None:
    policy = parse_failure_expression("critical:1,operator:or")

    with pytest.raises(TypeError):
        policy.thresholds[Severity.HIGH] = 3  # type: ignore[index]
