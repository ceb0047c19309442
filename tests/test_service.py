from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import pytest

from iac_validation.expressions import InvalidExpressionError
from iac_validation.models import InvalidSeverityError, Operator, SarifReport, Severity
from iac_validation.service import (
    ReportValidationService,
    SarifConversionService,
    ValidationOutcome,
)


def _violation(policy_id: str, severity: str) -> dict[str, Any]:
    return {
        "assetId": f"asset-{policy_id}",
        "policyId": policy_id,
        "severity": severity,
        "violatedAsset": {"assetType": "storage.googleapis.com/Bucket"},
    }


class DummyReportLoader:
    document: Mapping[str, Any] = {}
    calls: list[Path] = []

    def __init__(self, report_path: Path) -> None:
        self.report_path = report_path
        DummyReportLoader.calls.append(report_path)

    def load_report(self) -> Mapping[str, Any]:
        return self.document


@dataclass
class DummyWriter:
    output_path: Path
    written: list[SarifReport] = field(default_factory=list)

    def write(self, report: SarifReport) -> Path:
        self.written.append(report)
        return self.output_path


@pytest.fixture(autouse=True)
def reset_loader() -> None:
    DummyReportLoader.calls = []
    DummyReportLoader.document = {
        "response": {
            "iacValidationReport": {
                "violations": [
                    _violation("P1", "CRITICAL"),
                    _violation("P1", "critical"),
                    _violation("P2", "HIGH"),
                    _violation("P3", "MEDIUM"),
                ]
            }
        }
    }


def test_validation_service_reports_breach() -> None:
    service = ReportValidationService(report_loader_factory=DummyReportLoader)

    outcome = service.validate(Path("report.json"), "critical:2,operator:and")

    assert isinstance(outcome, ValidationOutcome)
    assert outcome.breached is True
    assert outcome.passed is False
    assert outcome.operator is Operator.AND
    assert outcome.counts == {Severity.CRITICAL: 2, Severity.HIGH: 1, Severity.MEDIUM: 1}
    assert outcome.breach_flags == {Severity.CRITICAL: True}
    assert outcome.violation_count == 4


def test_validation_service_reports_pass() -> None:
    service = ReportValidationService(report_loader_factory=DummyReportLoader)

    outcome = service.validate(Path("report.json"), "critical:3,low:0,operator:or")

    assert outcome.breached is False
    assert outcome.breach_flags == {Severity.CRITICAL: False, Severity.LOW: False}


def test_validation_outcome_serializes_all_severities() -> None:
    service = ReportValidationService(report_loader_factory=DummyReportLoader)

    payload = service.validate(Path("report.json"), "high:1,operator:or").to_dict()

    assert payload["operator"] == "OR"
    assert payload["breached"] is True
    assert payload["severities"]["HIGH"] == {"count": 1, "threshold": 1, "breached": True}
    assert payload["severities"]["LOW"] == {"count": 0, "threshold": None, "breached": False}


def test_invalid_expression_is_reported_before_reading_report() -> None:
    service = ReportValidationService(report_loader_factory=DummyReportLoader)

    with pytest.raises(InvalidExpressionError):
        service.validate(Path("report.json"), "high:-1,operator:or")

    assert DummyReportLoader.calls == []


def test_invalid_severity_in_report_raises() -> None:
    DummyReportLoader.document = {
        "response": {"iacValidationReport": {"violations": [_violation("P1", "BOGUS")]}}
    }
    service = ReportValidationService(report_loader_factory=DummyReportLoader)

    with pytest.raises(InvalidSeverityError):
        service.validate(Path("report.json"))


def test_conversion_service_writes_report() -> None:
    writers: list[DummyWriter] = []

    def writer_factory(path: Path) -> DummyWriter:
        writer = DummyWriter(path)
        writers.append(writer)
        return writer

    service = SarifConversionService(
        report_loader_factory=DummyReportLoader,
        writer_factory=writer_factory,
    )

    report = service.convert(Path("report.json"), Path("out.sarif"))

    assert [rule.id for rule in report.rules] == ["P1", "P2", "P3"]
    assert len(report.results) == 4
    assert writers[0].output_path == Path("out.sarif")
    assert writers[0].written == [report]


def test_conversion_service_writes_nothing_on_invalid_severity() -> None:
    DummyReportLoader.document = {
        "response": {
            "iacValidationReport": {
                "violations": [_violation("P1", "HIGH"), _violation("P1", "nope")]
            }
        }
    }
    writers: list[DummyWriter] = []

    def writer_factory(path: Path) -> DummyWriter:
        writer = DummyWriter(path)
        writers.append(writer)
        return writer

    service = SarifConversionService(
        report_loader_factory=DummyReportLoader,
        writer_factory=writer_factory,
    )

    with pytest.raises(InvalidSeverityError):
        service.convert(Path("report.json"), Path("out.sarif"))

    assert writers == []
