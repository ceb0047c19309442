"""Orchestration layer used by the CLI to validate and convert IaC reports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

from .adapters import ReportLoader, ReportLoaderError, ReportWriterError, SarifWriter
from .conversion import SarifConverter
from .evaluation import compute_breach_flags, count_violations, is_breaching_threshold
from .expressions import InvalidExpressionError, parse_failure_expression
from .models import Operator, ReportResponse, SarifReport, Severity, ToolDriver
from .normalization import ReportNormalizer

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ValidationOutcome:
    """Result returned by :class:`ReportValidationService` runs."""

    operator: Operator
    thresholds: Mapping[Severity, int]
    counts: Dict[Severity, int]
    breach_flags: Dict[Severity, bool]
    breached: bool
    violation_count: int

    @property
    def passed(self) -> bool:
        return not self.breached

    def to_dict(self) -> dict[str, Any]:
        return {
            "operator": self.operator.value,
            "breached": self.breached,
            "violation_count": self.violation_count,
            "severities": {
                severity.value: {
                    "count": self.counts.get(severity, 0),
                    "threshold": self.thresholds.get(severity),
                    "breached": self.breach_flags.get(severity, False),
                }
                for severity in Severity
            },
        }


ReportLoaderFactory = Callable[[Path], ReportLoader]
SarifWriterFactory = Callable[[Path], SarifWriter]


class _ReportReader:
    def __init__(
        self,
        report_loader_factory: ReportLoaderFactory | None,
        normalizer: ReportNormalizer | None,
    ) -> None:
        self._report_loader_factory = report_loader_factory or ReportLoader
        self._normalizer = normalizer or ReportNormalizer()

    def _read(self, report_path: Path) -> ReportResponse:
        loader = self._report_loader_factory(report_path)
        document = loader.load_report()
        return self._normalizer.normalize(document)


class ReportValidationService(_ReportReader):
    """Evaluate an IaC validation report against a failure expression."""

    def __init__(
        self,
        *,
        report_loader_factory: ReportLoaderFactory | None = None,
        normalizer: ReportNormalizer | None = None,
    ) -> None:
        super().__init__(report_loader_factory, normalizer)

    # ------------------------------------------------------------------
    def validate(self, report_path: Path, failure_expression: str = "") -> ValidationOutcome:
        """Return the validation outcome for the report at ``report_path``.

        The expression is parsed before the report is read so that a bad
        expression is reported without touching the filesystem.
        """

        operator, thresholds = parse_failure_expression(failure_expression)
        response = self._read(report_path)

        counts = count_violations(response.violations)
        flags = compute_breach_flags(counts, thresholds)
        breached = is_breaching_threshold(operator, flags)

        logger.info(
            "Evaluated %d violations from %s: breached=%s",
            len(response.violations),
            report_path,
            breached,
        )

        return ValidationOutcome(
            operator=operator,
            thresholds=thresholds,
            counts=counts,
            breach_flags=flags,
            breached=breached,
            violation_count=len(response.violations),
        )


class SarifConversionService(_ReportReader):
    """Convert an IaC validation report into a SARIF file."""

    def __init__(
        self,
        *,
        report_loader_factory: ReportLoaderFactory | None = None,
        normalizer: ReportNormalizer | None = None,
        writer_factory: SarifWriterFactory | None = None,
        driver: ToolDriver | None = None,
    ) -> None:
        super().__init__(report_loader_factory, normalizer)
        self._writer_factory = writer_factory or SarifWriter
        self._converter = SarifConverter(driver)

    # ------------------------------------------------------------------
    def convert(self, report_path: Path, output_path: Path) -> SarifReport:
        """Convert the report at ``report_path`` and write it to ``output_path``."""

        response = self._read(report_path)
        report = self._converter.convert(response.violations)

        writer = self._writer_factory(output_path)
        writer.write(report)
        return report


__all__ = [
    "InvalidExpressionError",
    "ReportLoaderError",
    "ReportValidationService",
    "ReportWriterError",
    "SarifConversionService",
    "ValidationOutcome",
]
