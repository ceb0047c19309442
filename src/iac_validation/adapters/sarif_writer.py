"""Persist SARIF reports to disk."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ..errors import IaCValidationError
from ..models import SarifReport

logger = logging.getLogger(__name__)


class ReportWriterError(IaCValidationError):
    """Raised when a SARIF report cannot be written."""


class SarifWriter:
    """Write :class:`SarifReport` instances as indented JSON documents."""

    def __init__(self, output_path: str | os.PathLike[str], *, indent: int = 2) -> None:
        self.output_path = Path(output_path).resolve()
        self.indent = indent

    def render(self, report: SarifReport) -> str:
        return json.dumps(report.to_dict(), indent=self.indent)

    def write(self, report: SarifReport) -> Path:
        """Write ``report`` and return the path that was written."""

        content = self.render(report)
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ReportWriterError(f"Failed to write SARIF report {self.output_path}") from exc

        logger.info("Wrote SARIF report to %s", self.output_path)
        return self.output_path


__all__ = ["ReportWriterError", "SarifWriter"]
