from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from ..errors import IaCValidationError

logger = logging.getLogger(__name__)


class ReportLoaderError(IaCValidationError):
    """Exception raised when an IaC validation report cannot be ingested."""


class ReportLoader:
    """Load an SCC IaC validation report from a JSON artifact."""

    def __init__(self, report_path: str | os.PathLike[str]) -> None:
        self.report_path = Path(report_path).resolve()

    def load_report(self) -> Mapping[str, Any]:
        """Return the decoded report document."""

        path = self.report_path
        if not path.exists():
            raise ReportLoaderError(f"IaC validation report not found: {path}")

        try:
            raw = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReportLoaderError(f"Failed to read IaC validation report {path}") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ReportLoaderError(
                f"Invalid JSON in IaC validation report {path}: {exc.msg}"
            ) from exc

        if not isinstance(data, Mapping):
            raise ReportLoaderError(f"IaC validation report must be a JSON object: {path}")

        logger.debug("Loaded IaC validation report from %s", path)
        return data


__all__ = ["ReportLoader", "ReportLoaderError"]
