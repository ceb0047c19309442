"""Adapter layer package for reading IaC reports and writing SARIF output."""

from .report_loader import ReportLoader, ReportLoaderError
from .sarif_writer import ReportWriterError, SarifWriter

__all__ = [
    "ReportLoader",
    "ReportLoaderError",
    "ReportWriterError",
    "SarifWriter",
]
