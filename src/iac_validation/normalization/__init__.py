"""Normalization of raw SCC report documents."""

from .report_normalizer import ReportNormalizer

__all__ = ["ReportNormalizer"]
