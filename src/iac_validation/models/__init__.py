"""Data models for SCC IaC validation reports and SARIF output."""

from .operators import InvalidOperatorError, Operator
from .sarif import (
    SARIF_SCHEMA,
    SARIF_VERSION,
    ResultEntry,
    RuleCatalogEntry,
    RuleProperties,
    SarifReport,
    ToolDriver,
)
from .severity import InvalidSeverityError, Severity
from .violation import (
    AssetDetails,
    IaCValidationReport,
    PolicyDetails,
    PostureDetails,
    ReportResponse,
    Violation,
)

__all__ = [
    "AssetDetails",
    "IaCValidationReport",
    "InvalidOperatorError",
    "InvalidSeverityError",
    "Operator",
    "PolicyDetails",
    "PostureDetails",
    "ReportResponse",
    "ResultEntry",
    "RuleCatalogEntry",
    "RuleProperties",
    "SARIF_SCHEMA",
    "SARIF_VERSION",
    "SarifReport",
    "Severity",
    "ToolDriver",
    "Violation",
]
