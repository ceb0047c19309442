"""SARIF conversion of IaC validation reports."""

from .sarif_converter import (
    DEFAULT_DRIVER,
    RESULT_MESSAGE_TEMPLATE,
    TOOL_INFORMATION_URI,
    TOOL_NAME,
    TOOL_VERSION,
    ConversionResult,
    SarifConverter,
)

__all__ = [
    "ConversionResult",
    "DEFAULT_DRIVER",
    "RESULT_MESSAGE_TEMPLATE",
    "SarifConverter",
    "TOOL_INFORMATION_URI",
    "TOOL_NAME",
    "TOOL_VERSION",
]
