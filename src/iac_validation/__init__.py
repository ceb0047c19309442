"""Validate SCC IaC scan reports and convert them to SARIF."""

__version__ = "1.0.0"

__all__ = ["__version__"]
