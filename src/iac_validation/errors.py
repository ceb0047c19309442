"""Exception hierarchy shared by the validation and conversion layers."""

from __future__ import annotations


class IaCValidationError(ValueError):
    """Base class for errors raised while processing IaC validation reports."""


__all__ = ["IaCValidationError"]
