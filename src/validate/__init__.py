"""Validate XARF abuse reports against mandatory and recommended field rules."""

from .models import Issue, IssueSeverity, ValidationOptions, ValidationResult
from .validator import XARFValidator, validate

__all__ = [
    "Issue",
    "IssueSeverity",
    "ValidationOptions",
    "ValidationResult",
    "XARFValidator",
    "validate",
]
