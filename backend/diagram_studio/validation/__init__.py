"""
Validation module for generation requests.
"""

from diagram_studio.validation.request_validator import (
    RequestValidator,
    RequestValidationResult,
    ValidationIssue,
    ValidationSeverity,
    validate_request,
    raise_on_errors,
)

__all__ = [
    "RequestValidator",
    "RequestValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
    "validate_request",
    "raise_on_errors",
]
