"""Validation module for calculation inputs."""

from workdaycalc.validation.validator import (
    InputValidator,
    ValidationError,
    ValidationErrorType,
    ValidationResult,
)

__all__ = [
    "InputValidator",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
]
