"""Diagnostics and request validation for Style-Report."""

from .diagnostics import ValidationLevel, ValidationResult

__all__ = ["ValidationLevel", "ValidationResult"]
