"""
Input preparation — validation of caller-supplied parameters.
"""

from .validators import ValidationResult, validate_inputs

__all__ = [
    "ValidationResult",
    "validate_inputs",
]
