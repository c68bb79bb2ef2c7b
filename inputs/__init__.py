"""
Inputs — the InputModel record, boundary resolution of partial form data,
and advisory validation.
"""

from .model import FORM_FIELDS, ContributionTiming, InputModel
from .resolver import resolve_input
from .validators import ValidationResult, validate_inputs

__all__ = [
    "FORM_FIELDS",
    "ContributionTiming",
    "InputModel",
    "resolve_input",
    "ValidationResult",
    "validate_inputs",
]
