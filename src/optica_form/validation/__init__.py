"""Validation system for the appointment request form.

- **Models**: ValidationOutcome, FormValidationReport, BatchValidationReport
- **Checks**: One check per form field (see validation/checks/)
- **Config**: Rule parameters and locale strings (import from .config)
- **Registry**: validate_field(), validate_values(), run_batch_validation()

Usage:
    >>> from optica_form.validation import validate_field
    >>> from optica_form.core.enums import FieldName
    >>> validate_field(FieldName.POSTAL_CODE, "2800").kind
    <ViolationKind.INVALID_POSTAL_CODE_FORMAT: 'invalid_postal_code_format'>
"""

from __future__ import annotations

from .models import BatchValidationReport, FormValidationReport, ValidationOutcome
from .registry import (
    print_report,
    run_batch_validation,
    validate_field,
    validate_values,
)

__all__ = [
    # Data models
    "ValidationOutcome",
    "FormValidationReport",
    "BatchValidationReport",
    # Functions
    "validate_field",
    "validate_values",
    "run_batch_validation",
    "print_report",
]
