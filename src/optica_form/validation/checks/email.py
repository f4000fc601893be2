"""Email check: required, and must look like an address."""

from __future__ import annotations

from typing import Optional

from optica_form.core.enums import FieldName, ViolationKind
from ..config import EMAIL_PATTERN
from ..models import ValidationOutcome


class EmailCheck:
    """Validate the email address format."""

    field = FieldName.EMAIL

    def validate(self, value: Optional[str]) -> ValidationOutcome:
        if not value:
            return ValidationOutcome.invalid(self.field, ViolationKind.REQUIRED)
        if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
            return ValidationOutcome.invalid(self.field, ViolationKind.INVALID_EMAIL_FORMAT)
        return ValidationOutcome.valid(self.field)
