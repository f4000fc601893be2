"""Phone check: optional Spanish number of 9 digits starting with 6, 7 or 9."""

from __future__ import annotations

from typing import Optional

from optica_form.core.enums import FieldName, ViolationKind
from ..config import PHONE_PATTERN
from ..models import ValidationOutcome


class PhoneCheck:
    """Validate the phone number when one is given."""

    field = FieldName.PHONE

    def validate(self, value: Optional[str]) -> ValidationOutcome:
        # Optional
        if not value:
            return ValidationOutcome.valid(self.field)
        if not isinstance(value, str) or not PHONE_PATTERN.fullmatch(value):
            return ValidationOutcome.invalid(self.field, ViolationKind.INVALID_PHONE_FORMAT)
        return ValidationOutcome.valid(self.field)
