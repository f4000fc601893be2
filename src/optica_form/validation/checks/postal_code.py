"""Postal code check: required, exactly five digits."""

from __future__ import annotations

from typing import Optional

from optica_form.core.enums import FieldName, ViolationKind
from ..config import POSTAL_CODE_PATTERN
from ..models import ValidationOutcome


class PostalCodeCheck:
    """Validate the postal code format.

    The region derived from the prefix is not part of this check: an unknown
    prefix still yields a valid postal code.
    """

    field = FieldName.POSTAL_CODE

    def validate(self, value: Optional[str]) -> ValidationOutcome:
        if not value:
            return ValidationOutcome.invalid(self.field, ViolationKind.REQUIRED)
        if not isinstance(value, str) or not POSTAL_CODE_PATTERN.fullmatch(value):
            return ValidationOutcome.invalid(
                self.field, ViolationKind.INVALID_POSTAL_CODE_FORMAT
            )
        return ValidationOutcome.valid(self.field)
