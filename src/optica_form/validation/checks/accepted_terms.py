"""Accepted terms check: the terms checkbox must be ticked."""

from __future__ import annotations

from typing import Any

from optica_form.core.enums import FieldName, ViolationKind
from ..models import ValidationOutcome


class AcceptedTermsCheck:
    """Validate that the user accepted the terms."""

    field = FieldName.ACCEPTED_TERMS

    def validate(self, value: Any) -> ValidationOutcome:
        # Only a literal True counts; truthy strings are coerced upstream
        if value is not True:
            return ValidationOutcome.invalid(self.field, ViolationKind.REQUIRED)
        return ValidationOutcome.valid(self.field)
