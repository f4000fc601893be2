"""Name check: required, with a minimum length."""

from __future__ import annotations

from typing import Optional

from optica_form.core.enums import FieldName, ViolationKind
from ..config import NAME_MIN_LENGTH
from ..models import ValidationOutcome


class NameCheck:
    """Validate the contact name.

    Whitespace is not trimmed: only an empty string counts as missing.
    """

    field = FieldName.NAME

    def __init__(self, min_length: int = NAME_MIN_LENGTH) -> None:
        self.min_length = min_length

    def validate(self, value: Optional[str]) -> ValidationOutcome:
        """Check that the name is present and at least ``min_length`` long.

        Args:
            value: Name as typed by the user.

        Returns:
            REQUIRED when empty, TOO_SHORT (with ``min_length``) when shorter
            than the minimum, otherwise a passing outcome.
        """
        if not value:
            return ValidationOutcome.invalid(self.field, ViolationKind.REQUIRED)
        if len(value) < self.min_length:
            return ValidationOutcome.invalid(
                self.field, ViolationKind.TOO_SHORT, min_length=self.min_length
            )
        return ValidationOutcome.valid(self.field)
