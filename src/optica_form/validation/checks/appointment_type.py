"""Appointment type check: a type must be selected."""

from __future__ import annotations

from typing import Optional

from optica_form.core.enums import FieldName, ViolationKind
from ..models import ValidationOutcome


class AppointmentTypeCheck:
    field = FieldName.TYPE

    def validate(self, value: Optional[str]) -> ValidationOutcome:
        if not value:
            return ValidationOutcome.invalid(self.field, ViolationKind.REQUIRED)
        return ValidationOutcome.valid(self.field)
