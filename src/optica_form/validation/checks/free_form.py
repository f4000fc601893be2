"""Checks for fields that accept any value.

Comments, the conditions multi-select and the derived region never block a
submission. They still get a check so every field has an outcome.
"""

from __future__ import annotations

from typing import Any

from optica_form.core.enums import FieldName
from ..models import ValidationOutcome


class AlwaysValidCheck:
    """Accept any value for the given field."""

    def __init__(self, field: FieldName) -> None:
        self.field = field

    def validate(self, value: Any) -> ValidationOutcome:
        return ValidationOutcome.valid(self.field)
