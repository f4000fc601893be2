"""Field checks base interface.

This module defines the protocol (interface) that all field checks implement.
Each check validates the value of exactly one form field and never raises:
malformed input is reported as a ValidationOutcome carrying a ViolationKind.

To implement a new field check:

1. Create a new file in this directory (e.g., `my_field.py`)
2. Define a class that implements the FieldCheck protocol
3. Add the check to the ALL_CHECKS list in registry.py

Example:
    ```python
    # checks/my_field.py
    from optica_form.core.enums import FieldName, ViolationKind
    from ..models import ValidationOutcome

    class MyFieldCheck:
        field = FieldName.MY_FIELD

        def validate(self, value) -> ValidationOutcome:
            if not value:
                return ValidationOutcome.invalid(self.field, ViolationKind.REQUIRED)
            return ValidationOutcome.valid(self.field)
    ```
"""

from __future__ import annotations

from typing import Any, Protocol

from optica_form.core.enums import FieldName
from ..models import ValidationOutcome


class FieldCheck(Protocol):
    """Protocol defining the interface for field checks.

    Use duck typing (Protocol) for flexibility - no need to inherit from a
    base class.

    Attributes:
        field: The form field this check validates.
    """

    field: FieldName

    def validate(self, value: Any) -> ValidationOutcome:
        """Validate a single field value.

        Args:
            value: Current value of the field (already coerced by the form model).

        Returns:
            A passing outcome, or an outcome carrying the first violation found.

        Examples:
            >>> outcome = check.validate("28001")
            >>> outcome.passed
            True
        """
        ...


__all__ = ["FieldCheck"]
