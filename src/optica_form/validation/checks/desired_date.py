"""Desired date check.

The appointment date must be given as ``dd/mm/yyyy``, denote a real calendar
date, and not lie in the past. The checks run in a fixed priority order and
the first failure wins:

1. empty value -> REQUIRED (before any format parsing)
2. non-string value or pattern mismatch -> INVALID_DATE_FORMAT
3. day/month/year that do not form a real date (31/04, 29/02 on a non-leap
   year, month 13, year 0) -> INVALID_CALENDAR_DATE
4. strictly earlier than today -> DATE_IN_PAST

"Today" is taken from an injectable clock and compared at day granularity.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from optica_form.core.enums import FieldName, ViolationKind
from ..config import DATE_PATTERN
from ..models import ValidationOutcome


class DesiredDateCheck:
    """Validate the desired appointment date."""

    field = FieldName.DESIRED_DATE

    def __init__(self, today: Optional[Callable[[], date]] = None) -> None:
        """Initialize the check.

        Args:
            today: Zero-argument callable returning the current date. Defaults
                to ``date.today``.
        """
        self.today = today or date.today

    def validate(self, value: Optional[str]) -> ValidationOutcome:
        """Validate a ``dd/mm/yyyy`` date string.

        Args:
            value: Date as typed by the user.

        Returns:
            The first violation in priority order, or a passing outcome.

        Examples:
            >>> DesiredDateCheck().validate("31/02/2030").kind
            <ViolationKind.INVALID_CALENDAR_DATE: 'invalid_calendar_date'>
        """
        if not value:
            return ValidationOutcome.invalid(self.field, ViolationKind.REQUIRED)
        if not isinstance(value, str):
            return ValidationOutcome.invalid(self.field, ViolationKind.INVALID_DATE_FORMAT)

        match = DATE_PATTERN.fullmatch(value)
        if not match:
            return ValidationOutcome.invalid(self.field, ViolationKind.INVALID_DATE_FORMAT)

        day, month, year = (int(part) for part in match.groups())
        try:
            requested = date(year, month, day)
        except ValueError:
            return ValidationOutcome.invalid(self.field, ViolationKind.INVALID_CALENDAR_DATE)

        if requested < self.today():
            return ValidationOutcome.invalid(self.field, ViolationKind.DATE_IN_PAST)

        return ValidationOutcome.valid(self.field)
