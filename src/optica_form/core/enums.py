"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class FieldName(str, Enum):
    """Fields of the appointment request form.

    Values are strings to ease serialization and CLI interchange.
    """

    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    POSTAL_CODE = "postal_code"
    REGION = "region"
    TYPE = "type"
    CONDITIONS = "conditions"
    DESIRED_DATE = "desired_date"
    COMMENT = "comment"
    ACCEPTED_TERMS = "accepted_terms"


class ViolationKind(str, Enum):
    """Closed set of reasons a field value can be rejected."""

    REQUIRED = "required"
    TOO_SHORT = "too_short"
    INVALID_EMAIL_FORMAT = "invalid_email_format"
    INVALID_PHONE_FORMAT = "invalid_phone_format"
    INVALID_POSTAL_CODE_FORMAT = "invalid_postal_code_format"
    INVALID_DATE_FORMAT = "invalid_date_format"
    INVALID_CALENDAR_DATE = "invalid_calendar_date"
    DATE_IN_PAST = "date_in_past"


__all__ = ["FieldName", "ViolationKind"]
