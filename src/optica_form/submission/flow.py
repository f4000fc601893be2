"""Submission flow.

``submit()`` always moves the flow from IDLE to SUBMITTED, then validates the
whole form and produces one of two plain-data payloads:

- an ordered tuple of error messages when any field is invalid
- a SubmissionSummary with display fallbacks for empty optional values

Rendering is left to an optional Presenter collaborator.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Dict, List, Optional, Protocol, Sequence, Tuple, Union

from optica_form.core.enums import FieldName
from optica_form.form.model import FormModel, FormValues, resolve_field
from optica_form.validation.config import (
    COMMENT_FALLBACK,
    CONDITIONS_FALLBACK,
    CONDITIONS_SEPARATOR,
    PHONE_FALLBACK,
    SUMMARY_ROWS,
)
from .messages import error_messages, format_violation

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    IDLE = "IDLE"
    SUBMITTED = "SUBMITTED"


@dataclass(frozen=True)
class SubmissionSummary:
    """Display-ready view of a valid submission."""

    name: str
    email: str
    phone: str
    postal_code: str
    region: str
    type: str
    conditions: str
    desired_date: str
    comment: str

    @classmethod
    def from_values(cls, values: FormValues) -> "SubmissionSummary":
        """Build the summary, replacing empty optional values with fallbacks."""
        return cls(
            name=values.name,
            email=values.email,
            phone=values.phone or PHONE_FALLBACK,
            postal_code=values.postal_code,
            region=values.region,
            type=values.type,
            conditions=CONDITIONS_SEPARATOR.join(values.conditions) or CONDITIONS_FALLBACK,
            desired_date=values.desired_date,
            comment=values.comment or COMMENT_FALLBACK,
        )

    def rows(self) -> List[Tuple[str, str]]:
        """Labelled ``(label, value)`` pairs in display order."""
        return [(label, getattr(self, attr)) for attr, label in SUMMARY_ROWS]

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of one submit attempt.

    Exactly one of ``errors`` (non-empty) or ``summary`` is set.
    """

    errors: Tuple[str, ...] = ()
    summary: Optional[SubmissionSummary] = None

    def __post_init__(self) -> None:
        if bool(self.errors) == (self.summary is not None):
            raise ValueError("SubmissionResult needs either errors or a summary")

    @property
    def ok(self) -> bool:
        return self.summary is not None


class Presenter(Protocol):
    """Collaborator that renders submission payloads (modal, console, ...)."""

    def show_errors(self, messages: Sequence[str]) -> None:
        ...

    def show_summary(self, summary: SubmissionSummary) -> None:
        ...


class SubmissionFlow:
    """Orchestrates validate-then-report for a FormModel.

    Examples:
        >>> flow = SubmissionFlow(form)
        >>> result = flow.submit()
        >>> result.ok
        False
        >>> result.errors[0]
        'Nombre es obligatorio'
    """

    def __init__(self, form: FormModel, presenter: Optional[Presenter] = None) -> None:
        self.form = form
        self.presenter = presenter
        self.state = SubmissionState.IDLE

    @property
    def submitted(self) -> bool:
        return self.state == SubmissionState.SUBMITTED

    def submit(self) -> SubmissionResult:
        """Validate the whole form and produce errors or a summary."""
        self.state = SubmissionState.SUBMITTED

        outcomes = self.form.outcomes()
        if not all(o.passed for o in outcomes):
            messages = error_messages(outcomes)
            logger.info("Submission rejected: %d invalid fields", len(messages))
            result = SubmissionResult(errors=tuple(messages))
            if self.presenter is not None:
                self.presenter.show_errors(list(result.errors))
            return result

        summary = SubmissionSummary.from_values(self.form.snapshot())
        logger.info("Submission accepted for %s", summary.email)
        result = SubmissionResult(summary=summary)
        if self.presenter is not None:
            self.presenter.show_summary(summary)
        return result

    def field_error(self, name: Union[FieldName, str]) -> Optional[str]:
        """Inline error for one field, or None.

        A message is only shown once the field has been edited or a submit
        has been attempted.
        """
        field_name = resolve_field(name)
        if not (self.submitted or self.form.is_touched(field_name)):
            return None
        outcome = self.form.outcome(field_name)
        return None if outcome.passed else format_violation(outcome)
