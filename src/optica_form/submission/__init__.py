"""Submission flow: turn a filled form into error messages or a summary."""

from .flow import (
    Presenter,
    SubmissionFlow,
    SubmissionResult,
    SubmissionState,
    SubmissionSummary,
)
from .messages import error_messages, format_violation

__all__ = [
    "Presenter",
    "SubmissionFlow",
    "SubmissionResult",
    "SubmissionState",
    "SubmissionSummary",
    "error_messages",
    "format_violation",
]
