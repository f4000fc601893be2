"""Human-readable messages for validation outcomes.

Each message is ``"{label} {reason}"``, where the label comes from
``FIELD_LABELS`` (falling back to the raw field identifier) and the reason is
the template for the outcome's ViolationKind with its context interpolated.
"""

from __future__ import annotations

from typing import Iterable, List

from optica_form.validation.config import (
    ERROR_FIELD_ORDER,
    FALLBACK_REASON,
    get_label,
    get_reason_template,
)
from optica_form.validation.models import ValidationOutcome


def format_violation(outcome: ValidationOutcome) -> str:
    """Render a failed outcome as a message.

    Raises:
        ValueError: If the outcome passed.

    Examples:
        >>> format_violation(
        ...     ValidationOutcome.invalid(FieldName.NAME, ViolationKind.TOO_SHORT, min_length=3)
        ... )
        'Nombre debe tener al menos 3 caracteres'
    """
    if outcome.passed:
        raise ValueError(f"Outcome for {outcome.field.value} has no violation")

    label = get_label(outcome.field)
    try:
        reason = get_reason_template(outcome.kind).format(**outcome.context)
    except KeyError:
        # Template needs a context value the outcome does not carry
        reason = FALLBACK_REASON
    return f"{label} {reason}"


def error_messages(outcomes: Iterable[ValidationOutcome]) -> List[str]:
    """Messages for the failed outcomes, in the form's reporting order.

    Only fields listed in ``ERROR_FIELD_ORDER`` are surfaced.
    """
    failed = {o.field: o for o in outcomes if not o.passed}
    return [format_violation(failed[f]) for f in ERROR_FIELD_ORDER if f in failed]
