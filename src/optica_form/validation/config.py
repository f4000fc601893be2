"""Validation and presentation configuration constants.

This module centralizes every rule parameter and locale string used by the
field checks and the submission flow. Adjust these constants to tune the form
without touching check implementations.

Locale:
    All user-facing strings are Spanish, matching the form's audience.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

from optica_form.core.enums import FieldName, ViolationKind

# ============================================================================
# RULE PARAMETERS
# ============================================================================

NAME_MIN_LENGTH = 3

# Patterns are applied with fullmatch(); ASCII digit classes on purpose
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"[679][0-9]{8}")
POSTAL_CODE_PATTERN = re.compile(r"[0-9]{5}")
DATE_PATTERN = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")

DATE_FORMAT = "%d/%m/%Y"


# ============================================================================
# MESSAGES
# ============================================================================

# Order in which invalid fields are reported on submit
ERROR_FIELD_ORDER: List[FieldName] = [
    FieldName.NAME,
    FieldName.EMAIL,
    FieldName.PHONE,
    FieldName.POSTAL_CODE,
    FieldName.TYPE,
    FieldName.DESIRED_DATE,
    FieldName.ACCEPTED_TERMS,
]

FIELD_LABELS: Dict[FieldName, str] = {
    FieldName.NAME: "Nombre",
    FieldName.EMAIL: "Email",
    FieldName.PHONE: "Teléfono",
    FieldName.POSTAL_CODE: "Código Postal",
    FieldName.TYPE: "Tipo",
    FieldName.DESIRED_DATE: "Fecha deseada",
    FieldName.ACCEPTED_TERMS: "Aceptar condiciones",
}

REASON_TEMPLATES: Dict[ViolationKind, str] = {
    ViolationKind.REQUIRED: "es obligatorio",
    ViolationKind.TOO_SHORT: "debe tener al menos {min_length} caracteres",
    ViolationKind.INVALID_EMAIL_FORMAT: "no tiene un formato válido",
    ViolationKind.INVALID_PHONE_FORMAT: "debe empezar por 6, 7 o 9 y tener 9 dígitos",
    ViolationKind.INVALID_POSTAL_CODE_FORMAT: "debe tener 5 dígitos",
    ViolationKind.INVALID_DATE_FORMAT: "debe tener el formato dd/mm/aaaa",
    ViolationKind.INVALID_CALENDAR_DATE: "no es una fecha válida",
    ViolationKind.DATE_IN_PAST: "no puede ser una fecha pasada",
}

FALLBACK_REASON = "tiene un error"


# ============================================================================
# SUMMARY DISPLAY
# ============================================================================

PHONE_FALLBACK = "No especificado"
CONDITIONS_FALLBACK = "Ninguna"
COMMENT_FALLBACK = "Sin comentarios"
CONDITIONS_SEPARATOR = ", "

# (attribute on SubmissionSummary, label) in display order
SUMMARY_ROWS: List[Tuple[str, str]] = [
    ("name", "Nombre"),
    ("email", "Email"),
    ("phone", "Teléfono"),
    ("postal_code", "Código Postal"),
    ("region", "Provincia"),
    ("type", "Tipo"),
    ("conditions", "Dolencias"),
    ("desired_date", "Fecha deseada"),
    ("comment", "Comentarios"),
]


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_label(field: FieldName) -> str:
    """Get the human label for a field.

    Fields without a label fall back to their raw identifier.

    Examples:
        >>> get_label(FieldName.POSTAL_CODE)
        'Código Postal'
        >>> get_label(FieldName.COMMENT)
        'comment'
    """
    return FIELD_LABELS.get(field, FieldName(field).value)


def get_reason_template(kind: ViolationKind) -> str:
    """Get the reason template for a violation kind.

    Raises:
        ValueError: If kind is not a ViolationKind.
    """
    try:
        kind = ViolationKind(kind)
    except ValueError as e:
        raise ValueError(f"Unknown violation kind: {kind}") from e
    return REASON_TEMPLATES.get(kind, FALLBACK_REASON)
