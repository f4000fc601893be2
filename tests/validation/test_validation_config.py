"""Tests for the validation configuration helpers and constants."""

import pytest

from optica_form.core.enums import FieldName, ViolationKind
from optica_form.validation.config import (
    ERROR_FIELD_ORDER,
    FALLBACK_REASON,
    REASON_TEMPLATES,
    get_label,
    get_reason_template,
)


def test_get_label():
    assert get_label(FieldName.NAME) == "Nombre"
    assert get_label(FieldName.PHONE) == "Teléfono"
    assert get_label(FieldName.POSTAL_CODE) == "Código Postal"
    assert get_label(FieldName.DESIRED_DATE) == "Fecha deseada"
    assert get_label(FieldName.ACCEPTED_TERMS) == "Aceptar condiciones"


def test_get_label_falls_back_to_identifier():
    """Test that unlabeled fields use their raw identifier."""
    assert get_label(FieldName.COMMENT) == "comment"
    assert get_label(FieldName.CONDITIONS) == "conditions"


def test_every_violation_kind_has_a_template():
    """Meta-test: the template map is exhaustive over ViolationKind."""
    assert set(REASON_TEMPLATES) == set(ViolationKind)
    for kind in ViolationKind:
        assert get_reason_template(kind) != FALLBACK_REASON


def test_get_reason_template_values():
    assert get_reason_template(ViolationKind.REQUIRED) == "es obligatorio"
    assert (
        get_reason_template(ViolationKind.TOO_SHORT).format(min_length=3)
        == "debe tener al menos 3 caracteres"
    )
    assert get_reason_template(ViolationKind.DATE_IN_PAST) == "no puede ser una fecha pasada"


def test_get_reason_template_unknown_kind():
    with pytest.raises(ValueError, match="Unknown violation kind: bogus"):
        get_reason_template("bogus")


def test_error_order_fields_are_all_labelled():
    assert ERROR_FIELD_ORDER == [
        FieldName.NAME,
        FieldName.EMAIL,
        FieldName.PHONE,
        FieldName.POSTAL_CODE,
        FieldName.TYPE,
        FieldName.DESIRED_DATE,
        FieldName.ACCEPTED_TERMS,
    ]
    for field_name in ERROR_FIELD_ORDER:
        assert get_label(field_name) != field_name.value
