"""Tests for the NameCheck validation."""

from optica_form.core.enums import FieldName, ViolationKind
from optica_form.validation.checks.name import NameCheck


def test_name_valid():
    result = NameCheck().validate("Ana")
    assert result.field == FieldName.NAME
    assert result.passed is True
    assert result.context == {}


def test_name_required():
    """Test that empty and missing names are reported as required."""
    check = NameCheck()
    assert check.validate("").kind == ViolationKind.REQUIRED
    assert check.validate(None).kind == ViolationKind.REQUIRED


def test_name_too_short_carries_min_length():
    """Test that short names report TOO_SHORT with the minimum length."""
    result = NameCheck().validate("Al")
    assert result.passed is False
    assert result.kind == ViolationKind.TOO_SHORT
    assert result.context == {"min_length": 3}


def test_name_whitespace_is_not_trimmed():
    """Test that only an empty string counts as missing."""
    assert NameCheck().validate("   ").passed is True
    assert NameCheck().validate(" ").kind == ViolationKind.TOO_SHORT


def test_name_custom_min_length():
    result = NameCheck(min_length=5).validate("Luis")
    assert result.context == {"min_length": 5}
