"""Field check registry and runner.

This module orchestrates field checks:
- ALL_CHECKS: One check instance per form field
- build_checks(): Check instances bound to a specific clock
- validate_field(): Validate a single value
- validate_values(): Validate a whole FormValues record
- run_batch_validation(): Validate every record in a file
- print_report(): Display batch results to console
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from optica_form.core.enums import FieldName
from optica_form.core.regions import RegionRegistry
from .checks import FieldCheck
from .checks.accepted_terms import AcceptedTermsCheck
from .checks.appointment_type import AppointmentTypeCheck
from .checks.desired_date import DesiredDateCheck
from .checks.email import EmailCheck
from .checks.free_form import AlwaysValidCheck
from .checks.name import NameCheck
from .checks.phone import PhoneCheck
from .checks.postal_code import PostalCodeCheck
from .models import BatchValidationReport, FormValidationReport, ValidationOutcome

logger = logging.getLogger(__name__)


def build_checks(today: Optional[Callable[[], date]] = None) -> Dict[FieldName, FieldCheck]:
    """Create one check per field.

    Args:
        today: Clock used by the desired date check. Defaults to ``date.today``.

    Returns:
        Mapping of every FieldName to its check, in FieldName declaration order.
    """
    checks: List[FieldCheck] = [
        NameCheck(),
        EmailCheck(),
        PhoneCheck(),
        PostalCodeCheck(),
        AlwaysValidCheck(FieldName.REGION),
        AppointmentTypeCheck(),
        AlwaysValidCheck(FieldName.CONDITIONS),
        DesiredDateCheck(today=today),
        AlwaysValidCheck(FieldName.COMMENT),
        AcceptedTermsCheck(),
    ]
    return {check.field: check for check in checks}


# Registry of checks bound to the system clock
ALL_CHECKS: Dict[FieldName, FieldCheck] = build_checks()


def get_check(field_name: FieldName) -> FieldCheck:
    """Return the registered check for a field.

    Raises:
        ValueError: If field_name is not a known field.
    """
    try:
        return ALL_CHECKS[FieldName(field_name)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown field: {field_name}") from e


def validate_field(
    field_name: FieldName,
    value: Any,
    today: Optional[Callable[[], date]] = None,
) -> ValidationOutcome:
    """Validate a single field value.

    Args:
        field_name: Field to validate.
        value: Value to validate, already in the model's representation.
        today: Optional clock overriding ``date.today`` for the date check.

    Returns:
        The outcome of the field's check.

    Raises:
        ValueError: If field_name is not a known field.

    Examples:
        >>> validate_field(FieldName.PHONE, "612345678").passed
        True
    """
    check = get_check(field_name)
    if today is not None and isinstance(check, DesiredDateCheck):
        check = DesiredDateCheck(today=today)
    return check.validate(value)


def validate_values(
    values: Any,
    today: Optional[Callable[[], date]] = None,
    record_id: Optional[str] = None,
) -> FormValidationReport:
    """Validate every field of a FormValues record.

    Args:
        values: A FormValues instance (any object exposing one attribute per field).
        today: Optional clock overriding ``date.today`` for the date check.
        record_id: Optional identifier stored on the report.

    Returns:
        FormValidationReport with one outcome per field.
    """
    checks = ALL_CHECKS if today is None else build_checks(today)
    outcomes = [
        check.validate(getattr(values, field_name.value))
        for field_name, check in checks.items()
    ]
    return FormValidationReport(outcomes=outcomes, record_id=record_id)


def run_batch_validation(
    path: Path,
    today: Optional[Callable[[], date]] = None,
    regions: Optional[RegionRegistry] = None,
) -> BatchValidationReport:
    """Validate every submission stored in a file.

    Args:
        path: CSV, YAML or JSON file holding one record per row/item.
        today: Optional clock overriding ``date.today`` for the date check.
        regions: Region table used to derive the region of each record.

    Returns:
        BatchValidationReport with one FormValidationReport per record.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or has unknown columns.

    Examples:
        >>> report = run_batch_validation(Path("requests.csv"))
        >>> print(report.summary())
    """
    from optica_form.form.model import FormModel
    from optica_form.ingestion.records import load_records

    records = load_records(path)
    logger.info("Loaded %d records from %s", len(records), path)

    reports: List[FormValidationReport] = []
    for index, record in enumerate(records, start=1):
        form = FormModel.from_mapping(record, regions=regions, today=today)
        reports.append(validate_values(form.snapshot(), today=today, record_id=str(index)))

    return BatchValidationReport(reports=reports, source_path=path)


def print_report(report: BatchValidationReport) -> None:
    """Print a batch validation report to console.

    Examples:
        >>> print_report(run_batch_validation(Path("requests.csv")))
        Validation Summary:
          Source: requests.csv
          Records: 2 checked (1 valid, 1 invalid)
          Issues: 1 invalid fields

        Record Details:
        ❌ record 2: 1 errors
           - Email no tiene un formato válido
    """
    print(report.to_console_summary())
