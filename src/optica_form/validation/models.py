"""Validation data models.

This module defines core data structures for validation results:
- ValidationOutcome: Outcome of validating a single field value
- FormValidationReport: Outcomes for every field of one form
- BatchValidationReport: Aggregated results for many submitted forms
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from optica_form.core.enums import FieldName, ViolationKind


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one field value.

    Attributes:
        field: The field that was validated.
        kind: Violation found, or None when the value is valid.
        context: Parameters of the violation (e.g. ``{"min_length": 3}``).

    Examples:
        >>> ValidationOutcome.valid(FieldName.EMAIL).passed
        True
        >>> ValidationOutcome.invalid(FieldName.NAME, ViolationKind.TOO_SHORT, min_length=3)
        ValidationOutcome(field=<FieldName.NAME: 'name'>, kind=<ViolationKind.TOO_SHORT: 'too_short'>, context={'min_length': 3})
    """

    field: FieldName
    kind: Optional[ViolationKind] = None
    context: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.kind is None and self.context:
            raise ValueError("A valid outcome carries no context")
        if self.kind == ViolationKind.TOO_SHORT and "min_length" not in self.context:
            raise ValueError("TOO_SHORT requires a min_length context value")

    @property
    def passed(self) -> bool:
        return self.kind is None

    @classmethod
    def valid(cls, field_name: FieldName) -> "ValidationOutcome":
        return cls(field=field_name)

    @classmethod
    def invalid(
        cls, field_name: FieldName, kind: ViolationKind, **context: int
    ) -> "ValidationOutcome":
        return cls(field=field_name, kind=kind, context=dict(context))


@dataclass
class FormValidationReport:
    """Outcomes for every field of a single form.

    Attributes:
        outcomes: One outcome per validated field.
        record_id: Optional identifier of the source record (e.g. CSV row).
    """

    outcomes: List[ValidationOutcome]
    record_id: Optional[str] = None

    def is_valid(self) -> bool:
        """True iff every field outcome passed."""
        return all(o.passed for o in self.outcomes)

    def get_failed_outcomes(self) -> List[ValidationOutcome]:
        return [o for o in self.outcomes if not o.passed]

    def get_error_count(self) -> int:
        return len(self.get_failed_outcomes())

    def outcome_for(self, field_name: FieldName) -> ValidationOutcome:
        """Return the outcome for a field.

        Raises:
            KeyError: If the field was not validated.
        """
        for outcome in self.outcomes:
            if outcome.field == field_name:
                return outcome
        raise KeyError(field_name)


@dataclass
class BatchValidationReport:
    """Aggregated validation results for a file of submissions.

    Attributes:
        reports: One FormValidationReport per record, in file order.
        source_path: Path to the file the records were read from.

    Examples:
        >>> report = run_batch_validation(Path("requests.csv"))
        >>> report.has_errors()
        True
        >>> report.get_error_count()
        3
    """

    reports: List[FormValidationReport]
    source_path: Path

    def has_errors(self) -> bool:
        return any(not r.is_valid() for r in self.reports)

    def get_error_count(self) -> int:
        """Count total number of invalid field values across all records."""
        return sum(r.get_error_count() for r in self.reports)

    def get_invalid_records(self) -> List[FormValidationReport]:
        return [r for r in self.reports if not r.is_valid()]

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              Source: requests.csv
              Records: 10 checked (8 valid, 2 invalid)
              Issues: 3 invalid fields
        """
        total = len(self.reports)
        invalid = len(self.get_invalid_records())
        return (
            f"Validation Summary:\n"
            f"  Source: {self.source_path.name}\n"
            f"  Records: {total} checked ({total - invalid} valid, {invalid} invalid)\n"
            f"  Issues: {self.get_error_count()} invalid fields"
        )

    def to_markdown(self) -> str:
        """Generate a detailed Markdown validation report.

        Messages are rendered with the same wording the form shows on submit.
        """
        from datetime import datetime

        from optica_form.submission.messages import error_messages

        total = len(self.reports)
        invalid_reports = self.get_invalid_records()

        lines = [
            f"# Validation Report: {self.source_path.name}",
            "",
            f"**File:** {self.source_path.name}",
            f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Summary",
            "",
            f"- **Records:** {total}",
            f"- **Valid:** {total - len(invalid_reports)} ✅",
            f"- **Invalid:** {len(invalid_reports)} ❌",
            f"- **Invalid fields:** {self.get_error_count()}",
            "",
        ]

        if not invalid_reports:
            lines.append("## ✅ All Records Valid")
            lines.append("")
            lines.append("No validation issues found.")
            lines.append("")
        else:
            lines.append("## ❌ Invalid Records")
            lines.append("")
            for report in invalid_reports:
                lines.append(
                    f"### ❌ Record {report.record_id} ({report.get_error_count()} errors)"
                )
                lines.append("")
                for msg in error_messages(report.outcomes):
                    lines.append(f"- {msg}")
                lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate a detailed JSON validation report."""
        import json
        from datetime import datetime

        from optica_form.submission.messages import error_messages

        total = len(self.reports)
        invalid_reports = self.get_invalid_records()

        report_data = {
            "metadata": {
                "source_path": self.source_path.name,
                "generated_at": datetime.now().isoformat(),
            },
            "summary": {
                "records": total,
                "valid": total - len(invalid_reports),
                "invalid": len(invalid_reports),
                "invalid_fields": self.get_error_count(),
            },
            "invalid_records": [
                {
                    "record_id": r.record_id,
                    "violations": [
                        {
                            "field": o.field.value,
                            "kind": o.kind.value,
                            "context": o.context,
                        }
                        for o in r.get_failed_outcomes()
                    ],
                    "messages": error_messages(r.outcomes),
                }
                for r in invalid_reports
            ],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_console_summary(self) -> str:
        """Generate the summary plus the first message of each invalid record."""
        from optica_form.submission.messages import error_messages

        lines = [self.summary(), ""]

        invalid_reports = self.get_invalid_records()
        if not invalid_reports:
            lines.append("✅ All records are valid!")
        else:
            lines.append("Record Details:")
            for report in invalid_reports:
                lines.append(f"❌ record {report.record_id}: {report.get_error_count()} errors")
                messages = error_messages(report.outcomes)
                if messages:
                    lines.append(f"   - {messages[0]}")

        return "\n".join(lines)
