import argparse
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence
import importlib
import colorlog

from optica_form.core.enums import FieldName
from optica_form.submission.flow import SubmissionSummary

# Field choices for argparse
FIELD_CHOICES = [f.value for f in FieldName if f != FieldName.REGION]

try:
    # Prefer package-defined version
    from optica_form import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover - defensive fallback
    _PACKAGE_VERSION = None  # type: ignore[assignment]
    try:
        # Fallback to installed package metadata
        from importlib.metadata import version as _pkg_version, PackageNotFoundError

        _PACKAGE_VERSION = _pkg_version("optica-form")  # type: ignore[assignment]
    except PackageNotFoundError:
        _PACKAGE_VERSION = "unknown"  # type: ignore[assignment]


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


class ConsolePresenter:
    """Print submission payloads to stdout."""

    def show_errors(self, messages: Sequence[str]) -> None:
        print("Errores en el formulario:")
        for msg in messages:
            print(f"  • {msg}")

    def show_summary(self, summary: SubmissionSummary) -> None:
        print("Datos enviados:")
        rows = summary.rows()
        width = max(len(label) for label, _ in rows)
        for label, value in rows:
            print(f"  {label + ':':<{width + 1}} {value}")


def _parse_today(today_arg: Optional[str]) -> Optional[Callable[[], date]]:
    """Turn a ``YYYY-MM-DD`` override into a clock, or None for the system clock."""
    if not today_arg:
        return None
    fixed = datetime.strptime(today_arg, "%Y-%m-%d").date()
    return lambda: fixed


def _load_regions(args: argparse.Namespace):
    """Return a custom RegionRegistry when --regions is given, else None."""
    regions_arg = getattr(args, "regions", None)
    if not regions_arg:
        return None
    regions_mod = importlib.import_module("optica_form.core.regions")
    return regions_mod.RegionRegistry(Path(regions_arg))


def _parse_assignments(assignments: Optional[List[str]]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for item in assignments or []:
        if "=" not in item:
            raise ValueError(f"Expected FIELD=VALUE, got '{item}'")
        key, value = item.split("=", 1)
        values[key.strip()] = value
    return values


def cmd_region(args: argparse.Namespace) -> int:
    """Print the region derived from each postal code."""
    regions_mod = importlib.import_module("optica_form.core.regions")
    try:
        registry = _load_regions(args) or regions_mod.default_registry()
    except (FileNotFoundError, ValueError) as e:
        logging.error("Failed to load regions: %s", e)
        return 1

    for code in args.codes:
        print(f"{code}\t{registry.lookup(code)}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Validate one field value.

    Returns:
        0 if the value is valid
        1 if the arguments are invalid
        2 if the value is invalid
    """
    model_mod = importlib.import_module("optica_form.form.model")
    messages_mod = importlib.import_module("optica_form.submission.messages")

    try:
        today = _parse_today(getattr(args, "today", None))
    except ValueError as e:
        logging.error("Invalid --today value: %s", e)
        return 1

    form = model_mod.FormModel(today=today)
    try:
        outcome = form.set_field(args.field, args.value)
    except ValueError as e:
        logging.error("%s", e)
        return 1

    if outcome.passed:
        print("OK")
        return 0
    print(messages_mod.format_violation(outcome))
    return 2


def cmd_submit(args: argparse.Namespace) -> int:
    """Fill the form from a file and/or FIELD=VALUE pairs, then submit it.

    Values given with --set override those read from --input.

    Returns:
        0 if the submission was accepted
        1 if the input could not be read
        2 if the form has validation errors
    """
    model_mod = importlib.import_module("optica_form.form.model")
    flow_mod = importlib.import_module("optica_form.submission.flow")
    records_mod = importlib.import_module("optica_form.ingestion.records")

    try:
        today = _parse_today(getattr(args, "today", None))
        regions = _load_regions(args)
        data: Dict[str, object] = {}
        if getattr(args, "input", None):
            data.update(records_mod.load_record(Path(args.input)))
        data.update(_parse_assignments(getattr(args, "set", None)))
        form = model_mod.FormModel.from_mapping(data, regions=regions, today=today)
    except FileNotFoundError as e:
        logging.error("Input not found: %s", e)
        return 1
    except ValueError as e:
        logging.error("Invalid input: %s", e)
        return 1

    flow = flow_mod.SubmissionFlow(form, presenter=ConsolePresenter())
    result = flow.submit()
    return 0 if result.ok else 2


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate every submission in a CSV, YAML or JSON file.

    Returns:
        0 if all records are valid
        1 if the file could not be read
        2 if any record has validation errors
    """
    registry = importlib.import_module("optica_form.validation.registry")

    input_path = Path(args.input).resolve()
    try:
        today = _parse_today(getattr(args, "today", None))
        regions = _load_regions(args)
        report = registry.run_batch_validation(input_path, today=today, regions=regions)
    except FileNotFoundError as e:
        logging.error("Input not found: %s", e)
        return 1
    except (ValueError, OSError) as e:
        logging.error("Error validating %s: %s", input_path, e)
        return 1

    registry.print_report(report)

    stem = input_path.stem
    # Generate markdown report if requested
    if getattr(args, "report", False):
        report_dir = input_path.parent if args.report is True else Path(args.report)
        report_path = report_dir / f"{stem}_validation.md"
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(report.to_markdown())
        logging.info("Markdown report saved: %s", report_path)

    # Generate JSON report if requested
    if getattr(args, "report_json", False):
        report_dir = input_path.parent if args.report_json is True else Path(args.report_json)
        report_path = report_dir / f"{stem}_validation.json"
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(report.to_json())
        logging.info("JSON report saved: %s", report_path)

    if report.has_errors():
        logging.warning(
            "Validation failed: %d of %d records invalid",
            len(report.get_invalid_records()),
            len(report.reports),
        )
        return 2
    logging.info("Validation passed for %d records", len(report.reports))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="optica-form",
        description=f"Optica appointment form tools (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )
    p.add_argument(
        "--regions",
        default=None,
        help="Path to a regions YAML file (defaults to the packaged province table)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_region = sub.add_parser("region", help="Look up the province for postal codes")
    p_region.add_argument("codes", nargs="+", help="One or more postal codes")
    p_region.set_defaults(func=cmd_region)

    p_check = sub.add_parser("check", help="Validate a single field value")
    p_check.add_argument("field", choices=FIELD_CHOICES, help="Field to validate")
    p_check.add_argument("value", help="Value to validate")
    p_check.add_argument(
        "--today",
        default=None,
        help="Override today's date for the desired date check (YYYY-MM-DD)",
    )
    p_check.set_defaults(func=cmd_check)

    p_submit = sub.add_parser("submit", help="Fill and submit the form")
    p_submit.add_argument(
        "--input",
        default=None,
        help="YAML or JSON file with field values",
    )
    p_submit.add_argument(
        "--set",
        action="append",
        metavar="FIELD=VALUE",
        help="Set a field value (repeatable; overrides --input)",
    )
    p_submit.add_argument(
        "--today",
        default=None,
        help="Override today's date for the desired date check (YYYY-MM-DD)",
    )
    p_submit.set_defaults(func=cmd_submit)

    p_validate = sub.add_parser("validate", help="Validate a file of submissions")
    p_validate.add_argument(
        "--input",
        required=True,
        help="CSV, YAML or JSON file with one submission per row/item",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed Markdown report. Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed JSON report. Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--today",
        default=None,
        help="Override today's date for the desired date check (YYYY-MM-DD)",
    )
    p_validate.set_defaults(func=cmd_validate)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
