"""Load form submissions from files.

Single submissions come from YAML or JSON mappings. Batches come from CSV
(one row per submission) or from a YAML/JSON list of mappings.

CSV cells are read as strings so postal codes like ``08080`` keep their
leading zero; blank cells become empty strings. YAML files get the same
treatment: unquoted numbers and dates stay text, while booleans, nulls and
lists keep their YAML types. Column headers may use the snake_case field
names or the camelCase names of the web form.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import yaml

from optica_form.form.model import resolve_field

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}
CSV_SUFFIXES = {".csv"}

# Implicit tags that would turn typed text such as `01001` or `2030-07-01` into
# numbers or dates; record files keep those scalars as strings.
_TEXT_TAGS = {
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class RecordLoader(yaml.SafeLoader):
    """SafeLoader that reads numeric and date scalars as plain strings."""


RecordLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _read_structured(path: Path) -> Any:
    """Parse a YAML or JSON file."""
    suffix = path.suffix.lower()
    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix in JSON_SUFFIXES:
                return json.load(f)
            return yaml.load(f, Loader=RecordLoader)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read {path}: {e}") from e


def _check_columns(keys: List[str], path: Path) -> None:
    unknown = []
    for key in keys:
        try:
            resolve_field(str(key))
        except ValueError:
            unknown.append(str(key))
    if unknown:
        raise ValueError(f"Unknown columns in {path}: {', '.join(unknown)}")


def load_record(path: Path) -> Dict[str, Any]:
    """Load one submission from a YAML or JSON file.

    Args:
        path: File holding a single mapping of field names to values.

    Returns:
        The raw mapping (values are coerced later by the FormModel).

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed, is not a mapping, or has
            unknown keys.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")
    if path.suffix.lower() not in YAML_SUFFIXES | JSON_SUFFIXES:
        raise ValueError(f"Unsupported record file type: {path.suffix} (use .yaml, .yml or .json)")

    data = _read_structured(path)
    if not isinstance(data, dict):
        raise ValueError(f"Record file {path} must contain a mapping of field names to values")
    _check_columns(list(data.keys()), path)
    return data


def load_records(path: Path) -> List[Dict[str, Any]]:
    """Load many submissions from a CSV, YAML or JSON file.

    Args:
        path: CSV with one row per submission, or a YAML/JSON list of mappings.

    Returns:
        One raw mapping per submission, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or has unknown columns.

    Examples:
        >>> records = load_records(Path("requests.csv"))
        >>> records[0]["postal_code"]
        '08080'
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in CSV_SUFFIXES:
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8-sig")
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise ValueError(f"Failed to read CSV file {path}: {e}") from e
        _check_columns(list(df.columns), path)
        records = df.to_dict(orient="records")
    elif suffix in YAML_SUFFIXES | JSON_SUFFIXES:
        data = _read_structured(path)
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise ValueError(f"Records file {path} must contain a list of mappings")
        for item in data:
            _check_columns(list(item.keys()), path)
        records = data
    else:
        raise ValueError(
            f"Unsupported records file type: {path.suffix} (use .csv, .yaml, .yml or .json)"
        )

    logger.debug("Read %d records from %s", len(records), path)
    return records
