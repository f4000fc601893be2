"""Ingestion of form submissions from YAML, JSON and CSV files."""

from .records import load_record, load_records

__all__ = ["load_record", "load_records"]
