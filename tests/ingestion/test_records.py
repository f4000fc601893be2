"""Tests for loading submissions from files."""

import json
from pathlib import Path

import pytest

from optica_form.form.model import FormModel
from optica_form.ingestion.records import load_record, load_records


class TestLoadRecord:
    def test_yaml_record(self, tmp_path: Path):
        path = tmp_path / "request.yaml"
        path.write_text(
            'name: Ana\npostal_code: "08080"\naccepted_terms: true\nconditions: [Miopía]\n',
            encoding="utf-8",
        )
        record = load_record(path)
        assert record == {
            "name": "Ana",
            "postal_code": "08080",
            "accepted_terms": True,
            "conditions": ["Miopía"],
        }

    def test_json_record_with_camel_case(self, tmp_path: Path):
        path = tmp_path / "request.json"
        path.write_text(json.dumps({"postalCode": "28001", "desiredDate": "01/07/2030"}), encoding="utf-8")
        assert load_record(path)["postalCode"] == "28001"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Record file not found"):
            load_record(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "request.txt"
        path.write_text("name: Ana\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported record file type"):
            load_record(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "request.yaml"
        path.write_text("- Ana\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_record(path)

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "request.yaml"
        path.write_text("nombre: Ana\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown columns in .*: nombre"):
            load_record(path)

    def test_malformed_json(self, tmp_path: Path):
        path = tmp_path / "request.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to read"):
            load_record(path)


class TestLoadRecords:
    def test_csv_keeps_strings(self, tmp_path: Path):
        path = tmp_path / "requests.csv"
        path.write_text(
            "name,postal_code,phone,accepted_terms\nAna,08080,,true\nLuis,28001,612345678,no\n",
            encoding="utf-8",
        )
        records = load_records(path)
        assert records == [
            {"name": "Ana", "postal_code": "08080", "phone": "", "accepted_terms": "true"},
            {"name": "Luis", "postal_code": "28001", "phone": "612345678", "accepted_terms": "no"},
        ]

    def test_csv_unknown_column(self, tmp_path: Path):
        path = tmp_path / "requests.csv"
        path.write_text("name,surname\nAna,García\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown columns .*: surname"):
            load_records(path)

    def test_empty_csv(self, tmp_path: Path):
        path = tmp_path / "requests.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to read CSV file"):
            load_records(path)

    def test_yaml_list(self, tmp_path: Path):
        path = tmp_path / "requests.yaml"
        path.write_text("- name: Ana\n- name: Luis\n", encoding="utf-8")
        assert load_records(path) == [{"name": "Ana"}, {"name": "Luis"}]

    def test_single_mapping_is_one_record(self, tmp_path: Path):
        path = tmp_path / "requests.json"
        path.write_text('{"name": "Ana"}', encoding="utf-8")
        assert load_records(path) == [{"name": "Ana"}]

    def test_yaml_list_of_scalars(self, tmp_path: Path):
        path = tmp_path / "requests.yaml"
        path.write_text("- Ana\n- Luis\n", encoding="utf-8")
        with pytest.raises(ValueError, match="must contain a list of mappings"):
            load_records(path)

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "requests.xlsx"
        path.write_bytes(b"")
        with pytest.raises(ValueError, match="Unsupported records file type"):
            load_records(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Records file not found"):
            load_records(tmp_path / "missing.csv")


class TestYamlScalarsStayText:
    def test_unquoted_postal_code_keeps_leading_zero(self, tmp_path: Path):
        path = tmp_path / "request.yaml"
        path.write_text("postal_code: 01001\nphone: 612345678\n", encoding="utf-8")
        record = load_record(path)
        assert record["postal_code"] == "01001"
        assert record["phone"] == "612345678"

    def test_unquoted_postal_code_derives_region(self, tmp_path: Path, clock):
        path = tmp_path / "request.yaml"
        path.write_text("postal_code: 07001\n", encoding="utf-8")
        form = FormModel.from_mapping(load_record(path), today=clock)
        assert form.snapshot().postal_code == "07001"
        assert form.snapshot().region == "Baleares"
        assert form.outcome("postal_code").passed is True

    def test_iso_date_is_not_parsed(self, tmp_path: Path):
        path = tmp_path / "requests.yaml"
        path.write_text("- desired_date: 2030-07-01\n  postal_code: 01001\n", encoding="utf-8")
        assert load_records(path) == [{"desired_date": "2030-07-01", "postal_code": "01001"}]

    def test_booleans_and_lists_keep_yaml_types(self, tmp_path: Path):
        path = tmp_path / "request.yaml"
        path.write_text("accepted_terms: true\nconditions: [Miopía]\ncomment:\n", encoding="utf-8")
        assert load_record(path) == {
            "accepted_terms": True,
            "conditions": ["Miopía"],
            "comment": None,
        }
