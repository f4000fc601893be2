"""Tests for the postal-code-to-region lookup."""

import pytest

from optica_form.core.regions import (
    UNKNOWN_REGION,
    RegionRegistry,
    default_registry,
    region_for,
)


def test_known_postal_codes():
    """Test lookups for well-known postal codes."""
    assert region_for("28001") == "Madrid"
    assert region_for("08080") == "Barcelona"
    assert region_for("51001") == "Ceuta"
    assert region_for("52001") == "Melilla"
    assert region_for("01001") == "Álava"


def test_unknown_prefix_returns_fallback():
    """Test that a 5-character code with an unknown prefix maps to 'Desconocida'."""
    assert region_for("99999") == UNKNOWN_REGION == "Desconocida"
    assert region_for("00000") == "Desconocida"
    assert region_for("53000") == "Desconocida"


def test_prefix_is_not_required_to_be_numeric():
    """Test that only the length gates the lookup, not the character class."""
    assert region_for("ab123") == "Desconocida"


@pytest.mark.parametrize("postal_code", ["", "123", "2800", "280011", "28 001 "])
def test_wrong_length_returns_empty(postal_code):
    """Test that any code whose length is not 5 yields an empty region."""
    assert region_for(postal_code) == ""


def test_none_returns_empty():
    assert region_for(None) == ""


def test_packaged_table_has_all_provinces():
    """Test that the packaged table covers 01..52 with non-empty names."""
    table = default_registry().all()
    assert len(table) == 52
    assert sorted(table) == [f"{n:02d}" for n in range(1, 53)]
    assert all(name for name in table.values())


def test_every_prefix_maps_to_a_name():
    """For every 5-digit code, the region is the table entry or the fallback."""
    table = default_registry().all()
    for prefix in (f"{n:02d}" for n in range(100)):
        expected = table.get(prefix, UNKNOWN_REGION)
        assert region_for(f"{prefix}123") == expected
        assert region_for(f"{prefix}123") != ""


def test_custom_registry(tmp_path):
    """Test loading a custom regions file, including unquoted numeric keys."""
    regions_file = tmp_path / "regions.yaml"
    regions_file.write_text('regions:\n  "07": Illes Balears\n  28: Comunidad de Madrid\n', encoding="utf-8")

    registry = RegionRegistry(regions_file)
    assert len(registry) == 2
    assert registry.lookup("07001") == "Illes Balears"
    assert registry.lookup("28001") == "Comunidad de Madrid"
    assert registry.lookup("08080") == "Desconocida"
    assert region_for("07001", registry=registry) == "Illes Balears"


def test_registry_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Regions file not found"):
        RegionRegistry(tmp_path / "missing.yaml")


def test_registry_without_regions_mapping(tmp_path):
    regions_file = tmp_path / "regions.yaml"
    regions_file.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must define a 'regions' mapping"):
        RegionRegistry(regions_file)


def test_registry_invalid_prefix(tmp_path):
    regions_file = tmp_path / "regions.yaml"
    regions_file.write_text('regions:\n  "ABC": Somewhere\n', encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid region prefix"):
        RegionRegistry(regions_file)


def test_registry_malformed_yaml(tmp_path):
    regions_file = tmp_path / "regions.yaml"
    regions_file.write_text("regions: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to read regions file"):
        RegionRegistry(regions_file)
