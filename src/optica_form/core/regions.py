"""Postal-code-to-region lookup.

The province table is a static resource (``data/regions.yaml``) keyed by the
first two digits of a Spanish postal code. ``region_for`` is total: it never
raises, returning ``""`` for codes that are not five characters long and
``UNKNOWN_REGION`` for prefixes missing from the table.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

UNKNOWN_REGION = "Desconocida"
POSTAL_CODE_LENGTH = 5
PREFIX_LENGTH = 2


class RegionRegistry:
    """Load and query the region table from YAML."""

    def __init__(self, regions_file: Union[Path, str]) -> None:
        """Initialize the registry with a path to the regions YAML file."""
        self.regions_file = Path(regions_file)
        self._regions: Dict[str, str] = self._load_regions(self.regions_file)

    @staticmethod
    def _load_regions(regions_file: Path) -> Dict[str, str]:
        """Parse YAML into a ``{prefix: region}`` mapping."""
        if not regions_file.exists():
            raise FileNotFoundError(f"Regions file not found: {regions_file}")
        try:
            with regions_file.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to read regions file {regions_file}: {e}") from e

        entries = data.get("regions") if isinstance(data, dict) else None
        if not isinstance(entries, dict):
            raise ValueError(
                f"Regions file {regions_file} must define a 'regions' mapping"
            )

        regions: Dict[str, str] = {}
        for prefix, name in entries.items():
            # Unquoted YAML keys like 28 load as ints; 01 would lose its zero
            key = str(prefix).zfill(PREFIX_LENGTH)
            if len(key) != PREFIX_LENGTH or not key.isdigit():
                raise ValueError(f"Invalid region prefix in {regions_file}: {prefix!r}")
            regions[key] = str(name)
        return regions

    def all(self) -> Dict[str, str]:
        """Return a copy of the full prefix-to-region table."""
        return dict(self._regions)

    def lookup(self, postal_code: Optional[str]) -> str:
        """Return the region for a postal code.

        Args:
            postal_code: Any string (or None).

        Returns:
            ``""`` when the code is not exactly five characters long, the
            region name for a known two-character prefix, and
            ``UNKNOWN_REGION`` otherwise.

        Examples:
            >>> registry.lookup("28001")
            'Madrid'
            >>> registry.lookup("99999")
            'Desconocida'
            >>> registry.lookup("123")
            ''
        """
        if not isinstance(postal_code, str) or len(postal_code) != POSTAL_CODE_LENGTH:
            return ""
        return self._regions.get(postal_code[:PREFIX_LENGTH], UNKNOWN_REGION)

    def __len__(self) -> int:
        return len(self._regions)


@lru_cache(maxsize=1)
def default_registry() -> RegionRegistry:
    """Return the registry backed by the packaged region table."""
    ref = resources.files("optica_form") / "data" / "regions.yaml"
    with resources.as_file(ref) as path:
        return RegionRegistry(path)


def region_for(postal_code: Optional[str], registry: Optional[RegionRegistry] = None) -> str:
    """Derive the region name from a postal code using the packaged table."""
    return (registry or default_registry()).lookup(postal_code)


__all__ = [
    "UNKNOWN_REGION",
    "RegionRegistry",
    "default_registry",
    "region_for",
]
