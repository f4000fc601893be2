"""Form model for the appointment request form.

The model owns the current FormValues, re-validates a field every time it
changes, and keeps the region in step with the postal code. A UI layer drives
it by calling ``on_field_change`` synchronously for each user edit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Set, Tuple, Union

from optica_form.core.enums import FieldName
from optica_form.core.regions import RegionRegistry, default_registry
from optica_form.validation.models import ValidationOutcome
from optica_form.validation.registry import build_checks

logger = logging.getLogger(__name__)

FieldListener = Callable[[FieldName, ValidationOutcome], None]

# camelCase names used by the web form, accepted wherever a field name is parsed
FIELD_ALIASES: Dict[str, FieldName] = {
    "postalCode": FieldName.POSTAL_CODE,
    "desiredDate": FieldName.DESIRED_DATE,
    "acceptedTerms": FieldName.ACCEPTED_TERMS,
}

_TRUTHY = {"true", "yes", "si", "sí", "1", "on"}


@dataclass(frozen=True)
class FormValues:
    """Current values of every form field.

    ``region`` is derived from ``postal_code`` by the FormModel and is never
    set by the user. ``conditions`` is an ordered set.
    """

    accepted_terms: bool = False
    comment: str = ""
    email: str = ""
    name: str = ""
    phone: str = ""
    postal_code: str = ""
    region: str = ""
    type: str = ""
    conditions: Tuple[str, ...] = ()
    desired_date: str = ""


def resolve_field(name: Union[FieldName, str]) -> FieldName:
    """Map a field identifier (snake_case or camelCase) to a FieldName.

    Raises:
        ValueError: If the name is not a form field.

    Examples:
        >>> resolve_field("postalCode")
        <FieldName.POSTAL_CODE: 'postal_code'>
    """
    if isinstance(name, FieldName):
        return name
    if name in FIELD_ALIASES:
        return FIELD_ALIASES[name]
    try:
        return FieldName(name)
    except ValueError as e:
        valid = ", ".join(f.value for f in FieldName)
        raise ValueError(f"Unknown field: '{name}'. Valid fields: {valid}") from e


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _coerce_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY


def _coerce_conditions(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    items: Iterable[Any]
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = value
    else:
        # a lone scalar from YAML/JSON (`conditions: 5`) is one condition
        items = [value]
    seen: List[str] = []
    for item in items:
        text = _coerce_text(item).strip()
        if text and text not in seen:
            seen.append(text)
    return tuple(seen)


def coerce_value(field_name: FieldName, value: Any) -> Any:
    """Convert raw input into the representation stored in FormValues."""
    if field_name == FieldName.ACCEPTED_TERMS:
        return _coerce_flag(value)
    if field_name == FieldName.CONDITIONS:
        return _coerce_conditions(value)
    return _coerce_text(value)


class FormModel:
    """Holds the form values and their validation state.

    Examples:
        >>> form = FormModel()
        >>> _ = form.set_field("postal_code", "28001")
        >>> form.snapshot().region
        'Madrid'
        >>> form.is_valid()
        False
    """

    def __init__(
        self,
        regions: Optional[RegionRegistry] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        """Create an empty form.

        Args:
            regions: Region table used to derive ``region``. Defaults to the
                packaged table.
            today: Clock used by the desired date check. Defaults to
                ``date.today``.
        """
        self.regions = regions or default_registry()
        self._checks = build_checks(today)
        self._values = FormValues()
        self._touched: Set[FieldName] = set()
        self._listeners: List[FieldListener] = []

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        regions: Optional[RegionRegistry] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> "FormModel":
        """Build a form from a plain mapping of field names to values.

        A ``region`` key is ignored since region is derived from the postal
        code.

        Raises:
            ValueError: If a key is not a form field.
        """
        form = cls(regions=regions, today=today)
        for key, value in data.items():
            field_name = resolve_field(key)
            if field_name == FieldName.REGION:
                logger.warning("Ignoring region %r: derived from postal code", value)
                continue
            form.set_field(field_name, value)
        return form

    def subscribe(self, listener: FieldListener) -> None:
        """Register a callback run with ``(field, outcome)`` after every edit."""
        self._listeners.append(listener)

    def set_field(self, name: Union[FieldName, str], value: Any) -> ValidationOutcome:
        """Store a field value and re-validate it.

        Setting the postal code also recomputes the region.

        Args:
            name: Field to update (snake_case or camelCase identifier).
            value: New raw value.

        Returns:
            The field's new validation outcome.

        Raises:
            ValueError: If name is unknown or is ``region``.
        """
        field_name = resolve_field(name)
        if field_name == FieldName.REGION:
            raise ValueError("region is derived from postal_code and cannot be set directly")

        coerced = coerce_value(field_name, value)
        changes: Dict[str, Any] = {field_name.value: coerced}
        if field_name == FieldName.POSTAL_CODE:
            changes[FieldName.REGION.value] = self.regions.lookup(coerced)
        self._values = replace(self._values, **changes)
        self._touched.add(field_name)

        outcome = self._checks[field_name].validate(coerced)
        logger.debug(
            "Field %s updated: %s",
            field_name.value,
            "valid" if outcome.passed else outcome.kind.value,
        )
        for listener in list(self._listeners):
            listener(field_name, outcome)
        return outcome

    on_field_change = set_field

    def outcome(self, name: Union[FieldName, str]) -> ValidationOutcome:
        """Validate one field against its current value."""
        field_name = resolve_field(name)
        return self._checks[field_name].validate(getattr(self._values, field_name.value))

    def outcomes(self) -> List[ValidationOutcome]:
        """Validate every field, touched or not."""
        return [
            check.validate(getattr(self._values, field_name.value))
            for field_name, check in self._checks.items()
        ]

    def is_valid(self) -> bool:
        return all(o.passed for o in self.outcomes())

    def is_touched(self, name: Union[FieldName, str]) -> bool:
        return resolve_field(name) in self._touched

    @property
    def touched_fields(self) -> Set[FieldName]:
        return set(self._touched)

    def snapshot(self) -> FormValues:
        """Return the current values, including the derived region."""
        return self._values
