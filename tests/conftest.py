"""Shared pytest fixtures for form testing."""

from datetime import date
from typing import Any, Dict

import pytest

from optica_form.form.model import FormModel

# Fixed "today" so date checks do not depend on when the suite runs
FIXED_TODAY = date(2030, 6, 15)


def fixed_clock() -> date:
    return FIXED_TODAY


@pytest.fixture
def clock():
    """Clock returning FIXED_TODAY."""
    return fixed_clock


@pytest.fixture
def valid_data() -> Dict[str, Any]:
    """A complete submission that passes every check under FIXED_TODAY."""
    return {
        "name": "Ana García",
        "email": "ana.garcia@example.com",
        "phone": "612345678",
        "postal_code": "28001",
        "type": "Revisión",
        "conditions": ["Miopía", "Astigmatismo"],
        "desired_date": "01/07/2030",
        "comment": "Por la tarde, por favor",
        "accepted_terms": True,
    }


@pytest.fixture
def valid_form(valid_data, clock) -> FormModel:  # pylint: disable=redefined-outer-name
    """A FormModel filled with valid_data."""
    return FormModel.from_mapping(valid_data, today=clock)
