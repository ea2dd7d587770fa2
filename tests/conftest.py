"""Shared fixtures for the calculator tests."""

import pytest

from lyocalc.models.drying_step import new_step
from lyocalc.models.settings import normalize_settings


def _make_settings(steps, **overrides):
    raw = {"number_of_trays": 3, "heating_power_watts": 250.0, "ice_weight": 0.1}
    raw.update(overrides)
    return normalize_settings(raw, steps)


@pytest.fixture
def make_settings():
    """Factory for settings with the given steps; overrides use snake_case names."""
    return _make_settings


@pytest.fixture
def long_single_step():
    """-10 C, 0.2 mBar for 10 hours: ample energy for 0.1 kg of ice."""
    return _make_settings([new_step(-10.0, 0.2, 600.0)])


@pytest.fixture
def short_single_step():
    """Same conditions for only 10 minutes."""
    return _make_settings([new_step(-10.0, 0.2, 10.0)])
