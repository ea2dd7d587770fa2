"""Temperature and pressure conversions.

The engine works in degrees Celsius and millibar internally. Steps may be
entered in Fahrenheit or Torr and are normalised on the way in.
"""

from __future__ import annotations

from lyocalc.models.constants import PRESSURE_UNITS, TEMPERATURE_UNITS, TORR_TO_MBAR


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32.0) * 5.0 / 9.0


def torr_to_mbar(torr: float) -> float:
    return torr * TORR_TO_MBAR


def mbar_to_torr(mbar: float) -> float:
    return mbar / TORR_TO_MBAR


def normalize_temperature(value: float, unit: str) -> float:
    """Return ``value`` expressed in Celsius."""
    if unit not in TEMPERATURE_UNITS:
        raise ValueError(f"Unknown temperature unit: {unit!r}")
    if unit == "F":
        return fahrenheit_to_celsius(value)
    return value


def normalize_pressure(value: float, unit: str) -> float:
    """Return ``value`` expressed in mBar."""
    if unit not in PRESSURE_UNITS:
        raise ValueError(f"Unknown pressure unit: {unit!r}")
    if unit == "Torr":
        return torr_to_mbar(value)
    return value


def to_display_temperature(celsius: float, display_unit: str) -> float:
    """Convert a Celsius value to the unit shown to the user."""
    if display_unit not in TEMPERATURE_UNITS:
        raise ValueError(f"Unknown temperature unit: {display_unit!r}")
    if display_unit == "F":
        return celsius_to_fahrenheit(celsius)
    return celsius
