"""Boiling temperature of terpenes at reduced pressure (inverted Antoine)."""

from __future__ import annotations

import math
from typing import Dict, Iterable

from lyocalc.models.units import mbar_to_torr, to_display_temperature
from lyocalc.terpenes.library import TERPENE_LIBRARY, Terpene


class InvalidPressureError(ValueError):
    """Pressure outside the domain of the Antoine equation."""


def calculate_boiling_point(terpene: Terpene, pressure_torr: float) -> float:
    """Boiling temperature (deg C) of ``terpene`` at ``pressure_torr``.

    Solves log10(P) = A - B / (T + C) for T.

    Raises:
        InvalidPressureError: if the pressure is not a positive finite number
            or lies on the asymptote of the fitted curve.
    """
    if not math.isfinite(pressure_torr) or pressure_torr <= 0:
        raise InvalidPressureError(f"Pressure must be > 0 Torr, got {pressure_torr}")
    denominator = terpene.a - math.log10(pressure_torr)
    if denominator == 0:
        raise InvalidPressureError(
            f"{terpene.name}: Antoine curve undefined at {pressure_torr} Torr"
        )
    return terpene.b / denominator - terpene.c


def boiling_point_at_mbar(terpene: Terpene, pressure_mbar: float) -> float:
    if not math.isfinite(pressure_mbar) or pressure_mbar <= 0:
        raise InvalidPressureError(f"Pressure must be > 0 mBar, got {pressure_mbar}")
    return calculate_boiling_point(terpene, mbar_to_torr(pressure_mbar))


def boiling_points_at(
    pressure_mbar: float,
    terpenes: Iterable[Terpene] = TERPENE_LIBRARY,
    display_unit: str = "C",
) -> Dict[str, float]:
    """Boiling temperature of each terpene at one chamber pressure."""
    return {
        t.name: to_display_temperature(boiling_point_at_mbar(t, pressure_mbar), display_unit)
        for t in terpenes
    }
