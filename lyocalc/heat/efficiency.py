"""Empirical heat-transfer efficiency as a function of shelf conditions.

Lower chamber pressure and warmer shelves both favour sublimation within
the modelled range. Inputs are clamped to the range the factors were tuned
on so the estimate never runs away.
"""

from __future__ import annotations

import numpy as np

from lyocalc.models.constants import HEAT_TRANSFER


def temperature_factor(temperature_c: float) -> float:
    """0.6 at -40 C rising linearly to 0.9 at 20 C."""
    t = float(np.clip(temperature_c, HEAT_TRANSFER.temp_min_c, HEAT_TRANSFER.temp_max_c))
    return 0.6 + (t + 40.0) / 120.0


def pressure_factor(pressure_mbar: float) -> float:
    """Piecewise-linear factor, decreasing with chamber pressure."""
    p = float(np.clip(pressure_mbar, HEAT_TRANSFER.pressure_min_mbar, HEAT_TRANSFER.pressure_max_mbar))
    if p <= 1.0:
        return 0.8
    if p <= 10.0:
        return 0.7 - (p - 1.0) * 0.02
    if p <= 100.0:
        return 0.5 - (p - 10.0) * 0.001
    return max(0.3, 0.4 - (p - 100.0) * 0.0001)


def estimate_heat_transfer_efficiency(temperature_c: float, pressure_mbar: float) -> float:
    """Combined efficiency factor, clamped to [0.2, 0.9]."""
    efficiency = temperature_factor(temperature_c) * pressure_factor(pressure_mbar)
    return float(np.clip(efficiency, HEAT_TRANSFER.efficiency_min, HEAT_TRANSFER.efficiency_max))
