"""Chart-ready tables built from a progress curve.

The progress curve is resampled onto a denser grid (its own sample times
plus at least twenty evenly spaced instants, two per hour for long runs) so
the terpene boiling curves render smoothly across step changes.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from lyocalc.models.drying_step import DryingStep, SubTimePoint
from lyocalc.models.units import to_display_temperature
from lyocalc.terpenes.boiling import boiling_point_at_mbar
from lyocalc.terpenes.library import Terpene

BASE_COLUMNS = ["time", "temperature", "display_temp", "progress", "pressure", "step"]

MIN_CHART_INTERVALS = 20
INTERVALS_PER_HOUR = 2


def chart_time_grid(curve: Sequence[SubTimePoint]) -> np.ndarray:
    """Sorted union of the curve's times and an evenly spaced grid."""
    max_time = curve[-1].time
    interval_count = max(MIN_CHART_INTERVALS, math.ceil(max_time * INTERVALS_PER_HOUR))
    grid = np.linspace(0.0, max_time, interval_count + 1)
    return np.union1d(np.array([p.time for p in curve]), grid)


def build_chart_frame(
    curve: Sequence[SubTimePoint],
    terpenes: Optional[Iterable[Terpene]] = None,
    display_unit: str = "C",
) -> pd.DataFrame:
    """Interpolated curve with one boiling-point column per terpene.

    Raises:
        InvalidPressureError: if a resampled pressure is not positive.
    """
    terpenes = list(terpenes or [])
    if not curve:
        return pd.DataFrame(columns=BASE_COLUMNS + [t.name for t in terpenes])

    xp = np.array([p.time for p in curve])
    times = chart_time_grid(curve)

    temperature = np.interp(times, xp, [p.temperature for p in curve])
    pressure = np.interp(times, xp, [p.pressure for p in curve])
    progress = np.interp(times, xp, [p.progress for p in curve])

    # Step of the latest curve sample at or before each instant
    idx = np.clip(np.searchsorted(xp, times, side="right") - 1, 0, len(curve) - 1)
    steps = np.array([curve[i].step for i in idx])

    df = pd.DataFrame(
        {
            "time": times,
            "temperature": temperature,
            "display_temp": [to_display_temperature(t, display_unit) for t in temperature],
            "progress": progress,
            "pressure": pressure,
            "step": steps,
        }
    )
    for terpene in terpenes:
        df[terpene.name] = [
            to_display_temperature(boiling_point_at_mbar(terpene, p), display_unit)
            for p in pressure
        ]
    return df


def step_temperature_profile(steps: Sequence[DryingStep], display_unit: str = "C") -> pd.DataFrame:
    """Staircase shelf-temperature profile with a vertical jump at each step change."""
    rows: List[dict] = []
    if not steps:
        return pd.DataFrame(columns=["time", "temperature", "display_temp"])

    def _row(time: float, temp_c: float) -> dict:
        return {
            "time": time,
            "temperature": temp_c,
            "display_temp": to_display_temperature(temp_c, display_unit),
        }

    rows.append(_row(0.0, steps[0].temperature_c))
    elapsed = 0.0
    for index, step in enumerate(steps):
        elapsed += max(0.0, step.duration_hours)
        rows.append(_row(elapsed, step.temperature_c))
        if index + 1 < len(steps):
            rows.append(_row(elapsed, steps[index + 1].temperature_c))
    return pd.DataFrame(rows)
