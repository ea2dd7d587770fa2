"""Terpene boil-off risk along a drying curve.

A terpene is at risk at a point of the curve when its boiling temperature
at the chamber pressure is at or below the shelf temperature. Both sides
are compared in the display unit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from lyocalc.models.drying_step import SubTimePoint
from lyocalc.models.units import to_display_temperature
from lyocalc.terpenes.boiling import boiling_points_at
from lyocalc.terpenes.library import TERPENE_LIBRARY, Terpene


@dataclass
class TerpeneRiskResult:
    """Outcome of a risk evaluation at one point."""

    temperature: float = 0.0  # display unit
    boiling_points: Dict[str, float] = field(default_factory=dict)
    at_risk: List[str] = field(default_factory=list)

    @property
    def is_clear(self) -> bool:
        return not self.at_risk


def evaluate_terpene_risk(
    point: SubTimePoint,
    terpenes: Iterable[Terpene] = TERPENE_LIBRARY,
    display_unit: str = "C",
) -> TerpeneRiskResult:
    """Evaluate which terpenes would boil off at ``point``.

    Raises:
        InvalidPressureError: if the point's pressure is zero or negative.
    """
    temperature = to_display_temperature(point.temperature, display_unit)
    boiling = boiling_points_at(point.pressure, terpenes, display_unit)
    at_risk = [name for name, t_boil in boiling.items() if t_boil <= temperature]
    return TerpeneRiskResult(temperature=temperature, boiling_points=boiling, at_risk=at_risk)


def first_risk_times(
    curve: Sequence[SubTimePoint],
    terpenes: Iterable[Terpene] = TERPENE_LIBRARY,
) -> Dict[str, Optional[float]]:
    """Earliest time (h) each terpene becomes at risk, or None if never."""
    terpenes = list(terpenes)
    first: Dict[str, Optional[float]] = {t.name: None for t in terpenes}
    for point in curve:
        for name in evaluate_terpene_risk(point, terpenes).at_risk:
            if first[name] is None:
                first[name] = point.time
    return first
