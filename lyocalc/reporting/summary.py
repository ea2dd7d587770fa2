"""Drying outcome summary for a finished simulation."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from lyocalc.models.units import to_display_temperature
from lyocalc.simulation.sublimation import DryingResult


@dataclass(frozen=True)
class DryingSummary:
    """Headline numbers shown after a calculation."""

    total_time: float            # h
    completion_percent: float    # %, capped at 100
    max_temperature: float       # display unit
    min_pressure: float          # mBar
    display_unit: str
    completion_time: Optional[float]
    is_under_dry: bool
    is_over_dry: bool
    over_dry_percent: float

    @property
    def formatted_total_time(self) -> str:
        if self.total_time < 1:
            return f"{round(self.total_time * 60)} min"
        return f"{round(self.total_time * 10) / 10} hrs"

    @property
    def status(self) -> str:
        if self.is_under_dry:
            return "Under Dry"
        if self.is_over_dry:
            return "Over Dry"
        return "Complete"

    def to_dict(self) -> Dict[str, object]:
        d = asdict(self)
        d["formatted_total_time"] = self.formatted_total_time
        d["status"] = self.status
        return d


def summarize_drying(result: DryingResult, display_unit: str = "C") -> Optional[DryingSummary]:
    """Summarise ``result``; None when there is nothing to summarise."""
    if result.is_empty:
        return None

    points = result.points
    return DryingSummary(
        total_time=result.total_time,
        completion_percent=result.final_progress,
        max_temperature=to_display_temperature(max(p.temperature for p in points), display_unit),
        min_pressure=min(p.pressure for p in points),
        display_unit=display_unit,
        completion_time=result.completion_time,
        is_under_dry=result.is_under_dry,
        is_over_dry=result.is_over_dry,
        over_dry_percent=result.over_dry_percent,
    )
