"""Sublimation progress integrator.

Walks simulated time across a multi-step drying program in fixed
increments, accumulating the heat delivered to the batch until the latent
heat of the ice is covered. The effective heat rate falls as drying
proceeds, modelling the insulating dried layer that builds up over the ice.

Progress is hard-capped at 100 %. Running the program longer than needed is
reported through ``DryingResult.is_over_dry`` and ``over_dry_percent``,
derived from time-to-completion against the configured program time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from lyocalc.heat.selection import select_heat_model
from lyocalc.logger import get_logger
from lyocalc.models.constants import DRYING_LIMITS, LATENT_HEAT_SUBLIMATION
from lyocalc.models.drying_step import DryingStep, SubTimePoint
from lyocalc.models.settings import FreezeDryerSettings

LOGGER = get_logger(__name__)


def calculate_step_time_points(steps: Sequence[DryingStep]) -> List[float]:
    """Cumulative step boundaries in hours, starting at 0."""
    time_points = [0.0]
    accumulated = 0.0
    for step in steps:
        accumulated += max(0.0, step.duration) / 60.0
        time_points.append(accumulated)
    return time_points


def generate_calculation_id(settings: FreezeDryerSettings) -> str:
    """Deterministic fingerprint of the inputs that drive a calculation."""
    return (
        f"{settings.ice_weight:.5f}-{settings.number_of_trays}-{settings.water_percentage:g}"
        f"-{settings.hash_per_tray:.5f}-{settings.heating_power_watts:g}-{len(settings.steps)}"
    )


def progress_factor(current_progress: float) -> float:
    """Fraction of the base heat rate still effective at ``current_progress`` %."""
    limits = DRYING_LIMITS
    fraction = max(0.0, current_progress) / 100.0
    return max(
        limits.progress_factor_floor,
        limits.progress_factor_start
        - limits.progress_factor_slope * fraction ** limits.progress_factor_exponent,
    )


def _active_step_indices(sample_times: np.ndarray, boundaries: Sequence[float], n_steps: int) -> np.ndarray:
    # First boundary >= t closes the active step; earlier step wins ties and
    # zero-length steps are skipped. Drift past the end maps to the last step.
    idx = np.searchsorted(np.asarray(boundaries[1:]), sample_times, side="left")
    return np.clip(idx, 0, n_steps - 1)


def calculate_progress_curve(settings: FreezeDryerSettings) -> List[SubTimePoint]:
    """Dense, time-ordered sublimation progress curve for a program.

    Args:
        settings: Normalised settings with the drying steps snapshotted in.

    Returns:
        SubTimePoint list covering [0, total program time]. Empty when there
        are no steps, no ice, or no program time to simulate.
    """
    calculation_id = generate_calculation_id(settings)
    steps = list(settings.steps)
    ice_weight = settings.ice_weight

    if not steps or ice_weight <= 0:
        LOGGER.info(
            "Nothing to simulate (ID: %s): %d steps, ice weight %.4f kg",
            calculation_id, len(steps), ice_weight,
        )
        return []

    boundaries = calculate_step_time_points(steps)
    total_time = boundaries[-1]
    if total_time <= 0:
        LOGGER.info("Nothing to simulate (ID: %s): program has no duration", calculation_id)
        return []

    temps = [s.temperature_c for s in steps]
    pressures = [s.pressure_mbar for s in steps]

    heat_model = select_heat_model(settings)
    step_heat_rates = [heat_model.rate_for(t, p) for t, p in zip(temps, pressures)]

    total_energy = ice_weight * LATENT_HEAT_SUBLIMATION  # kJ
    LOGGER.info(
        "Progress curve (ID: %s): %s model, %.1f kJ required over %.2f h",
        calculation_id, heat_model.name, total_energy, total_time,
    )

    n_points = max(DRYING_LIMITS.min_samples, DRYING_LIMITS.samples_per_step * len(steps))
    dt = total_time / (n_points - 1)
    sample_times = np.arange(1, n_points) * dt
    active = _active_step_indices(sample_times, boundaries, len(steps))

    curve = [SubTimePoint(time=0.0, progress=0.0, step=0, temperature=temps[0], pressure=pressures[0])]

    energy = 0.0
    complete = False
    for t, k in zip(sample_times, active):
        k = int(k)
        if not complete:
            current_progress = (energy / total_energy) * 100.0
            effective_rate = step_heat_rates[k] * progress_factor(current_progress)
            energy += effective_rate * dt
            if energy >= total_energy:
                energy = total_energy
                complete = True

        curve.append(
            SubTimePoint(
                time=float(t),
                progress=(energy / total_energy) * 100.0,
                step=k,
                temperature=temps[k],
                pressure=pressures[k],
            )
        )

    last = curve[-1]
    if last.time != total_time:
        final = SubTimePoint(
            time=total_time,
            progress=(energy / total_energy) * 100.0,
            step=len(steps) - 1,
            temperature=temps[-1],
            pressure=pressures[-1],
        )
        if abs(last.time - total_time) <= DRYING_LIMITS.end_time_tolerance:
            curve[-1] = final
        else:
            curve.append(final)

    LOGGER.info(
        "Generated progress curve (ID: %s) with %d points, final progress %.2f%%",
        calculation_id, len(curve), curve[-1].progress,
    )
    return curve


@dataclass(frozen=True)
class DryingResult:
    """Progress curve plus the completion verdict derived from it."""

    points: List[SubTimePoint] = field(default_factory=list)
    total_time: float = 0.0                  # h, configured program time
    completion_time: Optional[float] = None  # h, first time 100 % was reached

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def final_progress(self) -> float:
        return self.points[-1].progress if self.points else 0.0

    @property
    def is_complete(self) -> bool:
        return self.completion_time is not None

    @property
    def is_under_dry(self) -> bool:
        return bool(self.points) and self.final_progress < DRYING_LIMITS.under_dry_threshold

    @property
    def is_over_dry(self) -> bool:
        """Completion was reached before the program ended."""
        return self.completion_time is not None and self.completion_time < self.total_time

    @property
    def over_dry_percent(self) -> float:
        """Program time beyond what drying needed, as % of time-to-completion."""
        if not self.is_over_dry or not self.completion_time:
            return 0.0
        return (self.total_time / self.completion_time - 1.0) * 100.0


def simulate_drying(settings: FreezeDryerSettings) -> DryingResult:
    """Run the integrator and attach completion / over-dry information."""
    points = calculate_progress_curve(settings)
    if not points:
        return DryingResult()

    completion_time = next((p.time for p in points if p.progress >= 100.0), None)
    return DryingResult(points=points, total_time=points[-1].time, completion_time=completion_time)
