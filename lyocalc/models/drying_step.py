"""Drying program steps and integrator output points."""

from __future__ import annotations

import math
import uuid
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from lyocalc.logger import get_logger
from lyocalc.models.constants import (
    DEFAULT_PRESSURE_UNIT,
    DEFAULT_TEMPERATURE_UNIT,
    DRYING_LIMITS,
    PRESSURE_UNITS,
    TEMPERATURE_UNITS,
)
from lyocalc.models.units import normalize_pressure, normalize_temperature

LOGGER = get_logger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


def _coerce_number(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return number


@dataclass(frozen=True)
class DryingStep:
    """One stage of a freeze-drying program.

    Temperature and pressure are stored as entered, together with their
    units. Use ``temperature_c`` / ``pressure_mbar`` for engine values.
    """

    temperature: float
    pressure: float
    duration: float          # minutes
    temp_unit: str = DEFAULT_TEMPERATURE_UNIT
    pressure_unit: str = DEFAULT_PRESSURE_UNIT
    id: str = field(default_factory=_new_id)

    @property
    def temperature_c(self) -> float:
        return normalize_temperature(self.temperature, self.temp_unit)

    @property
    def pressure_mbar(self) -> float:
        return normalize_pressure(self.pressure, self.pressure_unit)

    @property
    def duration_hours(self) -> float:
        return self.duration / 60.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "temperature": self.temperature,
            "pressure": self.pressure,
            "duration": self.duration,
            "tempUnit": self.temp_unit,
            "pressureUnit": self.pressure_unit,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> DryingStep:
        """Build a step from loosely typed data (JSON, stored configs).

        Numeric fields are coerced with ``float``; non-finite values and a
        negative duration raise ``ValueError``. Unit fields outside the
        allowed enumerations fall back to Celsius / mBar.
        """
        temp_unit = d.get("tempUnit", d.get("temp_unit"))
        if temp_unit not in TEMPERATURE_UNITS:
            if temp_unit is not None:
                LOGGER.warning("Unknown temperature unit %r, using %s", temp_unit, DEFAULT_TEMPERATURE_UNIT)
            temp_unit = DEFAULT_TEMPERATURE_UNIT

        pressure_unit = d.get("pressureUnit", d.get("pressure_unit"))
        if pressure_unit not in PRESSURE_UNITS:
            if pressure_unit is not None:
                LOGGER.warning("Unknown pressure unit %r, using %s", pressure_unit, DEFAULT_PRESSURE_UNIT)
            pressure_unit = DEFAULT_PRESSURE_UNIT

        duration = _coerce_number(d.get("duration"), "duration")
        if duration < 0:
            raise ValueError(f"duration must not be negative, got {duration:g}")

        step_id = d.get("id")
        return cls(
            temperature=_coerce_number(d.get("temperature"), "temperature"),
            pressure=_coerce_number(d.get("pressure"), "pressure"),
            duration=duration,
            temp_unit=temp_unit,
            pressure_unit=pressure_unit,
            id=str(step_id) if step_id not in (None, "") else _new_id(),
        )


def new_step(
    temperature: float,
    pressure: float,
    duration: float,
    temp_unit: str = DEFAULT_TEMPERATURE_UNIT,
    pressure_unit: str = DEFAULT_PRESSURE_UNIT,
) -> DryingStep:
    """Create a step with a fresh id."""
    return DryingStep(
        temperature=float(temperature),
        pressure=float(pressure),
        duration=float(duration),
        temp_unit=temp_unit,
        pressure_unit=pressure_unit,
    )


def validate_program(steps: Sequence[DryingStep]) -> None:
    """Reject programs longer than the supported number of steps."""
    if len(steps) > DRYING_LIMITS.max_steps:
        raise ValueError(
            f"A drying program holds at most {DRYING_LIMITS.max_steps} steps, got {len(steps)}"
        )


def parse_steps(raw_steps: Iterable[Any]) -> List[DryingStep]:
    """Turn a list of step dicts (or steps) into ``DryingStep`` values."""
    steps = [s if isinstance(s, DryingStep) else DryingStep.from_dict(s) for s in raw_steps]
    validate_program(steps)
    return steps


@dataclass(frozen=True)
class SubTimePoint:
    """One sample of the sublimation progress curve."""

    time: float          # hours since program start
    progress: float      # % of ice sublimated, capped at 100
    step: int            # index of the active drying step
    temperature: float   # deg C
    pressure: float      # mBar

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
