"""Batch and equipment settings for one simulation run.

``normalize_settings`` is the single entry boundary: values loaded from a
form, a saved configuration, or JSON all pass through it and come out as a
fully populated, typed ``FreezeDryerSettings``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from lyocalc.logger import get_logger
from lyocalc.models.constants import DEFAULT_SETTINGS
from lyocalc.models.drying_step import DryingStep, parse_steps

LOGGER = get_logger(__name__)

# snake_case field -> camelCase key used in stored/JSON settings
_CAMEL_KEYS = {
    "ice_weight": "iceWeight",
    "heat_input_rate": "heatInputRate",
    "tray_size_cm2": "traySizeCm2",
    "tray_length": "trayLength",
    "tray_width": "trayWidth",
    "number_of_trays": "numberOfTrays",
    "hash_per_tray": "hashPerTray",
    "water_percentage": "waterPercentage",
    "heating_power_watts": "heatingPowerWatts",
    "chamber_volume": "chamberVolume",
    "condenser_capacity": "condenserCapacity",
}

_ICE_INPUTS = ("hash_per_tray", "number_of_trays", "water_percentage")
_TRAY_INPUTS = ("tray_length", "tray_width")


def calculate_water_weight(hash_weight_kg: float, water_percentage: float) -> float:
    """Mass of water (kg) held in ``hash_weight_kg`` of material."""
    return float(hash_weight_kg) * (float(water_percentage) / 100.0)


def derive_ice_weight(hash_per_tray: float, number_of_trays: int, water_percentage: float) -> float:
    return calculate_water_weight(hash_per_tray * number_of_trays, water_percentage)


@dataclass(frozen=True)
class FreezeDryerSettings:
    """Fully populated settings for a simulation run."""

    steps: Tuple[DryingStep, ...] = ()
    ice_weight: float = DEFAULT_SETTINGS["ice_weight"]                # kg
    heat_input_rate: float = DEFAULT_SETTINGS["heat_input_rate"]      # kJ/hr, 0 = not set
    tray_size_cm2: float = DEFAULT_SETTINGS["tray_size_cm2"]          # cm2
    tray_length: float = DEFAULT_SETTINGS["tray_length"]              # cm
    tray_width: float = DEFAULT_SETTINGS["tray_width"]                # cm
    number_of_trays: int = DEFAULT_SETTINGS["number_of_trays"]
    hash_per_tray: float = DEFAULT_SETTINGS["hash_per_tray"]          # kg
    water_percentage: float = DEFAULT_SETTINGS["water_percentage"]    # %
    heating_power_watts: float = DEFAULT_SETTINGS["heating_power_watts"]  # W per tray
    chamber_volume: Optional[float] = None                            # litres
    condenser_capacity: Optional[float] = None                        # kg of ice

    @property
    def total_shelf_area_m2(self) -> float:
        return (self.tray_size_cm2 / 10000.0) * self.number_of_trays

    @property
    def derived_ice_weight(self) -> float:
        return derive_ice_weight(self.hash_per_tray, self.number_of_trays, self.water_percentage)

    def with_updates(self, **changes: Any) -> FreezeDryerSettings:
        """Return a copy with ``changes`` applied and derived fields refreshed.

        Changing any ice-weight input recomputes ``ice_weight``; changing the
        tray length or width recomputes ``tray_size_cm2``.
        """
        if "steps" in changes:
            changes["steps"] = tuple(parse_steps(changes["steps"]))
        changed = {k for k, v in changes.items() if getattr(self, k) != v}
        updated = replace(self, **changes)
        if changed.intersection(_ICE_INPUTS):
            updated = replace(updated, ice_weight=updated.derived_ice_weight)
        if changed.intersection(_TRAY_INPUTS):
            updated = replace(updated, tray_size_cm2=updated.tray_length * updated.tray_width)
        return updated

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe camelCase copy of the settings, steps included."""
        d: Dict[str, Any] = {"steps": [s.to_dict() for s in self.steps]}
        for name, key in _CAMEL_KEYS.items():
            value = getattr(self, name)
            if value is not None:
                d[key] = value
        return d


def _lookup(raw: Mapping[str, Any], name: str) -> Any:
    if name in raw:
        return raw[name]
    return raw.get(_CAMEL_KEYS[name])


def _number_or_default(raw: Mapping[str, Any], name: str, default: Optional[float]) -> Optional[float]:
    value = _lookup(raw, name)
    if value is None or value == "" or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        LOGGER.warning("Ignoring non-numeric %s=%r, using default %s", name, value, default)
        return default
    if not math.isfinite(number):
        LOGGER.warning("Ignoring non-finite %s=%r, using default %s", name, value, default)
        return default
    return number


def normalize_settings(
    raw: Optional[Mapping[str, Any]] = None,
    steps: Optional[Iterable[Any]] = None,
) -> FreezeDryerSettings:
    """Coerce loosely typed settings into a ``FreezeDryerSettings``.

    Args:
        raw: Settings mapping with camelCase or snake_case keys. Values may
            be strings (e.g. after a JSON round trip); missing, empty, or
            non-numeric values take their defaults.
        steps: Step dicts or ``DryingStep`` values. When omitted, the
            ``steps`` entry of ``raw`` is used.

    Returns:
        A settings value whose steps are snapshotted into a tuple.
    """
    if isinstance(raw, FreezeDryerSettings):
        raw = raw.to_dict()
    raw = dict(raw or {})

    if steps is None:
        steps = raw.get("steps") or []
    parsed_steps = tuple(parse_steps(steps))

    values: Dict[str, Any] = {}
    for name in ("heat_input_rate", "hash_per_tray", "heating_power_watts"):
        values[name] = max(0.0, _number_or_default(raw, name, DEFAULT_SETTINGS[name]))

    for name in ("tray_length", "tray_width"):
        number = _number_or_default(raw, name, DEFAULT_SETTINGS[name])
        values[name] = number if number > 0 else DEFAULT_SETTINGS[name]

    water = _number_or_default(raw, "water_percentage", DEFAULT_SETTINGS["water_percentage"])
    values["water_percentage"] = min(100.0, max(0.0, water))

    trays = _number_or_default(raw, "number_of_trays", DEFAULT_SETTINGS["number_of_trays"])
    values["number_of_trays"] = max(1, int(round(trays)))

    # Tray area follows length x width unless only the area was supplied
    has_dims = _lookup(raw, "tray_length") is not None or _lookup(raw, "tray_width") is not None
    tray_size = _number_or_default(raw, "tray_size_cm2", None)
    if has_dims or tray_size is None or tray_size <= 0:
        tray_size = values["tray_length"] * values["tray_width"]
    values["tray_size_cm2"] = tray_size

    derived = derive_ice_weight(
        values["hash_per_tray"], values["number_of_trays"], values["water_percentage"]
    )
    ice_weight = _number_or_default(raw, "ice_weight", None)
    if ice_weight is None:
        ice_weight = derived
    elif not math.isclose(ice_weight, derived, rel_tol=1e-9, abs_tol=1e-12):
        LOGGER.warning(
            "Explicit ice weight %.5f kg differs from derived %.5f kg (hash %.3f kg x %d trays x %.1f%%)",
            ice_weight, derived, values["hash_per_tray"], values["number_of_trays"],
            values["water_percentage"],
        )
    values["ice_weight"] = ice_weight

    for name in ("chamber_volume", "condenser_capacity"):
        values[name] = _number_or_default(raw, name, None)

    return FreezeDryerSettings(steps=parsed_steps, **values)
