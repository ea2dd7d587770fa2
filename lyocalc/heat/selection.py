"""Pick the heat-input model for a settings value."""

from __future__ import annotations

from lyocalc.heat.area import AreaBasedHeatInput
from lyocalc.heat.base import HeatInputModel
from lyocalc.heat.power import PowerBasedHeatInput
from lyocalc.models.constants import LATENT_HEAT_SUBLIMATION
from lyocalc.models.settings import FreezeDryerSettings


def select_heat_model(settings: FreezeDryerSettings) -> HeatInputModel:
    """Power-based when heater wattage is configured, otherwise area-based."""
    if settings.heating_power_watts > 0:
        return PowerBasedHeatInput(settings.heating_power_watts, settings.number_of_trays)
    return AreaBasedHeatInput(settings.total_shelf_area_m2, settings.heat_input_rate)


def calculate_sublimation_time_hours(ice_weight_kg: float, heat_input_rate: float) -> float:
    """Hours to sublimate ``ice_weight_kg`` at a constant rate; 0 if no heat."""
    if heat_input_rate <= 0:
        return 0.0
    return (ice_weight_kg * LATENT_HEAT_SUBLIMATION) / heat_input_rate
