"""Legacy heat input estimated from total shelf area."""

from __future__ import annotations

from lyocalc.heat.base import HeatInputModel
from lyocalc.heat.efficiency import estimate_heat_transfer_efficiency
from lyocalc.models.constants import HEAT_TRANSFER


def estimate_heat_input_rate(
    temperature_c: float,
    pressure_mbar: float,
    total_shelf_area_m2: float = 0.5,
) -> float:
    """Heat-input rate (kJ/hr) from shelf area at reference conditions."""
    efficiency = estimate_heat_transfer_efficiency(temperature_c, pressure_mbar)
    return (
        HEAT_TRANSFER.base_rate_per_m2
        * efficiency
        * HEAT_TRANSFER.conductivity_factor
        * HEAT_TRANSFER.mesh_factor
        * total_shelf_area_m2
    )


class AreaBasedHeatInput(HeatInputModel):
    """Used when no heater wattage is configured.

    A positive ``heat_input_rate`` override wins over the area estimate.
    """

    def __init__(self, total_shelf_area_m2: float, heat_input_rate: float = 0.0):
        self.total_shelf_area_m2 = total_shelf_area_m2
        self.heat_input_rate = heat_input_rate

    @property
    def name(self) -> str:
        return "Area-based"

    def rate_for(self, temperature_c: float, pressure_mbar: float) -> float:
        if self.heat_input_rate > 0:
            return self.heat_input_rate
        return estimate_heat_input_rate(temperature_c, pressure_mbar, self.total_shelf_area_m2)
