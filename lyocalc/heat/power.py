"""Heat input derived from heating-element wattage."""

from __future__ import annotations

from lyocalc.heat.base import HeatInputModel
from lyocalc.heat.efficiency import estimate_heat_transfer_efficiency
from lyocalc.models.constants import HEAT_TRANSFER


def calculate_heat_input_from_power(
    heating_power_watts: float,
    number_of_trays: int = 1,
    efficiency: float = 0.85,
) -> float:
    """Heat-input rate (kJ/hr) delivered by per-tray heaters.

    rate = W x trays x 3.6 x efficiency x adjustment x mesh_factor
    """
    total_power = heating_power_watts * number_of_trays
    return (
        total_power
        * HEAT_TRANSFER.watts_to_kj_per_hour
        * efficiency
        * HEAT_TRANSFER.adjustment
        * HEAT_TRANSFER.mesh_factor
    )


class PowerBasedHeatInput(HeatInputModel):
    """Heater wattage scaled by the condition-dependent efficiency."""

    def __init__(self, heating_power_watts: float, number_of_trays: int = 1):
        self.heating_power_watts = heating_power_watts
        self.number_of_trays = number_of_trays

    @property
    def name(self) -> str:
        return "Power-based"

    def rate_for(self, temperature_c: float, pressure_mbar: float) -> float:
        efficiency = estimate_heat_transfer_efficiency(temperature_c, pressure_mbar)
        return calculate_heat_input_from_power(
            self.heating_power_watts, self.number_of_trays, efficiency
        )
