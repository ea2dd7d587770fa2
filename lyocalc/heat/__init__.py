from lyocalc.heat.base import HeatInputModel
from lyocalc.heat.power import PowerBasedHeatInput, calculate_heat_input_from_power
from lyocalc.heat.area import AreaBasedHeatInput, estimate_heat_input_rate
from lyocalc.heat.efficiency import estimate_heat_transfer_efficiency
from lyocalc.heat.selection import select_heat_model, calculate_sublimation_time_hours

__all__ = [
    "HeatInputModel",
    "PowerBasedHeatInput",
    "AreaBasedHeatInput",
    "calculate_heat_input_from_power",
    "estimate_heat_input_rate",
    "estimate_heat_transfer_efficiency",
    "select_heat_model",
    "calculate_sublimation_time_hours",
]
