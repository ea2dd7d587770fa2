"""Physical constants, empirical correction factors, and batch defaults."""

from dataclasses import dataclass


# Latent heat of sublimation of ice (kJ/kg)
LATENT_HEAT_SUBLIMATION = 2835.0

# 1 mBar expressed in Torr is 1 / 1.33322
TORR_TO_MBAR = 1.33322

TEMPERATURE_UNITS = ("C", "F")
PRESSURE_UNITS = ("mBar", "Torr")

DEFAULT_TEMPERATURE_UNIT = "C"
DEFAULT_PRESSURE_UNIT = "mBar"


@dataclass(frozen=True)
class HeatTransferConstants:
    """Fixed derating factors for the lumped heat-input model."""

    watts_to_kj_per_hour: float = 3.6

    # Global derating for real-world losses not captured by the model
    adjustment: float = 0.6

    # Stainless mesh between heater shelf and material
    mesh_factor: float = 0.85

    # Legacy area-based estimate (kJ/hr per m2 of shelf)
    base_rate_per_m2: float = 500.0
    conductivity_factor: float = 0.8

    # Efficiency model bounds
    temp_min_c: float = -40.0
    temp_max_c: float = 20.0
    pressure_min_mbar: float = 0.1
    pressure_max_mbar: float = 1000.0
    efficiency_min: float = 0.2
    efficiency_max: float = 0.9


HEAT_TRANSFER = HeatTransferConstants()


@dataclass(frozen=True)
class DryingLimits:
    """Program limits and integrator tuning."""

    max_steps: int = 8

    # Progress curve resolution
    min_samples: int = 200
    samples_per_step: int = 50

    # Diminishing-returns law: max(floor, start - slope * (p/100) ** exponent)
    progress_factor_start: float = 0.7
    progress_factor_slope: float = 0.65
    progress_factor_exponent: float = 0.8
    progress_factor_floor: float = 0.15

    # Final progress (%) below which the batch is considered under-dried
    under_dry_threshold: float = 99.0

    # Tolerance (h) for snapping the last sample onto the program end
    end_time_tolerance: float = 1e-3


DRYING_LIMITS = DryingLimits()


# Batch and equipment defaults (typical lab freeze dryer)
DEFAULT_SETTINGS = {
    "ice_weight": 0.3375,           # kg, derived from the three fields below
    "heat_input_rate": 0.0,         # kJ/hr override, 0 = not set
    "tray_length": 22.36,           # cm
    "tray_width": 22.36,            # cm
    "tray_size_cm2": 22.36 * 22.36,  # cm2 (~500)
    "number_of_trays": 3,
    "hash_per_tray": 0.15,          # kg
    "water_percentage": 75.0,       # %
    "heating_power_watts": 250.0,   # W per tray
}


# Default three-stage program: (temperature C, pressure mBar, duration min)
DEFAULT_STEPS = [
    {"temperature": -30.0, "pressure": 200.0, "duration": 180.0, "tempUnit": "C", "pressureUnit": "mBar"},
    {"temperature": -10.0, "pressure": 150.0, "duration": 180.0, "tempUnit": "C", "pressureUnit": "mBar"},
    {"temperature": 10.0, "pressure": 100.0, "duration": 180.0, "tempUnit": "C", "pressureUnit": "mBar"},
]
