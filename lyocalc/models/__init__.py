from lyocalc.models.constants import (
    DEFAULT_SETTINGS,
    DEFAULT_STEPS,
    DRYING_LIMITS,
    HEAT_TRANSFER,
    LATENT_HEAT_SUBLIMATION,
)
from lyocalc.models.drying_step import DryingStep, SubTimePoint, new_step
from lyocalc.models.settings import FreezeDryerSettings, normalize_settings

__all__ = [
    "DEFAULT_SETTINGS",
    "DEFAULT_STEPS",
    "DRYING_LIMITS",
    "HEAT_TRANSFER",
    "LATENT_HEAT_SUBLIMATION",
    "DryingStep",
    "SubTimePoint",
    "new_step",
    "FreezeDryerSettings",
    "normalize_settings",
]
