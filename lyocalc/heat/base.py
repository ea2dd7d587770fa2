"""Abstract heat-input model interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class HeatInputModel(ABC):
    """Estimates the chamber heat-input rate for one drying step."""

    @abstractmethod
    def rate_for(self, temperature_c: float, pressure_mbar: float) -> float:
        """Compute the heat-input rate at the given shelf conditions.

        Returns:
            Heat-input rate in kJ/hr.
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable model name."""
