"""Freeze-drying sublimation and terpene boil-off simulator."""

__version__ = "0.1.0"
