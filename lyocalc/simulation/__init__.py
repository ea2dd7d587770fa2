from lyocalc.simulation.sublimation import (
    DryingResult,
    calculate_progress_curve,
    calculate_step_time_points,
    simulate_drying,
)

__all__ = ["DryingResult", "calculate_progress_curve", "calculate_step_time_points", "simulate_drying"]
