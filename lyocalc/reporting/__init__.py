from lyocalc.reporting.summary import DryingSummary, summarize_drying
from lyocalc.reporting.chart_data import build_chart_frame, step_temperature_profile

__all__ = ["DryingSummary", "summarize_drying", "build_chart_frame", "step_temperature_profile"]
