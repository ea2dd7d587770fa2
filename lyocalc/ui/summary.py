"""Result summary and terpene risk panel."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import streamlit as st

from lyocalc.models.drying_step import SubTimePoint
from lyocalc.reporting.summary import DryingSummary
from lyocalc.risk.terpene_risk import evaluate_terpene_risk, first_risk_times
from lyocalc.terpenes.boiling import InvalidPressureError
from lyocalc.terpenes.library import get_terpenes


def render_summary(summary: Optional[DryingSummary]) -> None:
    """Render the headline metrics for a calculation."""

    st.markdown("### Drying Summary")
    if summary is None:
        st.caption("Add drying steps and provide the ice weight to see results.")
        return

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Time", summary.formatted_total_time)
    c2.metric("Completion", f"{round(summary.completion_percent)}%", delta=summary.status, delta_color="off")
    c3.metric("Max Temperature", f"{round(summary.max_temperature)}°{summary.display_unit}")
    c4.metric("Min Pressure", f"{summary.min_pressure:.1f} mBar")

    st.progress(min(100, int(summary.completion_percent)) / 100)
    if summary.is_under_dry:
        st.warning("The program ends before all ice has sublimated. Extend the final step.")
    elif summary.is_over_dry:
        st.info(
            f"Drying completes after {summary.completion_time:.1f} h; the program runs "
            f"{summary.over_dry_percent:.0f}% longer than required."
        )


def render_risk(curve: Sequence[SubTimePoint], selected: List[str], display_unit: str) -> None:
    """List selected terpenes that would boil off during the program."""

    st.markdown("### Terpene Risk")
    if not curve or not selected:
        st.caption("No terpenes selected.")
        return

    terpenes = get_terpenes(selected)
    try:
        first: Dict[str, Optional[float]] = first_risk_times(curve, terpenes)
        final = evaluate_terpene_risk(curve[-1], terpenes, display_unit)
    except InvalidPressureError as exc:
        st.error(f"Cannot evaluate risk: {exc}")
        return

    at_risk = {name: t for name, t in first.items() if t is not None}
    if not at_risk:
        st.success("No selected terpene reaches its boiling point.")
        return

    for name, t in sorted(at_risk.items(), key=lambda kv: kv[1]):
        bp = final.boiling_points[name]
        st.markdown(f":orange[**{name}**] at risk from {t:.1f} h (boils at {bp:.1f}°{display_unit} at final pressure)")
