"""Progress and terpene boiling-point charts."""

from __future__ import annotations

from typing import List, Sequence

import streamlit as st

from lyocalc.models.drying_step import DryingStep, SubTimePoint
from lyocalc.reporting.chart_data import build_chart_frame, step_temperature_profile
from lyocalc.terpenes.boiling import InvalidPressureError
from lyocalc.terpenes.library import GROUP_LABELS, TERPENE_LIBRARY, get_terpene_groups, get_terpenes, toggle_group_selection


def render_terpene_selector(selected: List[str]) -> List[str]:
    """Multiselect with one toggle button per terpene group."""

    st.markdown("### Terpenes")
    cols = st.columns(len(GROUP_LABELS))
    for col, (group, members) in zip(cols, get_terpene_groups().items()):
        with col:
            if st.button(f"{GROUP_LABELS[group]} ({len(members)})", use_container_width=True):
                selected = toggle_group_selection(selected, group)
                st.session_state.selected_terpenes = selected

    return st.multiselect(
        "Show boiling curves for",
        [t.name for t in TERPENE_LIBRARY],
        default=selected,
    )


def render_drying_chart(
    curve: Sequence[SubTimePoint],
    steps: Sequence[DryingStep],
    selected: List[str],
    display_unit: str,
) -> None:
    """Render shelf temperature against terpene boiling points, and progress."""

    if not curve:
        st.info("Add drying steps and provide the ice weight to see the chart.")
        return

    try:
        df = build_chart_frame(curve, get_terpenes(selected), display_unit)
    except InvalidPressureError as exc:
        st.error(f"Cannot compute boiling points: {exc}")
        return

    st.markdown(f"**Temperature vs. terpene boiling points (°{display_unit})**")
    temp_df = df.set_index("time")[["display_temp"] + selected].rename(
        columns={"display_temp": "Shelf temperature"}
    )
    st.line_chart(temp_df, height=320)

    profile = step_temperature_profile(steps, display_unit)
    with st.expander("Step temperature profile"):
        st.dataframe(profile, hide_index=True, use_container_width=True)

    st.markdown("**Sublimation progress (%)**")
    st.area_chart(df.set_index("time")[["progress"]], height=200)
