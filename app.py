"""Freeze-Drying Terpene Calculator.

Simulates ice sublimation over a multi-step temperature/pressure program and
shows when the selected terpenes would boil off under the chamber conditions.
"""

from __future__ import annotations

import streamlit as st

from lyocalc.logger import get_logger
from lyocalc.models import DEFAULT_STEPS, normalize_settings
from lyocalc.models.drying_step import parse_steps
from lyocalc.reporting import summarize_drying
from lyocalc.simulation import simulate_drying
from lyocalc.storage import ConfigurationStore
from lyocalc.terpenes import DEFAULT_SELECTION
from lyocalc.ui.charts import render_drying_chart, render_terpene_selector
from lyocalc.ui.configs import render_saved_configs
from lyocalc.ui.sidebar import render_sidebar
from lyocalc.ui.steps import render_steps_editor
from lyocalc.ui.summary import render_risk, render_summary

LOGGER = get_logger("lyocalc.app")


# ---------------------------------------------------------------------------
# Session state initialization
# ---------------------------------------------------------------------------

def _init_session() -> None:
    """Set up session state on first load."""
    if "steps" not in st.session_state:
        st.session_state.steps = parse_steps(DEFAULT_STEPS)
    if "settings" not in st.session_state:
        st.session_state.settings = normalize_settings({}, st.session_state.steps)
    if "selected_terpenes" not in st.session_state:
        st.session_state.selected_terpenes = list(DEFAULT_SELECTION)
    if "store" not in st.session_state:
        st.session_state.store = ConfigurationStore()


# ---------------------------------------------------------------------------
# Main app
# ---------------------------------------------------------------------------

def main() -> None:
    st.set_page_config(
        page_title="Freeze-Drying Terpene Calculator",
        page_icon="❄️",
        layout="wide",
    )

    _init_session()

    st.markdown(
        "# Freeze-Drying Terpene Calculator\n"
        "*Sublimation progress and terpene boil-off risk for a multi-step drying program*"
    )

    settings, display_unit = render_sidebar(st.session_state.settings)

    col_left, col_right = st.columns([3, 2])

    with col_left:
        steps = render_steps_editor(st.session_state.steps)

    settings = normalize_settings(settings.to_dict(), steps)
    st.session_state.settings = settings
    st.session_state.steps = steps

    with col_right:
        loaded = render_saved_configs(st.session_state.store, None, settings, steps)
        if loaded is not None:
            st.session_state.settings, st.session_state.steps = loaded
            LOGGER.info("Loaded saved configuration with %d steps", len(loaded[1]))
            st.rerun()

    st.divider()

    result = simulate_drying(settings)
    render_summary(summarize_drying(result, display_unit))

    st.divider()

    selected = render_terpene_selector(st.session_state.selected_terpenes)
    st.session_state.selected_terpenes = selected

    chart_col, risk_col = st.columns([3, 1])
    with chart_col:
        render_drying_chart(result.points, steps, selected, display_unit)
    with risk_col:
        render_risk(result.points, selected, display_unit)


if __name__ == "__main__":
    main()
