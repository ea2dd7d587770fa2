"""Sidebar: batch, tray and heater settings."""

from __future__ import annotations

from typing import Tuple

import streamlit as st

from lyocalc.models.settings import FreezeDryerSettings


def render_sidebar(settings: FreezeDryerSettings) -> Tuple[FreezeDryerSettings, str]:
    """Render the settings sidebar and return (settings, display_unit)."""

    st.sidebar.header("Display")
    display_unit = st.sidebar.radio("Temperature unit", ["C", "F"], horizontal=True)

    st.sidebar.divider()
    st.sidebar.header("Batch")

    number_of_trays = st.sidebar.number_input(
        "Number of trays", min_value=1, max_value=10, value=int(settings.number_of_trays), step=1
    )
    hash_per_tray = st.sidebar.number_input(
        "Material per tray (kg)", min_value=0.0, value=float(settings.hash_per_tray), step=0.01, format="%.3f"
    )
    water_percentage = st.sidebar.slider(
        "Water content (%)", 0.0, 100.0, float(settings.water_percentage), 1.0
    )

    st.sidebar.header("Equipment")
    tray_length = st.sidebar.number_input(
        "Tray length (cm)", min_value=1.0, value=float(settings.tray_length), step=0.5
    )
    tray_width = st.sidebar.number_input(
        "Tray width (cm)", min_value=1.0, value=float(settings.tray_width), step=0.5
    )
    heating_power_watts = st.sidebar.number_input(
        "Heater power per tray (W)",
        min_value=0.0,
        value=float(settings.heating_power_watts),
        step=10.0,
        help="Set to 0 to use the shelf-area estimate instead.",
    )

    updated = settings.with_updates(
        number_of_trays=int(number_of_trays),
        hash_per_tray=float(hash_per_tray),
        water_percentage=float(water_percentage),
        tray_length=float(tray_length),
        tray_width=float(tray_width),
        heating_power_watts=float(heating_power_watts),
    )

    st.sidebar.markdown(
        f"Ice to remove: **{updated.ice_weight:.4f} kg** | "
        f"Shelf area: **{updated.total_shelf_area_m2:.3f} m²**"
    )
    return updated, display_unit
