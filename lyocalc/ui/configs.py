"""Saved configuration panel."""

from __future__ import annotations

from typing import List, Optional, Tuple

import streamlit as st

from lyocalc.models.drying_step import DryingStep
from lyocalc.models.settings import FreezeDryerSettings
from lyocalc.storage.config_store import ConfigurationStore


def render_saved_configs(
    store: ConfigurationStore,
    owner: Optional[str],
    settings: FreezeDryerSettings,
    steps: List[DryingStep],
) -> Optional[Tuple[FreezeDryerSettings, List[DryingStep]]]:
    """Save, load and delete named configurations.

    Returns:
        (settings, steps) when a configuration was loaded, else None.
    """

    st.markdown("### Saved Configurations")

    name = st.text_input("Configuration name", key="config_name")
    if st.button("Save current settings", use_container_width=True):
        try:
            store.save_configuration(owner, name, settings, steps)
            st.success(f"Saved '{name.strip()}'")
        except ValueError as exc:
            st.error(str(exc))

    records = store.list_configurations(owner)
    if not records:
        st.caption("No saved configurations yet.")
        return None

    labels = {r["id"]: f"{r['name']} ({r['updatedAt'][:10]})" for r in records}
    chosen = st.selectbox("Saved", list(labels), format_func=labels.get)

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Load", use_container_width=True):
            try:
                return store.load_configuration(owner, chosen)
            except ValueError as exc:
                st.error(f"Could not load configuration: {exc}")
    with c2:
        if st.button("Delete", use_container_width=True):
            store.delete_configuration(owner, chosen)
            st.rerun()
    return None
