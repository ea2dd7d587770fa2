"""Drying program editor with JSON import/export."""

from __future__ import annotations

from typing import Any, List, MutableMapping, Optional

import pandas as pd
import streamlit as st

from lyocalc.models.constants import DRYING_LIMITS, PRESSURE_UNITS, TEMPERATURE_UNITS
from lyocalc.models.drying_step import DryingStep
from lyocalc.storage.step_io import StepImportError, export_steps, import_steps

_COLUMNS = ["temperature", "tempUnit", "pressure", "pressureUnit", "duration"]

# session_state keys
IMPORTED_FILE_KEY = "steps_imported_file_id"
EDITOR_VERSION_KEY = "steps_editor_version"
IMPORT_NOTICE_KEY = "steps_import_notice"


def import_uploaded_steps(uploaded: Any, state: MutableMapping[str, Any]) -> Optional[List[DryingStep]]:
    """Import an uploaded program once per file.

    The uploader keeps its file across reruns, so the id of the last applied
    file is remembered in ``state``. Returns None when nothing is uploaded
    or the file was already applied.

    Raises:
        StepImportError: if the file is not a valid program. The file still
            counts as applied, so the error is reported once.
    """
    if uploaded is None:
        state.pop(IMPORTED_FILE_KEY, None)
        return None
    if state.get(IMPORTED_FILE_KEY) == uploaded.file_id:
        return None

    state[IMPORTED_FILE_KEY] = uploaded.file_id
    try:
        text = uploaded.getvalue().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise StepImportError(f"File is not UTF-8 text: {exc}") from exc
    return import_steps(text)


def render_steps_editor(steps: List[DryingStep]) -> List[DryingStep]:
    """Render the step table and return the edited program."""

    st.markdown("### Drying Steps")

    notice = st.session_state.pop(IMPORT_NOTICE_KEY, None)
    if notice:
        st.success(notice)

    df = pd.DataFrame([s.to_dict() for s in steps], columns=["id"] + _COLUMNS)
    edited = st.data_editor(
        df,
        num_rows="dynamic",
        hide_index=True,
        column_order=_COLUMNS,
        column_config={
            "temperature": st.column_config.NumberColumn("Temperature"),
            "tempUnit": st.column_config.SelectboxColumn("Unit", options=list(TEMPERATURE_UNITS)),
            "pressure": st.column_config.NumberColumn("Pressure", min_value=0.0),
            "pressureUnit": st.column_config.SelectboxColumn("Unit", options=list(PRESSURE_UNITS)),
            "duration": st.column_config.NumberColumn("Duration (min)", min_value=0.0),
        },
        # a new key drops the editor's pending edits after an import
        key=f"steps_editor_{st.session_state.get(EDITOR_VERSION_KEY, 0)}",
    )

    rows = edited.dropna(subset=["temperature", "pressure", "duration"]).to_dict("records")
    if len(rows) > DRYING_LIMITS.max_steps:
        st.warning(f"Only the first {DRYING_LIMITS.max_steps} steps are used.")
        rows = rows[: DRYING_LIMITS.max_steps]
    program = [DryingStep.from_dict({k: v for k, v in r.items() if not pd.isna(v)}) for r in rows]

    c1, c2 = st.columns(2)
    with c1:
        st.download_button(
            "Export steps",
            data=export_steps(program),
            file_name="drying_steps.json",
            mime="application/json",
            use_container_width=True,
        )
    with c2:
        uploaded = st.file_uploader(
            "Import steps", type=["json"], label_visibility="collapsed", key="steps_upload"
        )
        try:
            imported = import_uploaded_steps(uploaded, st.session_state)
        except StepImportError as exc:
            st.error(str(exc))
            imported = None

    if imported is not None:
        st.session_state.steps = imported
        st.session_state[EDITOR_VERSION_KEY] = st.session_state.get(EDITOR_VERSION_KEY, 0) + 1
        st.session_state[IMPORT_NOTICE_KEY] = f"Imported {len(imported)} steps"
        st.rerun()

    return program
