"""
Layout helpers for the Streamlit application (page setup and sidebar filters).
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

import pandas as pd
import streamlit as st

from severe_dashboard.config import MAIN_TYPE_LABELS, MAIN_TYPES
from severe_dashboard.data.filters import EventFilters, available_regions
from severe_dashboard.state import ApplyFilters, ClearFilters, Command

ALL_OPTION = ""
FILTER_KEYS = {
    "start": "sw_start_date",
    "end": "sw_end_date",
    "type": "sw_main_type",
    "region": "sw_region",
}


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Fenómenos Meteorológicos Severos",
        layout="wide",
        page_icon=":cloud_with_lightning_and_rain:",
    )


def default_date_range(today: Optional[dt.date] = None) -> tuple[dt.date, dt.date]:
    """One year back from today, as the filter form starts out."""
    today = today or dt.date.today()
    try:
        start = today.replace(year=today.year - 1)
    except ValueError:
        # 29 February
        start = today.replace(year=today.year - 1, day=28)
    return start, today


def _init_filter_state() -> None:
    if FILTER_KEYS["start"] in st.session_state:
        return
    start, end = default_date_range()
    st.session_state[FILTER_KEYS["start"]] = start
    st.session_state[FILTER_KEYS["end"]] = end
    st.session_state[FILTER_KEYS["type"]] = ALL_OPTION
    st.session_state[FILTER_KEYS["region"]] = ALL_OPTION


def _reset_filter_inputs() -> None:
    # Runs as a button callback, before widgets are rebuilt
    st.session_state[FILTER_KEYS["start"]] = None
    st.session_state[FILTER_KEYS["end"]] = None
    st.session_state[FILTER_KEYS["type"]] = ALL_OPTION
    st.session_state[FILTER_KEYS["region"]] = ALL_OPTION


def _type_label(code: str) -> str:
    return "Todos" if code == ALL_OPTION else MAIN_TYPE_LABELS.get(code, code)


def _region_label(region: str) -> str:
    return "Todos" if region == ALL_OPTION else region


def filters_from_inputs(
    start: Optional[dt.date],
    end: Optional[dt.date],
    main_type: str,
    region: str,
) -> EventFilters:
    return EventFilters(
        start_date=start or None,
        end_date=end or None,
        main_type=main_type or None,
        region=region or None,
    )


def sidebar_filters_ui(df: pd.DataFrame) -> Optional[Command]:
    """
    Render the sidebar filter controls and return the command the user
    triggered on this run, if any.
    """
    _init_filter_state()
    st.sidebar.header("Filtros")

    regions: List[str] = [ALL_OPTION] + available_regions(df)
    if st.session_state.get(FILTER_KEYS["region"]) not in regions:
        st.session_state[FILTER_KEYS["region"]] = ALL_OPTION

    with st.sidebar.form("sw_filters_form"):
        col_start, col_end = st.columns(2)
        with col_start:
            st.date_input("Fecha inicio", key=FILTER_KEYS["start"], format="DD/MM/YYYY")
        with col_end:
            st.date_input("Fecha fin", key=FILTER_KEYS["end"], format="DD/MM/YYYY")
        st.selectbox(
            "Tipo de fenómeno",
            options=[ALL_OPTION] + MAIN_TYPES,
            format_func=_type_label,
            key=FILTER_KEYS["type"],
        )
        st.selectbox(
            "Departamento",
            options=regions,
            format_func=_region_label,
            key=FILTER_KEYS["region"],
        )
        submitted = st.form_submit_button("Aplicar filtros", type="primary")

    cleared = st.sidebar.button("Limpiar filtros", on_click=_reset_filter_inputs)

    if cleared:
        return ClearFilters()
    if submitted:
        start = st.session_state.get(FILTER_KEYS["start"])
        end = st.session_state.get(FILTER_KEYS["end"])
        if start is not None and end is not None and start > end:
            st.sidebar.warning("La fecha de inicio es posterior a la fecha fin. Se intercambian.")
            start, end = end, start
        return ApplyFilters(
            filters_from_inputs(
                start,
                end,
                st.session_state.get(FILTER_KEYS["type"], ALL_OPTION),
                st.session_state.get(FILTER_KEYS["region"], ALL_OPTION),
            )
        )
    return None
