"""
Reusable helpers for rendering the events table and its CSV download.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

import pandas as pd
import streamlit as st

from severe_dashboard.data.export import EmptyExportError, build_export_csv, export_file_name


def render_table(
    df: pd.DataFrame,
    height: int = 600,
    show_index: bool = False,
) -> None:
    if df.empty:
        st.info("No hay eventos para mostrar.")
        return

    st.dataframe(
        df,
        use_container_width=True,
        height=height,
        hide_index=not show_index,
    )


def render_export(df: pd.DataFrame, today: Optional[dt.date] = None) -> None:
    """Offer the filtered events as a CSV download, or warn when there are none."""
    try:
        csv_text = build_export_csv(df)
    except EmptyExportError as exc:
        st.warning(str(exc))
        return

    st.download_button(
        "Exportar CSV",
        data=csv_text.encode("utf-8"),
        file_name=export_file_name(today),
        mime="text/csv",
    )
