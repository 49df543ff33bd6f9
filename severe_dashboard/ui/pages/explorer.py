from __future__ import annotations

import pandas as pd
import streamlit as st

from severe_dashboard.config import (
    COL_DATE,
    COL_HOUR,
    COL_INTENSITY,
    COL_LOCALITY,
    COL_MAIN_TYPE,
    COL_QUALITY,
    COL_REGION,
    COL_VERIFIED,
)
from severe_dashboard.ui.components.formatting import display_value, format_date_es
from severe_dashboard.ui.components.tables import render_export, render_table
from severe_dashboard.ui.pages.context import PageContext


TABLE_COLUMNS = [
    ("Fecha", COL_DATE),
    ("Hora (UTC)", COL_HOUR),
    ("Localidad", COL_LOCALITY),
    ("Departamento", COL_REGION),
    ("Tipo", COL_MAIN_TYPE),
    ("Intensidad", COL_INTENSITY),
    ("Verificado", COL_VERIFIED),
    ("Calidad", COL_QUALITY),
]


def build_table(df: pd.DataFrame) -> pd.DataFrame:
    """Display frame for the events table; missing cells read ``N/A``."""
    table = pd.DataFrame(index=df.index)
    for label, column in TABLE_COLUMNS:
        source = df[column] if column in df else pd.Series([None] * len(df), index=df.index)
        formatter = format_date_es if column == COL_DATE else display_value
        table[label] = [formatter(value) for value in source]
    return table


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Tabla de eventos")
    render_table(build_table(df))
    st.markdown("#### Exportar")
    render_export(df)
