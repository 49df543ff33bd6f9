from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from severe_dashboard.data.aggregations import (
    count_unique_regions,
    count_verified,
    mean_intensity,
    total_events,
)
from severe_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from severe_dashboard.ui.pages.context import PageContext


def summary_cards(df: pd.DataFrame) -> List[KpiCard]:
    avg = mean_intensity(df)
    return [
        KpiCard(label="Total de eventos", value=total_events(df)),
        KpiCard(label="Eventos verificados", value=count_verified(df)),
        KpiCard(label="Departamentos afectados", value=count_unique_regions(df)),
        KpiCard(
            label="Intensidad promedio",
            value=avg,
            decimals=1,
            help_text="Primer valor numérico de la columna de intensidad; sin datos se muestra N/A.",
        ),
    ]


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Resumen")
    render_kpi_cards(summary_cards(df), columns=4)
    st.caption(
        f"{total_events(df):,} de {total_events(context.state.events):,} eventos coinciden con los filtros."
    )
