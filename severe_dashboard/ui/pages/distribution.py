from __future__ import annotations

import pandas as pd
import streamlit as st

from severe_dashboard.data.aggregations import (
    counts_by_type,
    events_per_month,
    events_per_year,
    top_regions,
)
from severe_dashboard.ui.components.charts import bar_chart, donut_chart, line_chart, render_plotly
from severe_dashboard.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Gráficos")
    if df.empty:
        st.info("No hay eventos para el filtro actual.")
        return

    type_col, month_col = st.columns(2)
    with type_col:
        by_type = counts_by_type(df)
        render_plotly(donut_chart(by_type, names="Etiqueta", values="Eventos", title="Distribución por tipo"))

    with month_col:
        per_month = events_per_month(df)
        if per_month.empty:
            st.info("Ningún evento filtrado tiene fecha.")
        else:
            fig = bar_chart(per_month, x="Mes", y="Eventos", title="Eventos por mes", yaxis_title="Eventos")
            fig.update_xaxes(type="category")
            render_plotly(fig)

    region_col, year_col = st.columns(2)
    with region_col:
        regions = top_regions(df, n=10)
        fig = bar_chart(
            regions,
            x="Eventos",
            y="Departamento",
            orientation="h",
            title="Top 10 departamentos",
            text_auto=True,
        )
        fig.update_layout(yaxis=dict(categoryorder="total ascending"))
        render_plotly(fig)

    with year_col:
        per_year = events_per_year(df)
        if per_year.empty:
            st.info("Ningún evento filtrado tiene fecha.")
        else:
            fig = line_chart(per_year, x="Año", y="Eventos", title="Eventos por año", yaxis_title="Eventos")
            fig.update_xaxes(type="category")
            render_plotly(fig)
