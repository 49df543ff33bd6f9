from __future__ import annotations

from typing import Dict, List

import pandas as pd
import streamlit as st

from severe_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from severe_dashboard.ui.pages.context import PageContext


def _share(count: int, total: int) -> float:
    if total == 0:
        return 0.0
    return float(count / total * 100)


def quality_cards(diagnostics: Dict[str, object]) -> List[KpiCard]:
    total = int(diagnostics.get("row_count", 0) or 0)
    labels = [
        ("missing_dates", "Sin fecha válida"),
        ("missing_coordinates", "Sin coordenadas"),
        ("missing_intensity", "Sin intensidad numérica"),
        ("unclassified", "Tipo sin clasificar"),
    ]
    cards = []
    for key, label in labels:
        share = _share(int(diagnostics.get(key, 0) or 0), total)
        cards.append(KpiCard(label=label, value=share, value_display=f"{share:.1f}%"))
    return cards


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Calidad de datos")
    diagnostics = context.state.events.attrs.get("diagnostics", {})
    if not diagnostics:
        st.info("No hay diagnósticos disponibles.")
        return

    render_kpi_cards(quality_cards(diagnostics), columns=4)

    st.markdown("#### Resumen de lectura")
    for key, value in diagnostics.items():
        if key == "headers":
            continue
        st.write(f"- **{key.replace('_', ' ').title()}**: {value}")
    with st.expander("Columnas de la hoja"):
        st.write(", ".join(str(h) for h in diagnostics.get("headers", [])))

    st.markdown("#### Definiciones")
    st.write(
        """
        - **Fecha**: se interpreta como `YYYYMMDD`; otros formatos quedan sin fecha y no se excluyen por el filtro de fechas.
        - **Tipo**: primera coincidencia en el orden Granizo, Ráfaga, Tornado, Funnel, Tromba; sin coincidencia es Otros.
        - **Intensidad**: primer número del texto (`2 - 4` es 2, `F1` es 1); `N/S` o vacío no cuenta para el promedio.
        """
    )
