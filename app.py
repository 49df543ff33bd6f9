import severe_dashboard.bootstrap_env  # must be first to set env/secrets
import logging

import streamlit as st

from severe_dashboard.config import LOAD_ERROR_MESSAGE, MAIN_TYPE_LABELS, TABS
from severe_dashboard.data.filters import DEFAULT_FILTERS, EventFilters, serialize_filters
from severe_dashboard.data.loader import SourceUnavailableError, load_events
from severe_dashboard.state import DashboardState, dispatch
from severe_dashboard.ui.components.formatting import format_number
from severe_dashboard.ui.layout import setup_page, sidebar_filters_ui
from severe_dashboard.ui.pages import data_quality, distribution, explorer, overview
from severe_dashboard.ui.pages.context import PageContext

logger = logging.getLogger("severe_dashboard.app")

PAGE_RENDERERS = {
    "summary": overview.render,
    "charts": distribution.render,
    "table": explorer.render,
    "data_quality": data_quality.render,
}


def _active_filter_summary(filters: EventFilters, total_rows: int) -> None:
    badges = []
    if filters.start_date:
        badges.append(f"Desde: {filters.start_date:%d/%m/%Y}")
    if filters.end_date:
        badges.append(f"Hasta: {filters.end_date:%d/%m/%Y}")
    if filters.main_type:
        badges.append(f"Tipo: {MAIN_TYPE_LABELS.get(filters.main_type, filters.main_type)}")
    if filters.region:
        badges.append(f"Departamento: {filters.region}")

    summary_text = "Filtros activos: " + " | ".join(badges) if badges else "Filtros activos: todos los datos"
    st.markdown(f"**{summary_text}**")
    st.caption(f"Mostrando {format_number(total_rows, 0)} eventos.")


def main() -> None:
    setup_page()
    st.title("Dashboard de Fenómenos Meteorológicos Severos")

    try:
        with st.spinner("Cargando datos..."):
            events = load_events()
    except SourceUnavailableError as exc:
        logger.error("Error al cargar datos: %s", exc)
        st.error(LOAD_ERROR_MESSAGE)
        return

    state = DashboardState(events=events, filters=st.session_state.get("sw_filters", DEFAULT_FILTERS))
    command = sidebar_filters_ui(events)
    if command is not None:
        state = dispatch(state, command)
        st.session_state["sw_filters"] = state.filters
        logger.debug("Filters applied: %s", serialize_filters(state.filters))

    _active_filter_summary(state.filters, len(state.filtered))

    context = PageContext(state=state)
    streamlit_tabs = st.tabs([tab.label for tab in TABS])
    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(state.filtered, context)


if __name__ == "__main__":
    main()
