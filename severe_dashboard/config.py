"""
Application-wide configuration constants and helper utilities.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


DEFAULT_SOURCE_URL = (
    "https://docs.google.com/spreadsheets/d/1RR-9_QpWa1X8HBFh4pjYndn64DnyGRpBYF0k6VMio9s"
    "/export?format=csv&gid=0"
)
DEFAULT_REQUEST_TIMEOUT = 30.0

# Source sheet headers (exact strings)
COL_DATE = "Fecha"
COL_HOUR = "Horario (UTC)"
COL_LOCALITY = "Localidad"
COL_REGION = "Departamento"
COL_PHENOMENON = "Tipo de fenómeno CORR (Granizo/Ráfaga/Tornado)"
COL_INTENSITY = "Intensidad / Tamaño / Escala"
COL_VERIFIED = "Verificación (Si/No)"
COL_QUALITY = "Nivel de calidad (1-3)"
COL_LATITUDE = "Latitud (grados, 4 dec.)"
COL_LONGITUDE = "Longitud (grados, 4 dec.)"
COL_DESCRIPTION = "Descripción / Información adicional"

LATITUDE_MARKER = "Latitud"
LONGITUDE_MARKER = "Longitud"

# Derived columns
COL_MAIN_TYPE = "main_type"
COL_INTENSITY_VALUE = "intensity_value"

NOT_SAMPLED = "N/S"
VERIFIED_YES = "SI"
UNKNOWN_REGION = "Desconocido"

# Ordered: the first matching keyword set wins.
MAIN_TYPE_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    ("HAIL", ("GRANIZO", "GRA")),
    ("GUST", ("RÁFAGA", "RAF")),
    ("TORNADO", ("TORNADO", "TOR")),
    ("FUNNEL", ("FUNNEL", "FUN")),
    ("WATERSPOUT", ("TROMBA", "TRB")),
]
MAIN_TYPE_OTHER = "OTHER"
MAIN_TYPES: List[str] = [code for code, _ in MAIN_TYPE_KEYWORDS] + [MAIN_TYPE_OTHER]

MAIN_TYPE_LABELS: Dict[str, str] = {
    "HAIL": "Granizo",
    "GUST": "Ráfaga",
    "TORNADO": "Tornado",
    "FUNNEL": "Funnel Cloud",
    "WATERSPOUT": "Tromba",
    "OTHER": "Otros",
}

EXPORT_HEADERS: List[str] = [
    "Fecha",
    "Hora",
    "Localidad",
    "Departamento",
    "Tipo",
    "Intensidad",
    "Verificado",
    "Calidad",
    "Latitud",
    "Longitud",
    "Descripción",
]
EXPORT_FILE_PREFIX = "fenomenos_severos"

LOAD_ERROR_MESSAGE = "No se pudieron cargar los datos. Verifica que el Google Sheet esté publicado."


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("summary", "Resumen"),
    TabConfig("charts", "Gráficos"),
    TabConfig("table", "Tabla de eventos"),
    TabConfig("data_quality", "Calidad de datos"),
]


@dataclass(frozen=True)
class Settings:
    source_url: str
    request_timeout: float
    log_level: str


def get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read a setting from the environment.

    st.secrets is already copied into os.environ by bootstrap_env.
    """
    return os.getenv(name) or default


def get_settings() -> Settings:
    timeout_raw = get_secret("REQUEST_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_REQUEST_TIMEOUT
    except ValueError:
        timeout = DEFAULT_REQUEST_TIMEOUT
    return Settings(
        source_url=get_secret("SHEET_CSV_URL", DEFAULT_SOURCE_URL) or DEFAULT_SOURCE_URL,
        request_timeout=timeout,
        log_level=(get_secret("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
