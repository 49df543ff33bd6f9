"""
CSV export of the filtered events in the fixed 11-column download layout.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import List, Optional

import pandas as pd

from severe_dashboard.config import (
    COL_DATE,
    COL_DESCRIPTION,
    COL_HOUR,
    COL_INTENSITY,
    COL_LATITUDE,
    COL_LOCALITY,
    COL_LONGITUDE,
    COL_MAIN_TYPE,
    COL_QUALITY,
    COL_REGION,
    COL_VERIFIED,
    EXPORT_FILE_PREFIX,
    EXPORT_HEADERS,
)


class EmptyExportError(ValueError):
    """Raised when an export is requested for an empty selection."""


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    if value is pd.NA or value is pd.NaT:
        return ""
    return str(value)


def _quoted(value) -> str:
    return '"' + _text(value).replace('"', '""') + '"'


def _export_date(value) -> str:
    if value is None or pd.isna(value):
        return ""
    return value.strftime("%Y%m%d")


def _export_row(row: pd.Series) -> List[str]:
    return [
        _export_date(row.get(COL_DATE)),
        _text(row.get(COL_HOUR)),
        _quoted(row.get(COL_LOCALITY)),
        _quoted(row.get(COL_REGION)),
        _text(row.get(COL_MAIN_TYPE)),
        _quoted(row.get(COL_INTENSITY)),
        _text(row.get(COL_VERIFIED)),
        _text(row.get(COL_QUALITY)),
        _text(row.get(COL_LATITUDE)),
        _text(row.get(COL_LONGITUDE)),
        _quoted(row.get(COL_DESCRIPTION)),
    ]


def build_export_csv(df: pd.DataFrame) -> str:
    """
    Render events as CSV text, one line per event in frame order.

    Locality, region, intensity and description are always quoted. Dates are
    written as ``YYYYMMDD`` so the file can be parsed again by the normalizer.
    """
    if df.empty:
        raise EmptyExportError("No hay datos para exportar")
    lines = [",".join(EXPORT_HEADERS)]
    for _, row in df.iterrows():
        lines.append(",".join(_export_row(row)))
    return "\n".join(lines)


def export_file_name(today: Optional[dt.date] = None) -> str:
    today = today or dt.date.today()
    return f"{EXPORT_FILE_PREFIX}_{today.isoformat()}.csv"
