"""
Record normalizer: turns the published sheet's CSV text into a typed events
DataFrame.

Every field coercion is best-effort. A value that cannot be parsed becomes
NaT / NaN / <NA> (or an empty string for text columns) for that cell only;
the only failure surfaced to callers is empty input.
"""

from __future__ import annotations

import csv
import datetime as dt
import logging
import re
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from severe_dashboard.config import (
    COL_DATE,
    COL_INTENSITY,
    COL_INTENSITY_VALUE,
    COL_MAIN_TYPE,
    COL_PHENOMENON,
    COL_QUALITY,
    COL_VERIFIED,
    LATITUDE_MARKER,
    LONGITUDE_MARKER,
    MAIN_TYPE_KEYWORDS,
    MAIN_TYPE_OTHER,
    NOT_SAMPLED,
)

logger = logging.getLogger(__name__)

DELIMITER = ","
DATE_REGEX = re.compile(r"[0-9]{8}")
NUMBER_REGEX = re.compile(r"(\d+\.?\d*)")
LEADING_INT_REGEX = re.compile(r"\s*([+-]?\d+)")

# Calendar days representable in a datetime64[ns] column
MIN_DATE = pd.Timestamp.min.date() + dt.timedelta(days=1)
MAX_DATE = pd.Timestamp.max.date()


def _clean(value: str) -> str:
    return value.strip().replace('"', "")


def split_fields(line: str) -> List[str]:
    """Split one line on the delimiter, honouring double-quoted values.

    Lines the csv module rejects, such as an unbalanced quote, fall back to
    a plain split.
    """
    try:
        fields = next(csv.reader([line], delimiter=DELIMITER, strict=True), [])
    except csv.Error:
        fields = line.split(DELIMITER)
    return [_clean(field) for field in fields]


def parse_date(value: Optional[str]) -> Optional[dt.date]:
    """Parse a ``YYYYMMDD`` token. Anything else, including days outside the
    datetime64[ns] range, yields None."""
    if not value or len(value) != 8 or not DATE_REGEX.fullmatch(value):
        return None
    try:
        date = dt.date(int(value[:4]), int(value[4:6]), int(value[6:8]))
    except ValueError:
        return None
    if not MIN_DATE <= date <= MAX_DATE:
        return None
    return date


def parse_coordinate(value: Optional[str]) -> float:
    if not value:
        return np.nan
    try:
        return float(value)
    except ValueError:
        return np.nan


def parse_quality(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    match = LEADING_INT_REGEX.match(value)
    return int(match.group(1)) if match else None


def extract_main_type(text: Optional[str]) -> str:
    if not text:
        return MAIN_TYPE_OTHER
    upper = text.upper()
    for code, keywords in MAIN_TYPE_KEYWORDS:
        if any(keyword in upper for keyword in keywords):
            return code
    return MAIN_TYPE_OTHER


def parse_intensity(text: Optional[str]) -> Optional[float]:
    """First number in free-text intensity (``"2 - 4"`` -> 2.0, ``"F1"`` -> 1.0)."""
    if not text or text == NOT_SAMPLED:
        return None
    match = NUMBER_REGEX.search(str(text))
    return float(match.group(1)) if match else None


def _is_coordinate(header: str) -> bool:
    return LATITUDE_MARKER in header or LONGITUDE_MARKER in header


def normalize_rows(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> pd.DataFrame:
    """Build the events DataFrame from split header and data rows."""
    header_row = list(headers)
    # A repeated header keeps its first position and its last value.
    headers = list(dict.fromkeys(header_row))
    width = len(header_row)
    short_rows = 0
    records: List[Dict[str, str]] = []
    for values in rows:
        if len(values) < width:
            short_rows += 1
        record: Dict[str, str] = {}
        for index, header in enumerate(header_row):
            record[header] = values[index] if index < len(values) else ""
        records.append(record)

    if records:
        df = pd.DataFrame.from_records(records, columns=headers)
    else:
        df = pd.DataFrame({header: pd.Series(dtype=object) for header in headers})
    row_count = len(records)

    for header in headers:
        raw = df[header]
        if header == COL_DATE:
            parsed = [parse_date(v) for v in raw]
            df[header] = pd.Series(
                [pd.Timestamp(d) if d is not None else pd.NaT for d in parsed],
                index=df.index,
                dtype="datetime64[ns]",
            )
        elif _is_coordinate(header):
            df[header] = pd.Series([parse_coordinate(v) for v in raw], index=df.index, dtype="float64")
        elif header == COL_VERIFIED:
            df[header] = raw.astype(str).str.upper()
        elif header == COL_QUALITY:
            df[header] = pd.Series([parse_quality(v) for v in raw], index=df.index, dtype="Int64")

    phenomenon = df[COL_PHENOMENON] if COL_PHENOMENON in df else pd.Series([""] * row_count, index=df.index)
    intensity = df[COL_INTENSITY] if COL_INTENSITY in df else pd.Series([""] * row_count, index=df.index)
    df[COL_MAIN_TYPE] = pd.Series([extract_main_type(v) for v in phenomenon], index=df.index, dtype=object)
    df[COL_INTENSITY_VALUE] = pd.Series(
        [parse_intensity(v) for v in intensity], index=df.index, dtype="float64"
    )

    df.attrs["diagnostics"] = _diagnostics(df, headers, row_count, short_rows)
    logger.info("Normalized %d event rows (%d short rows)", row_count, short_rows)
    return df


def _diagnostics(df: pd.DataFrame, headers: List[str], row_count: int, short_rows: int) -> Dict[str, object]:
    coordinate_cols = [h for h in headers if _is_coordinate(h)]
    return {
        "row_count": row_count,
        "headers": headers,
        "short_rows": short_rows,
        "missing_dates": int(df[COL_DATE].isna().sum()) if COL_DATE in df else row_count,
        "missing_coordinates": int(df[coordinate_cols].isna().any(axis=1).sum()) if coordinate_cols else row_count,
        "missing_quality": int(df[COL_QUALITY].isna().sum()) if COL_QUALITY in df else row_count,
        "missing_intensity": int(df[COL_INTENSITY_VALUE].isna().sum()),
        "unclassified": int((df[COL_MAIN_TYPE] == MAIN_TYPE_OTHER).sum()),
    }


def parse_events(text: Optional[str]) -> pd.DataFrame:
    """Parse CSV text into one event row per data line, in input order.

    Raises ValueError when the text is empty.
    """
    if text is None or not text.strip():
        raise ValueError("Source text is empty")
    lines = text.lstrip("\ufeff").strip().replace("\r", "").split("\n")
    headers = split_fields(lines[0])
    rows = [split_fields(line) for line in lines[1:]]
    return normalize_rows(headers, rows)
