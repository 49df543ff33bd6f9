"""
Reductions over the (filtered) events DataFrame used by the summary cards
and charts. All functions are pure and tolerate an empty frame.
"""

from __future__ import annotations

from typing import Callable, Optional

import pandas as pd

from severe_dashboard.config import (
    COL_DATE,
    COL_INTENSITY_VALUE,
    COL_MAIN_TYPE,
    COL_REGION,
    COL_VERIFIED,
    MAIN_TYPE_LABELS,
    UNKNOWN_REGION,
    VERIFIED_YES,
)


def total_events(df: pd.DataFrame) -> int:
    return int(len(df))


def count_matching(df: pd.DataFrame, predicate: Callable[[pd.DataFrame], pd.Series]) -> int:
    """Count rows where ``predicate(df)`` yields True."""
    if df.empty:
        return 0
    return int(predicate(df).fillna(False).astype(bool).sum())


def count_verified(df: pd.DataFrame) -> int:
    if COL_VERIFIED not in df:
        return 0
    return count_matching(df, lambda frame: frame[COL_VERIFIED] == VERIFIED_YES)


def count_unique_regions(df: pd.DataFrame) -> int:
    if df.empty or COL_REGION not in df:
        return 0
    regions = df[COL_REGION].dropna().astype(str)
    return int(regions[regions != ""].nunique())


def safe_mean(series: pd.Series) -> Optional[float]:
    cleaned = pd.to_numeric(series, errors="coerce").dropna()
    if cleaned.empty:
        return None
    return float(cleaned.mean())


def mean_intensity(df: pd.DataFrame) -> Optional[float]:
    """Mean of the present intensity values; None when there are none."""
    if COL_INTENSITY_VALUE not in df:
        return None
    return safe_mean(df[COL_INTENSITY_VALUE])


def counts_by_type(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty or COL_MAIN_TYPE not in df:
        return pd.DataFrame(columns=["Tipo", "Etiqueta", "Eventos"])
    counts = df[COL_MAIN_TYPE].value_counts(sort=False).reset_index()
    counts.columns = ["Tipo", "Eventos"]
    counts.insert(1, "Etiqueta", counts["Tipo"].map(lambda code: MAIN_TYPE_LABELS.get(code, code)))
    return counts


def _dated(df: pd.DataFrame) -> pd.Series:
    if df.empty or COL_DATE not in df:
        return pd.Series(dtype="datetime64[ns]")
    return df[COL_DATE].dropna()


def events_per_month(df: pd.DataFrame) -> pd.DataFrame:
    dates = _dated(df)
    if dates.empty:
        return pd.DataFrame(columns=["Mes", "Eventos"])
    months = dates.dt.strftime("%Y-%m")
    grouped = months.value_counts().sort_index().reset_index()
    grouped.columns = ["Mes", "Eventos"]
    return grouped


def events_per_year(df: pd.DataFrame) -> pd.DataFrame:
    dates = _dated(df)
    if dates.empty:
        return pd.DataFrame(columns=["Año", "Eventos"])
    grouped = dates.dt.year.value_counts().sort_index().reset_index()
    grouped.columns = ["Año", "Eventos"]
    grouped["Año"] = grouped["Año"].astype(str)
    return grouped


def top_regions(df: pd.DataFrame, n: int = 10) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame(columns=["Departamento", "Eventos"])
    if COL_REGION in df:
        regions = df[COL_REGION].fillna("").astype(str).replace("", UNKNOWN_REGION)
    else:
        regions = pd.Series(UNKNOWN_REGION, index=df.index)
    grouped = regions.value_counts(sort=False).reset_index()
    grouped.columns = ["Departamento", "Eventos"]
    grouped = grouped.sort_values("Eventos", ascending=False, kind="stable")
    return grouped.head(n).reset_index(drop=True)
