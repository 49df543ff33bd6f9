"""
Filter utilities that apply the dashboard filter criteria to the events dataset.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pandas as pd

from severe_dashboard.config import COL_DATE, COL_MAIN_TYPE, COL_REGION


@dataclass(frozen=True)
class EventFilters:
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    main_type: Optional[str] = None
    region: Optional[str] = None


DEFAULT_FILTERS = EventFilters()


def apply_filters(df: pd.DataFrame, filters: EventFilters) -> pd.DataFrame:
    """
    Return the events matching every supplied criterion.

    Date bounds are inclusive and compared by calendar day. Events without a
    date are never dropped by the date bounds. Row order and index labels are
    kept, so the result is always a subsequence of ``df``.
    """
    if df.empty:
        return df

    mask = pd.Series(True, index=df.index)

    if COL_DATE in df:
        days = df[COL_DATE].dt.normalize()
        undated = days.isna()
        if filters.start_date is not None:
            mask &= undated | (days >= pd.Timestamp(filters.start_date))
        if filters.end_date is not None:
            mask &= undated | (days <= pd.Timestamp(filters.end_date))

    if filters.main_type and COL_MAIN_TYPE in df:
        mask &= df[COL_MAIN_TYPE] == filters.main_type

    if filters.region and COL_REGION in df:
        mask &= df[COL_REGION] == filters.region

    if mask.all():
        return df
    return df[mask]


def available_regions(df: pd.DataFrame) -> List[str]:
    if df.empty or COL_REGION not in df:
        return []
    regions = df[COL_REGION].dropna().astype(str)
    return sorted(regions[regions != ""].unique().tolist())


def serialize_filters(filters: EventFilters) -> Dict[str, Any]:
    """
    Convert the EventFilters dataclass to a JSON-serialisable dictionary to be
    stored in session_state or used for logging/debugging.
    """
    return {
        "start_date": filters.start_date.isoformat() if filters.start_date else None,
        "end_date": filters.end_date.isoformat() if filters.end_date else None,
        "main_type": filters.main_type,
        "region": filters.region,
    }
