"""
Utility helpers for formatting numbers, dates and missing values for display.
"""

from __future__ import annotations

import math
from typing import Optional

import pandas as pd

MISSING = "N/A"


def _is_missing(value) -> bool:
    if value is None or value is pd.NA or value is pd.NaT:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value == ""


def format_number(value: Optional[float], decimals: int = 0) -> str:
    """Thousands-separated number; ``N/A`` when there is no value."""
    if _is_missing(value):
        return MISSING
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return MISSING


def format_date_es(value) -> str:
    # d/m/yyyy, as es-ES locale renders it
    if _is_missing(value):
        return MISSING
    try:
        return f"{value.day}/{value.month}/{value.year}"
    except AttributeError:
        return MISSING


def display_value(value) -> str:
    return MISSING if _is_missing(value) else str(value)
