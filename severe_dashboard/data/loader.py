"""
Fetches the published sheet CSV and hands it to the record normalizer.
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd
import requests
import streamlit as st

from severe_dashboard.config import DEFAULT_REQUEST_TIMEOUT, get_settings
from severe_dashboard.data.normalizer import parse_events

logger = logging.getLogger(__name__)


class SourceUnavailableError(RuntimeError):
    """The source CSV could not be retrieved or was empty."""


def fetch_source_text(url: str, timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT) -> str:
    """Download the CSV export and return it as text.

    Raises SourceUnavailableError on transport errors, non-2xx responses and
    empty bodies.
    """
    logger.info("Fetching source CSV from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise SourceUnavailableError(f"Request failed: {exc}") from exc

    if not response.ok:
        raise SourceUnavailableError(f"HTTP error: {response.status_code}")

    response.encoding = "utf-8"
    text = response.text
    if not text or not text.strip():
        raise SourceUnavailableError("Source returned an empty document")
    logger.info("Fetched %d characters", len(text))
    return text


def load_events_from_text(text: str) -> pd.DataFrame:
    try:
        return parse_events(text)
    except ValueError as exc:
        raise SourceUnavailableError(str(exc)) from exc


def load_events() -> pd.DataFrame:
    """Wrapper that resolves config and calls the cached implementation."""
    settings = get_settings()
    return _load_events_impl(settings.source_url, settings.request_timeout)


@st.cache_data(show_spinner=False)
def _load_events_impl(url: str, timeout: float) -> pd.DataFrame:
    """Fetch and parse once per source URL; later reruns reuse the result."""
    return load_events_from_text(fetch_source_text(url, timeout=timeout))
