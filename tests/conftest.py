from pathlib import Path

import pytest

from severe_dashboard.data.normalizer import parse_events

SAMPLE_PATH = Path(__file__).parent / "data" / "sample_reports.csv"


@pytest.fixture
def sample_text():
    """CSV export with six reports, including malformed and short rows."""
    return SAMPLE_PATH.read_text(encoding="utf-8")


@pytest.fixture
def events(sample_text):
    return parse_events(sample_text)
