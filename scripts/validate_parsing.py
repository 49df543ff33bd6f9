"""Quick validation script for the record normalizer.

Run with `python scripts/validate_parsing.py [path.csv]` to parse a CSV
export and check the derived columns.
"""

from __future__ import annotations

import sys
from pathlib import Path

from severe_dashboard.config import COL_DATE, COL_INTENSITY_VALUE, COL_MAIN_TYPE, MAIN_TYPES
from severe_dashboard.data.normalizer import parse_events

DEFAULT_SAMPLE = Path(__file__).resolve().parent.parent / "tests" / "data" / "sample_reports.csv"


def main() -> None:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_SAMPLE
    events = parse_events(path.read_text(encoding="utf-8"))

    required_cols = [COL_DATE, COL_MAIN_TYPE, COL_INTENSITY_VALUE]
    missing = [col for col in required_cols if col not in events.columns]
    if missing:
        raise SystemExit(f"Missing required columns: {missing}")

    unknown = set(events[COL_MAIN_TYPE]) - set(MAIN_TYPES)
    assert not unknown, f"Unexpected type codes: {unknown}"

    print("Parsing validation passed. Rows:", len(events))
    for key, value in events.attrs.get("diagnostics", {}).items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
