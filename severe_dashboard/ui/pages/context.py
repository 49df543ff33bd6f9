from __future__ import annotations

from dataclasses import dataclass

from severe_dashboard.state import DashboardState


@dataclass
class PageContext:
    state: DashboardState
