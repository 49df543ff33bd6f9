"""
Dashboard state and the commands the UI dispatches against it.

The state owns both event sequences: the full parsed set and the filtered
view derived from it. Commands never mutate a state; ``dispatch`` returns a
new one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import pandas as pd

from severe_dashboard.data.filters import DEFAULT_FILTERS, EventFilters, apply_filters


@dataclass(frozen=True)
class ApplyFilters:
    filters: EventFilters


@dataclass(frozen=True)
class ClearFilters:
    pass


Command = Union[ApplyFilters, ClearFilters]


@dataclass(frozen=True, eq=False)
class DashboardState:
    events: pd.DataFrame
    filters: EventFilters = DEFAULT_FILTERS
    filtered: pd.DataFrame = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "filtered", apply_filters(self.events, self.filters))

    @classmethod
    def initial(cls, events: pd.DataFrame, filters: EventFilters = DEFAULT_FILTERS) -> "DashboardState":
        return cls(events=events, filters=filters)


def dispatch(state: DashboardState, command: Command) -> DashboardState:
    if isinstance(command, ApplyFilters):
        return DashboardState(events=state.events, filters=command.filters)
    if isinstance(command, ClearFilters):
        return DashboardState(events=state.events, filters=DEFAULT_FILTERS)
    raise TypeError(f"Unknown command: {command!r}")
