"""
Dashboard state and the view data handed to whatever renders it.
"""

from dataclasses import dataclass, replace
from typing import Optional

from aggregation import group_by_date, group_by_person, statistics
from models import Dataset
from selection import ALL_RUNNERS, filter_rows, runner_options


@dataclass(frozen=True)
class DashboardState:
    """
    What the dashboard is currently showing.

    A state holds either a dataset or an error message, never both: loading a
    file clears the previous error and a failed load drops the previous data.
    """
    dataset: Dataset = ()
    selected: str = ALL_RUNNERS
    error: Optional[str] = None

    @classmethod
    def loaded(cls, dataset, selected=ALL_RUNNERS):
        return cls(dataset=tuple(dataset), selected=selected)

    @classmethod
    def failed(cls, message):
        return cls(error=message)

    def select(self, person):
        return replace(self, selected=person)


def assemble(state):
    """
    Build the view for ``state``.

    The timeline follows the selected runner; the per-runner totals are always
    computed over the whole dataset and only included when every runner is
    selected.
    """
    rows = filter_rows(state.dataset, state.selected)
    show_people = state.selected == ALL_RUNNERS
    return {
        "statistics": statistics(rows).as_dict(),
        "timeline": [
            {"date": p.key, "miles": p.miles} for p in group_by_date(rows)
        ],
        "person_series": [
            {"person": p.key, "miles": p.miles} for p in group_by_person(state.dataset)
        ] if show_people else None,
        "runners": runner_options(state.dataset),
        "selected": state.selected,
        "error": state.error,
    }


def format_miles(value):
    return f"{value:.2f}"
