"""
Summary statistics and grouped totals over a sequence of rows.

These are plain functions of their input. Which rows they see (a single
runner or everyone) is decided by the caller.
"""

import logging

import pandas as pd

from models import SeriesPoint, Statistics

logger = logging.getLogger(__name__)


def _frame(rows):
    return pd.DataFrame(
        {
            "date": [row.date for row in rows],
            "person": [row.person for row in rows],
            "miles": [row.miles for row in rows],
        },
        columns=["date", "person", "miles"],
    ).astype({"miles": float})


def statistics(rows):
    """
    Total, average, min and max miles.

    An empty sequence gives all zeros rather than NaN so the dashboard can
    show a runner with no rows.
    """
    if not rows:
        return Statistics()
    miles = _frame(rows)["miles"]
    total = float(miles.sum())
    return Statistics(
        total=total,
        average=total / len(miles),
        min=float(miles.min()),
        max=float(miles.max()),
    )


def _group_sum(rows, key):
    if not rows:
        return []
    # sort=False keeps groups in order of first appearance
    sums = _frame(rows).groupby(key, sort=False)["miles"].sum()
    logger.debug("Grouped %d rows into %d %s buckets", len(rows), len(sums), key)
    return [SeriesPoint(key=k, miles=float(v)) for k, v in sums.items()]


def group_by_date(rows):
    """Miles per date string, exact match, no normalisation of the dates."""
    return _group_sum(rows, "date")


def group_by_person(dataset):
    """Miles per person. The dashboard always passes the full dataset here."""
    return _group_sum(dataset, "person")
