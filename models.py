"""
Data types shared by the parser, the filter and the aggregator.
"""

from dataclasses import asdict, dataclass
from typing import Tuple


@dataclass(frozen=True)
class Row:
    """One validated line of the running log."""
    date: str  # kept exactly as written in the file
    person: str
    miles: float


# Rows in file order. A tuple so nobody downstream can append to it.
Dataset = Tuple[Row, ...]


@dataclass(frozen=True)
class Statistics:
    total: float = 0.0
    average: float = 0.0
    min: float = 0.0
    max: float = 0.0

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class SeriesPoint:
    key: str
    miles: float
