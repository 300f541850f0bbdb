"""Shared fixtures for the running log tests."""

import pytest

from models import Row


SAMPLE_CSV = """Date,Person,Miles Run
2024-01-02,Alice,3.5
2024-01-01,Bob,5
2024-01-02,Bob,2.5

2024-01-03,Alice,4
"""


@pytest.fixture
def sample_text():
    return SAMPLE_CSV


@pytest.fixture
def sample_rows():
    return (
        Row("2024-01-02", "Alice", 3.5),
        Row("2024-01-01", "Bob", 5.0),
        Row("2024-01-02", "Bob", 2.5),
        Row("2024-01-03", "Alice", 4.0),
    )
