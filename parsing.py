"""
Running log parser.

Turns the text of an uploaded CSV into a tuple of validated ``Row`` values.
The format is deliberately narrow: comma separated, no quoting, UTF-8, header
on the first line. Data is bound by position (date, person, miles) and the
header is only checked for the presence of the required names, so a file
whose header lists the columns in another order is still read positionally.
"""

import logging
import os
from pathlib import Path

import numpy as np
import pandas as pd

from errors import (
    EmptyResultError,
    EncodingError,
    RowError,
    SchemaError,
    StructuralError,
)
from models import Row

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("date", "person", "miles run")
FIELD_NAMES = ("date", "person", "miles")
# pandas reads these as the current time; they name no calendar date
RELATIVE_DATE_WORDS = ("today", "now")


def parse(text):
    """
    Parse the full text of a running log.

    Args:
        text: File contents, already decoded.

    Returns:
        Tuple of Row in file order.

    Raises:
        StructuralError: Fewer than a header line and one data line.
        SchemaError: A required header column is missing.
        RowError: The first data row that fails validation.
        EmptyResultError: No data rows survived.
    """
    lines = text.strip().split("\n")
    if len(lines) < 2:
        raise StructuralError("CSV must have at least header and one data row")

    headers = [h.strip().lower() for h in lines[0].split(",")]
    for column in REQUIRED_COLUMNS:
        if column not in headers:
            raise SchemaError(column)

    # Index by 1-based line number so errors can point back at the file.
    body = pd.Series(lines[1:], index=range(2, len(lines) + 1), dtype=object).str.strip()
    body = body[body != ""]
    if body.empty:
        raise EmptyResultError("No valid data found in CSV")

    fields = _split_fields(body)
    dates = pd.to_datetime(fields["date"], errors="coerce", format="mixed", utc=True)
    miles = pd.to_numeric(fields["miles"], errors="coerce").astype(float)

    _check_rows(fields, [
        ("date", dates.isna() | fields["date"].str.lower().isin(RELATIVE_DATE_WORDS), "Invalid date"),
        ("person", fields["person"] == "", "Person name is empty"),
        ("miles", ~np.isfinite(miles), "Invalid miles value"),
        ("miles", miles < 0, "Miles cannot be negative"),
    ])

    rows = tuple(
        Row(date=date, person=person, miles=float(value))
        for date, person, value in zip(fields["date"], fields["person"], miles)
    )
    logger.debug("Parsed %d rows from %d lines", len(rows), len(lines))
    return rows


def _split_fields(body):
    """First three comma separated fields of each line; missing ones are empty."""
    parts = body.str.split(",")
    return pd.DataFrame({
        name: parts.map(lambda p, i=i: p[i].strip() if i < len(p) else "")
        for i, name in enumerate(FIELD_NAMES)
    })


def _check_rows(fields, checks):
    # Checks are listed in the order they apply within a row, so the first
    # failing line reports its first failing check.
    failed = pd.concat([mask for _, mask, _ in checks], axis=1).any(axis=1)
    if not failed.any():
        return
    line = failed.idxmax()
    for field, mask, reason in checks:
        if mask.loc[line]:
            raise RowError(int(line), reason, fields.at[line, field])


def load_and_parse(source):
    """
    Read a running log and parse it.

    ``source`` may be a path (str or PathLike), raw bytes, or an open file
    object in text or binary mode. Bytes are decoded as UTF-8; a leading BOM
    is dropped.
    """
    if isinstance(source, (str, os.PathLike)):
        data = Path(source).read_bytes()
    elif isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        data = source.read()

    if isinstance(data, str):
        text = data.lstrip("\ufeff")
    else:
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            logger.warning("Rejected upload that is not UTF-8: %s", exc)
            raise EncodingError("File must be UTF-8 encoded text") from exc
    return parse(text)
