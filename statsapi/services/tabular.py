"""Delimited-file ingestion: per-column descriptive statistics."""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from statsapi.errors import EmptyDataError, InvalidInputError, TabularParseError
from statsapi.services.cleaning import parse_numeric
from statsapi.services.statistics import StatisticsResult, compute_statistics

__all__: list[str] = [
    "Table",
    "column_values",
    "describe_columns",
    "describe_file",
    "read_table",
]

logger = logging.getLogger(__name__)


@dataclass
class Table:
    """Header names and the raw rows of a delimited file."""

    columns: list[str]
    rows: list[dict[str, Optional[str]]] = field(default_factory=list)


def read_table(stream: TextIO, delimiter: str = ",") -> Table:
    """
    Read a delimited text stream whose first row is the header.
    Raises InvalidInputError for a missing header or bad delimiter,
    EmptyDataError when there are no data rows and TabularParseError
    when the content is not valid delimited text.
    """
    if len(delimiter) != 1:
        raise InvalidInputError("delimiter must be a single character")
    reader = csv.DictReader(stream, delimiter=delimiter)
    try:
        if not reader.fieldnames:
            raise InvalidInputError("CSV file has no header row")
        columns = list(reader.fieldnames)
        rows = [{col: row.get(col) for col in columns} for row in reader]
    except (csv.Error, UnicodeDecodeError) as exc:
        raise TabularParseError(f"Error parsing CSV file: {exc}") from exc
    if not rows:
        raise EmptyDataError("Empty CSV file")
    return Table(columns=columns, rows=rows)


def column_values(table: Table, column: str) -> list[float]:
    """Numeric values of ``column``; cells that do not parse are skipped."""
    values = (parse_numeric(row.get(column)) for row in table.rows)
    return [v for v in values if v is not None]


def describe_columns(table: Table) -> dict[str, StatisticsResult]:
    """Statistics for every column holding at least one numeric value."""
    stats = {}
    for column in table.columns:
        values = column_values(table, column)
        if not values:
            logger.debug("Skipping non-numeric column %r", column)
            continue
        stats[column] = compute_statistics(values)
    return stats


def describe_file(
    path: Path, delimiter: str = ",", encoding: str = "utf-8-sig"
) -> tuple[Table, dict[str, StatisticsResult]]:
    """Read the delimited file at ``path`` and describe its numeric columns."""
    with open(path, newline="", encoding=encoding) as fh:
        table = read_table(fh, delimiter=delimiter)
    return table, describe_columns(table)
