"""CSV table loader (Stop Predatory Journals lists).

The upstream tables have no header row and store columns as
``url, name, abbreviation``; records are reordered to
``name, abbreviation, url``.
"""

import csv
from typing import Iterable, Iterator

from ..config import CSV_COLUMN_COUNT
from ..errors import MalformedRowError
from ..models import JournalRecord


def process_csv_row(row: list[str], line_num: int = 0) -> JournalRecord:
    """
    Transform a CSV row into a JournalRecord.

    Args:
        row: Parsed CSV row ordered (url, name, abbreviation)
        line_num: Line number in the source, for error reporting

    Returns:
        JournalRecord with columns reordered

    Raises:
        MalformedRowError: If the row does not have exactly three columns
    """
    if len(row) != CSV_COLUMN_COUNT:
        raise MalformedRowError(line_num, f"expected {CSV_COLUMN_COUNT} columns, got {len(row)}")
    url, name, abbreviation = row
    return JournalRecord(name=name, abbreviation=abbreviation, url=url)


def parse_csv(lines: Iterable[str]) -> Iterator[JournalRecord]:
    """
    Parse a CSV character stream into JournalRecords.

    Rows are yielded as they are read, so records produced before a malformed
    row or a read failure are still available to the caller.

    Args:
        lines: File-like object or iterable of text lines (Excel dialect, no header)

    Yields:
        One JournalRecord per row

    Raises:
        MalformedRowError: On a row with the wrong column count or invalid quoting
    """
    reader = csv.reader(lines, dialect="excel")
    try:
        for row in reader:
            yield process_csv_row(row, reader.line_num)
    except csv.Error as e:
        raise MalformedRowError(reader.line_num, str(e)) from e
