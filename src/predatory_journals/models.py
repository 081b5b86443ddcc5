"""Data models for predatory journal records."""

from dataclasses import asdict, dataclass
from enum import Enum

# Column order used for every export (records are normalized to this shape)
RECORD_FIELDS = ["name", "abbreviation", "url"]


class SourceKind(str, Enum):
    """Formats of upstream predatory journal sources."""

    CSV = "csv"  # Tabular source, rows ordered (url, name, abbreviation)
    HTML = "html"  # Listing page, entries split out with a coarse pattern


@dataclass(frozen=True)
class JournalRecord:
    """
    A single predatory journal or publisher entry.

    Records are never validated beyond extraction: ``url`` is copied verbatim
    from the source text and duplicates across sources are preserved.
    """

    name: str
    abbreviation: str
    url: str


def serialize_record(record: JournalRecord) -> dict:
    """
    Serialize a JournalRecord for DataFrame/CSV/JSON export.

    Args:
        record: Journal record to serialize

    Returns:
        Dictionary with keys in ``RECORD_FIELDS`` order
    """
    data = asdict(record)
    return {key: data[key] for key in RECORD_FIELDS}
