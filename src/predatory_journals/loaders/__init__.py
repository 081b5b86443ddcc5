"""
Source loaders turning raw documents into JournalRecords.

The loading pipeline has two testable layers per format:
1. process_csv_row() / clean_fragment() - record transformation (testable with literals)
2. parse_csv() / extract_fragments() - stream or page processing (testable with in-memory text)
"""

from ..models import JournalRecord
from .fragments import DEFAULT_STRATEGY, PendingFragment, clean_fragment, extract_fragments
from .tabular import parse_csv, process_csv_row

__all__ = [
    "JournalRecord",
    "DEFAULT_STRATEGY",
    "PendingFragment",
    # Tabular sources
    "parse_csv",
    "process_csv_row",
    # Fragment sources
    "extract_fragments",
    "clean_fragment",
]
