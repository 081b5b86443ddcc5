"""
Predatory Journal Loader

Collects predatory journal/publisher entries from online lists into a single
record list.

Public API:
- Models: JournalRecord, SourceKind, serialize_record
- Sources: SourceDescriptor, ExtractionStrategy, PREDATORY_SOURCES
- Loaders: parse_csv, extract_fragments, clean_fragment
- Loader: PredatoryJournalLoader, load_from_online_sources()
"""

__version__ = "0.1.0"

# Export download helpers
from .download import FetchedSource, HttpTransport, fetch_source

# Export errors
from .errors import (
    ConfigurationError,
    MalformedRowError,
    PredatoryJournalError,
    SourceUnreachable,
    TransportError,
)

# Export exporters
from .exporters import export_csv, export_summary_json

# Export loader
from .loader import PredatoryJournalLoader, load_from_online_sources

# Export record loaders
from .loaders import DEFAULT_STRATEGY, PendingFragment, clean_fragment, extract_fragments, parse_csv, process_csv_row

# Export metrics
from .metrics import CrawlMetrics

# Export models
from .models import RECORD_FIELDS, JournalRecord, SourceKind, serialize_record

# Export sources
from .sources import PREDATORY_SOURCES, ExtractionStrategy, SourceDescriptor, csv_source, html_source

__all__ = [
    # Version
    "__version__",
    # Models
    "JournalRecord",
    "SourceKind",
    "RECORD_FIELDS",
    "serialize_record",
    # Sources
    "SourceDescriptor",
    "ExtractionStrategy",
    "PREDATORY_SOURCES",
    "csv_source",
    "html_source",
    # Errors
    "PredatoryJournalError",
    "ConfigurationError",
    "SourceUnreachable",
    "TransportError",
    "MalformedRowError",
    # Download
    "HttpTransport",
    "FetchedSource",
    "fetch_source",
    # Loaders
    "parse_csv",
    "process_csv_row",
    "extract_fragments",
    "clean_fragment",
    "PendingFragment",
    "DEFAULT_STRATEGY",
    # Core
    "PredatoryJournalLoader",
    "load_from_online_sources",
    "CrawlMetrics",
    # Exporters
    "export_csv",
    "export_summary_json",
]
