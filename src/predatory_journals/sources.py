"""
Registry of predatory journal sources.

Each source is either a CSV table (detected by the ``.csv`` marker in the URL
path) or an HTML listing page paired with an ExtractionStrategy. Descriptors
are validated when they are built, so a malformed location fails at import
time rather than during a crawl.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from .config import (
    ABBREVIATION_PATTERN,
    BEALLS_HIJACKED_URL,
    BEALLS_PUBLISHERS_URL,
    BEALLS_STANDALONE_URL,
    CSV_MARKER,
    LIST_ITEM_PATTERN,
    NAME_PATTERN,
    STOP_PREDATORY_JOURNALS_CSV_URL,
    STOP_PREDATORY_PUBLISHERS_CSV_URL,
    TABLE_ROW_PATTERN,
    URL_PATTERN,
)
from .errors import ConfigurationError
from .models import SourceKind

PatternLike = Union[str, re.Pattern]


def _compile(pattern: PatternLike) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"Invalid extraction pattern {pattern!r}: {e}") from e


@dataclass(frozen=True)
class ExtractionStrategy:
    """
    Patterns used to turn an HTML listing page into records.

    ``element`` splits the page into fragments; ``name``, ``url`` and
    ``abbreviation`` are applied to each fragment independently and only their
    first match is used.
    """

    element: re.Pattern
    name: re.Pattern = re.compile(NAME_PATTERN)
    url: re.Pattern = re.compile(URL_PATTERN)
    abbreviation: re.Pattern = re.compile(ABBREVIATION_PATTERN)

    def __post_init__(self):
        for attr in ("element", "name", "url", "abbreviation"):
            object.__setattr__(self, attr, _compile(getattr(self, attr)))


def validate_location(location: str) -> str:
    """
    Check that a source location is a well-formed absolute HTTP(S) URL.

    Raises:
        ConfigurationError: If the location cannot be parsed or lacks a scheme/host
    """
    try:
        parsed = parse_url(location)
    except (LocationParseError, ValueError, TypeError) as e:
        raise ConfigurationError(f"Malformed source URL {location!r}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigurationError(f"Malformed source URL {location!r}: expected an absolute http(s) URL")
    return location


def is_tabular_location(location: str) -> bool:
    """Return True if the URL path carries the CSV marker."""
    path = parse_url(location).path or ""
    return CSV_MARKER in path


@dataclass(frozen=True)
class SourceDescriptor:
    """An upstream document and, for HTML pages, how to extract entries from it."""

    location: str
    strategy: Optional[ExtractionStrategy] = None

    def __post_init__(self):
        validate_location(self.location)
        tabular = is_tabular_location(self.location)
        if tabular and self.strategy is not None:
            raise ConfigurationError(f"CSV source {self.location} must not define an extraction strategy")
        if not tabular and self.strategy is None:
            raise ConfigurationError(f"HTML source {self.location} requires an extraction strategy")

    @property
    def kind(self) -> SourceKind:
        return SourceKind.HTML if self.strategy is not None else SourceKind.CSV


def csv_source(location: str) -> SourceDescriptor:
    """Create a descriptor for a CSV table with rows (url, name, abbreviation)."""
    return SourceDescriptor(location)


def html_source(location: str, element: PatternLike, **fine_patterns: PatternLike) -> SourceDescriptor:
    """
    Create a descriptor for an HTML listing page.

    Args:
        location: Page URL
        element: Coarse pattern matching one entry (e.g. ``<li>.*?</li>``)
        **fine_patterns: Optional overrides for ``name``, ``url`` or ``abbreviation``

    Returns:
        SourceDescriptor with an ExtractionStrategy

    Raises:
        ConfigurationError: On an invalid location, pattern or pattern keyword
    """
    try:
        strategy = ExtractionStrategy(element, **fine_patterns)
    except TypeError as e:
        raise ConfigurationError(f"Invalid extraction strategy for {location}: {e}") from e
    return SourceDescriptor(location, strategy)


# Fixed crawl order: CSV tables first, then Beall's List pages
PREDATORY_SOURCES: tuple[SourceDescriptor, ...] = (
    csv_source(STOP_PREDATORY_JOURNALS_CSV_URL),
    csv_source(STOP_PREDATORY_PUBLISHERS_CSV_URL),
    html_source(BEALLS_PUBLISHERS_URL, LIST_ITEM_PATTERN),
    html_source(BEALLS_STANDALONE_URL, LIST_ITEM_PATTERN),
    html_source(BEALLS_HIJACKED_URL, TABLE_ROW_PATTERN),
)
