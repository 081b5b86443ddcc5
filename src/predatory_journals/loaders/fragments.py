"""HTML listing page loader (Beall's List).

Listing pages are processed in two stages:
1. extract_fragments() - split a page body into one fragment per entry
2. clean_fragment() - pull name, URL and abbreviation out of one fragment

Extraction is purely pattern based: no HTML parsing or entity decoding is
done, so the patterns are tied to the current markup of each page.
"""

import re
from typing import NamedTuple, Optional, Union

from ..config import LIST_ITEM_PATTERN
from ..models import JournalRecord
from ..sources import ExtractionStrategy

# Fine patterns used when no source-specific strategy is given
DEFAULT_STRATEGY = ExtractionStrategy(element=LIST_ITEM_PATTERN)


class PendingFragment(NamedTuple):
    """A fragment waiting to be cleaned, with the source it came from."""

    fragment: str
    strategy: ExtractionStrategy
    location: str


def extract_fragments(pattern: Union[str, re.Pattern], text: str) -> list[str]:
    """
    Find all non-overlapping matches of a coarse pattern, in document order.

    Args:
        pattern: Coarse pattern matching one entry (e.g. ``<tr>.*?</tr>``)
        text: Full page body

    Returns:
        Matched fragments verbatim (empty list if nothing matches)
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return [match.group(0) for match in pattern.finditer(text)]


def _first_match(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    return match.group(0) if match else None


def clean_fragment(fragment: str, strategy: ExtractionStrategy = DEFAULT_STRATEGY) -> Optional[JournalRecord]:
    """
    Turn one listing fragment into a JournalRecord.

    Only the first match of each fine pattern is used, so an entry holding two
    links (e.g. a hijacked journal next to the authentic one) yields a record
    for the first link only.

    Args:
        fragment: Fragment returned by extract_fragments()
        strategy: Fine patterns for name, URL and abbreviation

    Returns:
        JournalRecord, or None if either the name or the URL is missing
    """
    name = _first_match(strategy.name, fragment)
    url = _first_match(strategy.url, fragment)
    if name is None or url is None:
        return None

    abbreviation = _first_match(strategy.abbreviation, fragment) or ""
    return JournalRecord(name=name, abbreviation=abbreviation, url=url)
