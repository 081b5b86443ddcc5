"""
Predatory journal list loader.

Crawls every registered source and collects JournalRecords into one list:

Pass 1 visits sources in registry order. CSV tables append their rows
directly; HTML pages only contribute fragments to a pending list.
Pass 2 cleans the pending fragments, in pooled order, into records.

A source that is unreachable or fails mid-download is logged and skipped;
records already appended from it are kept.
"""

import logging
from typing import Iterable, Optional

from tqdm import tqdm

from .download import HttpTransport, Transport, fetch_source
from .errors import SourceUnreachable, TransportError
from .loaders import PendingFragment, clean_fragment, extract_fragments, parse_csv
from .metrics import CrawlMetrics
from .models import JournalRecord, SourceKind
from .sources import PREDATORY_SOURCES, SourceDescriptor

logger = logging.getLogger(__name__)


class PredatoryJournalLoader:
    """
    Loads predatory journal records from online sources.

    Each call to run() starts from an empty record list and fresh metrics, so
    a loader can be run repeatedly.
    """

    def __init__(
        self,
        sources: Iterable[SourceDescriptor] = PREDATORY_SOURCES,
        transport: Optional[Transport] = None,
        show_progress: bool = False,
    ):
        self.sources = tuple(sources)
        self.transport = transport or HttpTransport()
        self.show_progress = show_progress
        self.metrics = CrawlMetrics()

    def run(self) -> list[JournalRecord]:
        """
        Crawl all sources and return the collected records.

        Returns:
            Records from CSV sources (registry and row order) followed by
            records cleaned from HTML fragments (extraction order)
        """
        self.metrics = CrawlMetrics()
        records: list[JournalRecord] = []

        pending: list[PendingFragment] = []
        for source in tqdm(self.sources, desc="Predatory sources", unit=" source", disable=not self.show_progress):
            pending.extend(self.crawl(source, records))

        self.metrics.record_fragments(len(pending))
        for item in pending:
            self.clean(item, records)

        logger.info(f"Updated predatory journal list ({len(records):,} records from {len(self.sources)} sources)")
        return records

    def crawl(self, source: SourceDescriptor, records: list[JournalRecord]) -> list[PendingFragment]:
        """
        Fetch one source; append its CSV rows or return its HTML fragments.

        Never raises for a failing source: the failure is logged and the
        source contributes whatever it produced before failing.
        """
        try:
            with fetch_source(source, self.transport) as fetched:
                if source.kind is SourceKind.CSV:
                    self.handle_csv(source, fetched.lines(), records)
                    return []
                return self.handle_html(source, fetched.text())
        except SourceUnreachable:
            logger.warning(f"Source unreachable, skipping: {source.location}")
            self.metrics.record_unreachable(source.location)
        except TransportError as e:
            logger.error(f"Could not crawl source {source.location}: {e}")
            self.metrics.record_failure(source.location)
        return []

    def handle_csv(self, source: SourceDescriptor, lines: Iterable[str], records: list[JournalRecord]) -> None:
        for record in parse_csv(lines):
            records.append(record)
            self.metrics.record_added(source.location)

    def handle_html(self, source: SourceDescriptor, body: str) -> list[PendingFragment]:
        fragments = extract_fragments(source.strategy.element, body)
        logger.debug(f"  {len(fragments):,} fragments extracted from {source.location}")
        return [PendingFragment(fragment, source.strategy, source.location) for fragment in fragments]

    def clean(self, item: PendingFragment, records: list[JournalRecord]) -> None:
        record = clean_fragment(item.fragment, item.strategy)
        if record is None:
            self.metrics.record_dropped_fragment()
            return
        records.append(record)
        self.metrics.record_added(item.location)


def load_from_online_sources(
    sources: Iterable[SourceDescriptor] = PREDATORY_SOURCES,
    transport: Optional[Transport] = None,
) -> list[JournalRecord]:
    """
    Crawl the predatory journal sources once.

    Args:
        sources: Sources to crawl, in order (default: PREDATORY_SOURCES)
        transport: HTTP capability; a requests-based transport if omitted

    Returns:
        List of JournalRecords (possibly incomplete if sources failed)
    """
    return PredatoryJournalLoader(sources, transport).run()
