"""Crawl metrics collected during one loading run."""

import logging
from collections import Counter
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class CrawlMetrics:
    """Collects per-source outcomes during one run."""

    # Records appended per source location (CSV rows or cleaned fragments)
    records_per_source: Counter = field(default_factory=Counter)

    # Sources that failed the probe or the download
    unreachable_sources: list = field(default_factory=list)
    failed_sources: list = field(default_factory=list)

    # Fragment processing
    fragments_extracted: int = 0
    fragments_dropped: int = 0

    def record_added(self, location: str, count: int = 1) -> None:
        """Record record(s) appended from a source."""
        self.records_per_source[location] += count

    def record_unreachable(self, location: str) -> None:
        self.unreachable_sources.append(location)

    def record_failure(self, location: str) -> None:
        self.failed_sources.append(location)

    def record_fragments(self, count: int) -> None:
        self.fragments_extracted += count

    def record_dropped_fragment(self) -> None:
        self.fragments_dropped += 1

    @property
    def records_total(self) -> int:
        return sum(self.records_per_source.values())

    def report(self) -> dict:
        """Generate crawl metrics report."""
        return {
            "records_total": self.records_total,
            "records_per_source": dict(self.records_per_source),
            "unreachable_sources": list(self.unreachable_sources),
            "failed_sources": list(self.failed_sources),
            "fragments": {
                "extracted": self.fragments_extracted,
                "dropped": self.fragments_dropped,
            },
        }

    def print_report(self) -> None:
        """Print crawl metrics to logger."""
        logger.info("=" * 60)
        logger.info("Crawl Metrics")
        logger.info("=" * 60)

        logger.info(f"Records collected: {self.records_total:,}")
        for location, count in self.records_per_source.items():
            logger.info(f"  {location}: {count:,}")

        if self.fragments_extracted > 0:
            logger.info("")
            logger.info(f"HTML fragments: {self.fragments_extracted:,} extracted, {self.fragments_dropped:,} without name/URL")

        if self.unreachable_sources:
            logger.info("")
            logger.info(f"Unreachable sources: {len(self.unreachable_sources)}")
            for location in self.unreachable_sources:
                logger.info(f"  {location}")

        if self.failed_sources:
            logger.info("")
            logger.info(f"Failed sources: {len(self.failed_sources)}")
            for location in self.failed_sources:
                logger.info(f"  {location}")
