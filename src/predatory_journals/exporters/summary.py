"""JSON summary of one crawl: outcome and record count per source."""

import json
import logging
from pathlib import Path
from typing import Iterable

from ..metrics import CrawlMetrics
from ..sources import SourceDescriptor

logger = logging.getLogger(__name__)

# Per-source outcomes
STATUS_OK = "ok"
STATUS_UNREACHABLE = "unreachable"
STATUS_FAILED = "failed"  # records read before the failure are still counted


def source_status(metrics: CrawlMetrics, location: str) -> str:
    if location in metrics.unreachable_sources:
        return STATUS_UNREACHABLE
    if location in metrics.failed_sources:
        return STATUS_FAILED
    return STATUS_OK


def build_summary(metrics: CrawlMetrics, sources: Iterable[SourceDescriptor]) -> dict:
    """
    Combine crawl metrics with the source registry.

    Args:
        metrics: Metrics of a finished run
        sources: Sources crawled in that run, in crawl order

    Returns:
        Dictionary with one entry per source plus overall totals
    """
    return {
        "records_total": metrics.records_total,
        "sources": [
            {
                "location": source.location,
                "kind": source.kind.value,
                "status": source_status(metrics, source.location),
                "records": metrics.records_per_source.get(source.location, 0),
            }
            for source in sources
        ],
        "fragments": {
            "extracted": metrics.fragments_extracted,
            "dropped": metrics.fragments_dropped,
        },
    }


def export_summary_json(metrics: CrawlMetrics, sources: Iterable[SourceDescriptor], output_path: Path) -> Path:
    """
    Export the crawl summary as JSON.

    Args:
        metrics: Metrics of a finished run (PredatoryJournalLoader.metrics)
        sources: Sources crawled in that run
        output_path: Path to output JSON file

    Returns:
        Path to the created JSON file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    summary = build_summary(metrics, sources)

    with open(output_path, "w") as f:
        json.dump(summary, f, indent=2)

    failed = sum(1 for entry in summary["sources"] if entry["status"] != STATUS_OK)
    logger.info(f"Summary saved to: {output_path} ({failed} of {len(summary['sources'])} sources incomplete)")
    return output_path
