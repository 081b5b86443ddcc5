"""CSV exporter for predatory journal records."""

import csv
import logging
from pathlib import Path

import pandas as pd

from ..models import RECORD_FIELDS, JournalRecord, serialize_record

logger = logging.getLogger(__name__)


def export_csv(
    records: list[JournalRecord],
    output_path: Path,
    quoting: int = csv.QUOTE_NONNUMERIC,
) -> Path:
    """
    Export predatory journal records to CSV.

    Rows keep the crawl order; no sorting or deduplication is applied.

    Args:
        records: Records returned by the loader
        output_path: Path to output CSV file
        quoting: CSV quoting style (default: QUOTE_NONNUMERIC)

    Returns:
        Path to the created CSV file
    """
    # Ensure parent directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame([serialize_record(r) for r in records], columns=RECORD_FIELDS)
    df.to_csv(output_path, index=False, quoting=quoting)
    logger.info(f"{len(df):,} records saved to: {output_path}")

    return output_path
