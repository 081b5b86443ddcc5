"""Command-line interface for crawling predatory journal sources."""

import argparse
import logging
from pathlib import Path

from .config import DEFAULT_OUTPUT_DIR, DEFAULT_OUTPUT_FILE, DEFAULT_SUMMARY_FILE
from .exporters import export_csv, export_summary_json
from .loader import PredatoryJournalLoader
from .sources import PREDATORY_SOURCES

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    parser = argparse.ArgumentParser(
        description="Crawl predatory journal lists into a single CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Use default output directory
  %(prog)s --output-file journals.csv       # Custom output filename
  %(prog)s --summary --progress             # Also write summary.json, show progress
        """,
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--output-file",
        type=str,
        default=DEFAULT_OUTPUT_FILE,
        help=f"Output filename (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help=f"Also write the per-source crawl summary to {DEFAULT_SUMMARY_FILE}",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while crawling sources",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose/debug logging",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    logger.info("Predatory Journal Crawler")
    logger.info("=" * 60)
    logger.info(f"Sources: {len(PREDATORY_SOURCES)}")
    for source in PREDATORY_SOURCES:
        logger.info(f"  [{source.kind.value}] {source.location}")
    logger.info(f"Output directory: {args.output_dir}")

    loader = PredatoryJournalLoader(PREDATORY_SOURCES, show_progress=args.progress)
    records = loader.run()

    loader.metrics.print_report()

    export_csv(records, args.output_dir / args.output_file)
    if args.summary:
        export_summary_json(loader.metrics, loader.sources, args.output_dir / DEFAULT_SUMMARY_FILE)

    logger.info("=" * 60)
    logger.info("Crawl Complete!")
    logger.info("=" * 60)

    return 0
