"""
Exporters for loaded predatory journal records.

Each exporter handles a specific output format (CSV, JSON summary).
"""

from .csv import export_csv
from .summary import build_summary, export_summary_json

__all__ = [
    "export_csv",
    "build_summary",
    "export_summary_json",
]
