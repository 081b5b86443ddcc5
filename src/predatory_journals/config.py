"""Configuration constants for predatory journal loading."""

from pathlib import Path

# Default output location for the CLI
DEFAULT_OUTPUT_DIR = Path("data/predatory")
DEFAULT_OUTPUT_FILE = "predatory_journals.csv"
DEFAULT_SUMMARY_FILE = "summary.json"

# Stop Predatory Journals (GitHub-hosted CSV tables, columns: url, name, abbreviation)
# See: https://predatoryjournals.org/
STOP_PREDATORY_JOURNALS_CSV_URL = (
    "https://raw.githubusercontent.com/stop-predatory-journals/stop-predatory-journals.github.io/master/_data/journals.csv"
)
STOP_PREDATORY_PUBLISHERS_CSV_URL = (
    "https://raw.githubusercontent.com/stop-predatory-journals/stop-predatory-journals.github.io/master/_data/publishers.csv"
)

# Beall's List (HTML listing pages, one entry per list item or table row)
# See: https://beallslist.net/
BEALLS_PUBLISHERS_URL = "https://beallslist.net/"
BEALLS_STANDALONE_URL = "https://beallslist.net/standalone-journals/"
BEALLS_HIJACKED_URL = "https://beallslist.net/hijacked-journals/"

# Coarse patterns splitting a listing page into entries
LIST_ITEM_PATTERN = r"<li>.*?</li>"
TABLE_ROW_PATTERN = r"<tr>.*?</tr>"

# Fine patterns applied to a single entry
NAME_PATTERN = r'(?<=">).*?(?=<)'  # anchor text: after '">' up to the next '<'
URL_PATTERN = r'http.*?(?=")'  # first http... run up to the closing quote
ABBREVIATION_PATTERN = r"(?<=\()[^ ]*(?=\))"  # first "(TOKEN)" without spaces

# Marker in the URL path identifying tabular (CSV) sources
CSV_MARKER = ".csv"

# Expected columns per CSV row (url, name, abbreviation)
CSV_COLUMN_COUNT = 3

# HTTP settings (no retries: a failed source is skipped)
CONNECT_TIMEOUT = 30
READ_TIMEOUT = 120
USER_AGENT = "predatory-journals/0.1"
