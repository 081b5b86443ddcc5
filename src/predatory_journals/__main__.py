"""Command-line interface for predatory journal tools.

Usage:
    python -m predatory_journals crawl      # Crawl all sources and export CSV
    python -m predatory_journals --help     # Show help
"""

import sys


def main() -> int:
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print(__doc__)
        print("Commands:")
        print("  crawl         Download and extract predatory journal lists")
        print()
        print("Run 'python -m predatory_journals <command> --help' for command-specific help.")
        return 0

    command = sys.argv[1]
    # Remove the command from argv so subcommand parsers work correctly
    sys.argv = [f"predatory_journals {command}"] + sys.argv[2:]

    if command == "crawl":
        from .crawl import main as crawl_main

        return crawl_main()
    else:
        print(f"Unknown command: {command}")
        print("Run 'python -m predatory_journals --help' for available commands.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
