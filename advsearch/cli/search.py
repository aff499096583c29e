#!/usr/bin/env python3
"""
Line Search CLI.

Filters lines of text with one of the search modes and prints the matches.
Lines are read from a file or from standard input. Fuzzy results are printed
best first; every other mode keeps input order.

Usage:
    python -m advsearch.cli.search "needle" notes.txt
    python -m advsearch.cli.search "^err" app.log --mode regex
    cat contacts.csv | python -m advsearch.cli.search "jon smth" \
        --mode fuzzy --field-separator "," --min-score 70
    python -m advsearch.cli.search -v --log-dir logs "^err" app.log -m regex
"""

import argparse
import json
import logging
import sys
from typing import List, Tuple

from advsearch.cli.utils import read_lines, split_fields, validate_input_path
from advsearch.core.logging_config import setup_logging
from advsearch.core.search_config import DEFAULT_FUZZY_MIN_SCORE, SearchSettings
from advsearch.core.search_mode import SearchMode
from advsearch.services.search_filter import filter_candidates

logger = logging.getLogger(__name__)


def run_search(args: argparse.Namespace) -> int:
    """
    Filter the input lines and print the matches.

    Args:
        args: Command-line arguments.

    Returns:
        int: Exit code (0 if anything matched, 1 otherwise).
    """
    try:
        settings = SearchSettings(
            fuzzy_min_score=args.min_score,
            case_sensitive=not args.ignore_case,
        )
    except ValueError as e:
        logger.error(str(e))
        return 1

    try:
        if args.file:
            with open(args.file, encoding="utf-8") as stream:
                lines = read_lines(stream)
        else:
            lines = read_lines(sys.stdin)
    except UnicodeDecodeError as e:
        logger.error(f"Input is not valid UTF-8: {e}")
        return 1

    mode = SearchMode.from_key(args.mode)
    numbered: List[Tuple[int, str]] = list(enumerate(lines, start=1))
    results = filter_candidates(
        args.query,
        numbered,
        lambda entry: split_fields(entry[1], args.field_separator),
        mode,
        settings,
    )

    if args.json:
        payload = [{"line_number": number, "line": line} for number, line in results]
        print(json.dumps(payload, indent=2))
    else:
        for number, line in results:
            if args.line_number:
                print(f"{number}:{line}")
            else:
                print(line)

    logger.debug(f"{len(results)} of {len(lines)} lines matched")
    return 0 if results else 1


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Filter lines of text by contains, prefix, suffix, "
        "regex or fuzzy match"
    )
    parser.add_argument("query", help="Search query (may be empty)")
    parser.add_argument(
        "file", nargs="?", help="Input file (default: read standard input)"
    )
    parser.add_argument(
        "--mode",
        "-m",
        choices=[mode.key for mode in SearchMode],
        default=SearchMode.CONTAINS.key,
        help="Search mode (default: contains)",
    )
    parser.add_argument(
        "--ignore-case", "-i", action="store_true", help="Case-insensitive matching"
    )
    parser.add_argument(
        "--min-score",
        type=float,
        default=DEFAULT_FUZZY_MIN_SCORE,
        help=f"Minimum fuzzy score 0-100 (default: {DEFAULT_FUZZY_MIN_SCORE:g})",
    )
    parser.add_argument(
        "--field-separator",
        "-F",
        help="Split each line into fields; a line matches if any field matches",
    )
    parser.add_argument(
        "--line-number", "-n", action="store_true", help="Prefix matches with line numbers"
    )
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--log-dir", help="Also write the log to advsearch.log in this directory"
    )

    args = parser.parse_args()

    if args.field_separator == "":
        parser.error("--field-separator must not be empty")

    setup_logging(debug_mode=args.verbose, log_dir=args.log_dir)

    if args.file and not validate_input_path(args.file):
        sys.exit(1)

    sys.exit(run_search(args))


if __name__ == "__main__":
    main()
