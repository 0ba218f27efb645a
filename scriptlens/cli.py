"""Command-line entry point: analyze a script file and print the report."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .api import analyze
from .language import SUPPORTED_LANGUAGES
from . import constants

DEMO_SOURCE = """\
NAME="mundo"
COUNT=3
if [ $COUNT -gt 0 ]; then
echo "Hola $NAME"
fi
whille [ $COUNT -gt 0 ]; do
echo $TOTAL
done
"""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Analyze a script and explain what's wrong with it"
    )
    parser.add_argument("file", nargs="?", help="Source file to analyze")
    parser.add_argument(
        "--language",
        "-l",
        default=constants.LANGUAGE_BASH,
        choices=SUPPORTED_LANGUAGES,
        help="Source language (default: bash)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the report as JSON"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable info logging"
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if not args.file:
        source = DEMO_SOURCE
        print("No file provided. Using built-in demo:\n")
        print(source)
    else:
        try:
            source = Path(args.file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
            return 1

    report = analyze(source, args.language)
    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(report.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
