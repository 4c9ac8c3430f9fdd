"""Command line interface for kosc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .core.config import get_settings
from .core.errors import ParseError
from .core.logging import get_logger, setup_logging
from .translator import translate

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_IO_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kosc",
        description="Translate a while/for script into UNTIL-loop dialect instructions.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Path to the script to translate ('-' or omitted reads standard input).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the translation to this file instead of standard output.",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Encoding used for reading and writing files (default: KOSC_ENCODING or utf-8).",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check that the script parses; write no output.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override KOSC_LOG_LEVEL for this run.",
    )
    return parser


def _read_source(source: str, encoding: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding=encoding)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings, level=args.log_level)
    encoding = args.encoding or settings.ENCODING

    try:
        source = _read_source(args.source, encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", args.source, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    try:
        output = translate(source, settings)
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    if args.check:
        return EXIT_OK

    if args.output is None:
        sys.stdout.write(output + "\n")
        return EXIT_OK

    try:
        args.output.write_text(output + "\n", encoding=encoding)
    except OSError as exc:
        logger.error("Could not write %s: %s", args.output, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
