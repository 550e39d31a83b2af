"""Command-line entry point: ``spell-check <document> [dictionary]``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from src.models import DocumentReport, ExitCode

from .checker import check_document, resolve_exit_code
from .dictionary import load_dictionary
from .report_utils import build_report_lines, build_summary, write_reports
from .spell_check_config import (
    DEFAULT_DICTIONARY_PATH,
    ENV_DICTIONARY,
    SpellCheckSettings,
    load_settings,
)

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spell-check",
        description="Check a text document line by line against a word list.",
    )
    parser.add_argument("document", type=Path, help="Text document to check")
    parser.add_argument(
        "dictionary",
        type=Path,
        nargs="?",
        default=None,
        help=(
            f"Word list, one word per line (default: env {ENV_DICTIONARY} "
            f"or {DEFAULT_DICTIONARY_PATH})"
        ),
    )
    parser.add_argument(
        "--ignore-word",
        action="append",
        dest="ignored_words",
        help="Accept an extra word for this run (case-insensitive, can be specified multiple times)",
    )
    parser.add_argument(
        "--first-line-number",
        type=int,
        default=None,
        help="Number given to the first line of the document (default: 0)",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of the document and dictionary (default: utf-8)",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Also write a Markdown report to this path and a CSV report beside it",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        default=None,
        help="Path to a .env file with SPELLCHECK_* settings",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only set the exit code; do not print misspellings",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _resolve_settings(args: argparse.Namespace) -> SpellCheckSettings:
    return load_settings(
        args.dotenv,
        dictionary_path=args.dictionary,
        encoding=args.encoding,
        first_line_number=args.first_line_number,
        ignored_words=args.ignored_words,
    )


def _print_report(report: DocumentReport) -> None:
    for line in build_report_lines(report):
        print(line)


def run(
    settings: SpellCheckSettings,
    document: Path,
    *,
    report_path: Path | None = None,
    quiet: bool = False,
) -> ExitCode:
    """Check ``document`` with ``settings`` and return the exit code."""

    try:
        dictionary = load_dictionary(
            settings.dictionary_path,
            encoding=settings.encoding,
            extra_words=settings.ignored_words,
        )
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Could not read dictionary %s: %s", settings.dictionary_path, exc)
        return resolve_exit_code(None, io_failed=True)

    try:
        report = check_document(
            document,
            dictionary,
            encoding=settings.encoding,
            first_line_number=settings.first_line_number,
        )
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("Could not read document %s: %s", document, exc)
        return resolve_exit_code(None, io_failed=True)

    if not quiet:
        _print_report(report)
    LOGGER.info("%s", build_summary(report))

    io_failed = False
    if report_path is not None:
        try:
            csv_path = write_reports(report, report_path)
        except OSError as exc:
            LOGGER.error("Could not write report %s: %s", report_path, exc)
            io_failed = True
        else:
            LOGGER.info("Report written to %s (CSV: %s)", report_path, csv_path)

    return resolve_exit_code(report, io_failed=io_failed)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO)

    try:
        settings = _resolve_settings(args)
    except ValidationError as exc:
        LOGGER.error("Invalid spell-check settings: %s", exc)
        return int(ExitCode.IO_ERROR)

    return int(
        run(settings, args.document, report_path=args.report, quiet=args.quiet)
    )


if __name__ == "__main__":
    raise SystemExit(main())
