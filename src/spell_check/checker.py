"""Check lines and documents against a dictionary.

The per-line check is pure: it takes the line, its number and a read-only
dictionary and returns a :class:`LineReport`. Document-level helpers number
the lines in order and collect the lines that had misspellings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, Iterable

from src.models import DocumentReport, ExitCode, Finding, LineReport

from .tokenizer import iter_tokens

LOGGER = logging.getLogger(__name__)


def check_line(
    line: str, line_number: int, dictionary: AbstractSet[str]
) -> LineReport:
    """Return the misspellings found on a single line.

    A token is misspelled when its lowercase form is not in ``dictionary``.
    Findings keep the token's original case and are deduplicated by
    ``(word, line_number)`` in first-seen order.
    """

    if line_number < 0:
        raise ValueError(f"line_number must be non-negative, got {line_number}")

    seen: dict[Finding, None] = {}
    for token in iter_tokens(line):
        if not token:
            continue
        if token.lower() in dictionary:
            continue
        seen.setdefault(Finding(word=token, line_number=line_number), None)

    return LineReport(line_number=line_number, text=line, findings=tuple(seen))


def _strip_line_ending(line: str) -> str:
    return line.rstrip("\r\n")


def check_lines(
    lines: Iterable[str],
    dictionary: AbstractSet[str],
    *,
    first_line_number: int = 0,
    path: Path | None = None,
) -> DocumentReport:
    """Check ``lines`` in order and collect the lines that had misspellings."""

    report = DocumentReport(path=path)
    for line_number, raw_line in enumerate(lines, start=first_line_number):
        line_report = check_line(_strip_line_ending(raw_line), line_number, dictionary)
        report.lines_checked += 1
        if line_report.had_error:
            report.line_reports.append(line_report)

    LOGGER.debug(
        "Checked %s: %d line(s), %d with misspellings",
        report.name,
        report.lines_checked,
        report.error_line_count,
    )
    return report


def check_document(
    document_path: Path,
    dictionary: AbstractSet[str],
    *,
    encoding: str = "utf-8",
    first_line_number: int = 0,
) -> DocumentReport:
    """Run the spell check over a text document.

    Raises:
            OSError: If the document cannot be opened, read or closed.
            UnicodeDecodeError: If the document does not match ``encoding``.
    """

    LOGGER.info("Checking %s", document_path)
    with document_path.open("r", encoding=encoding, newline="") as handle:
        return check_lines(
            handle,
            dictionary,
            first_line_number=first_line_number,
            path=document_path,
        )


def resolve_exit_code(
    report: DocumentReport | None, *, io_failed: bool = False
) -> ExitCode:
    """Translate a run outcome into a process exit code.

    An I/O failure takes precedence over spelling errors found earlier in the
    same run.
    """

    if io_failed or report is None:
        return ExitCode.IO_ERROR
    if report.has_errors:
        return ExitCode.SPELLING_ERRORS
    return ExitCode.OK
