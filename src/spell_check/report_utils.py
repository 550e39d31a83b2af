"""Utilities for generating spell-check reports.

This module centralises the console, Markdown and CSV report builders used
by the command-line entry point. Keeping this logic separate makes it easier
to reuse and test independently from the checking routines.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from src.models import DocumentReport

CSV_HEADERS = ["Filename", "Line", "Word", "Line Text"]


def build_report_lines(report: "DocumentReport") -> list[str]:
    """Return the console report: each error line, its words, then a blank line."""

    lines: list[str] = []
    for line_report in report.line_reports:
        lines.append(f"Line Number: {line_report.line_number} - {line_report.text}")
        lines.extend(line_report.words)
        lines.append("")
    return lines


def build_summary(report: "DocumentReport") -> str:
    return (
        f"Checked {report.lines_checked} line(s); "
        f"{report.total_findings} misspelling(s) on {report.error_line_count} line(s)"
    )


def _escape(value: str) -> str:
    return value.replace("|", "\\|")


def build_report_markdown(report: "DocumentReport") -> str:
    """Convert a document report into Markdown output."""

    lines: list[str] = []
    lines.append("# Spell Check Report")
    lines.append("")
    lines.append(f"- Document: {report.name}")
    lines.append(f"- Lines checked: {report.lines_checked}")
    lines.append(f"- Lines with misspellings: {report.error_line_count}")
    lines.append(f"- Total misspellings found: {report.total_findings}")
    lines.append("")
    lines.append("---")
    lines.append("")
    lines.append("## Line Details")
    lines.append("")

    if not report.has_errors:
        lines.append("_No misspellings found._")
        return "\n".join(lines)

    lines.append("| Line | Misspelled | Text |")
    lines.append("| --- | --- | --- |")
    for line_report in report.line_reports:
        words = ", ".join(_escape(word) for word in line_report.words)
        text = _escape(line_report.text)
        lines.append(f"| {line_report.line_number} | {words} | {text} |")

    return "\n".join(lines)


def build_report_csv(report: "DocumentReport") -> list[list[str]]:
    """Convert a document report into CSV rows, one per finding.

    The first row contains the column headers.
    """

    rows: list[list[str]] = [list(CSV_HEADERS)]
    for line_report in report.line_reports:
        for finding in line_report.findings:
            rows.append(
                [
                    report.name,
                    str(finding.line_number),
                    finding.word,
                    line_report.text,
                ]
            )
    return rows


def write_reports(report: "DocumentReport", report_path: Path) -> Path:
    """Write the Markdown report to ``report_path`` and a CSV alongside it.

    Returns the CSV path.

    Raises:
            OSError: If either file cannot be written.
    """

    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(build_report_markdown(report), encoding="utf-8")

    csv_path = report_path.with_suffix(".csv")
    with csv_path.open("w", encoding="utf-8", newline="") as csv_file:
        writer = csv.writer(csv_file)
        writer.writerows(build_report_csv(report))
    return csv_path
