"""Tests for console, Markdown and CSV report builders."""

from __future__ import annotations

import csv
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.spell_check.checker import check_lines
from src.spell_check.report_utils import (
    CSV_HEADERS,
    build_report_csv,
    build_report_lines,
    build_report_markdown,
    build_summary,
    write_reports,
)

DICTIONARY = frozenset({"the", "quick", "brown", "fox"})


def _sample_report():
    return check_lines(
        ["The quick fox\n", "The quikc brwn fox\n", "the | fux\n"],
        DICTIONARY,
        path=Path("sample.txt"),
    )


def test_build_report_lines_matches_console_format() -> None:
    lines = build_report_lines(_sample_report())

    assert lines == [
        "Line Number: 1 - The quikc brwn fox",
        "quikc",
        "brwn",
        "",
        "Line Number: 2 - the | fux",
        "fux",
        "",
    ]


def test_build_report_lines_clean_document_is_empty() -> None:
    report = check_lines(["the fox"], DICTIONARY)

    assert build_report_lines(report) == []


def test_build_summary() -> None:
    assert build_summary(_sample_report()) == (
        "Checked 3 line(s); 3 misspelling(s) on 2 line(s)"
    )


def test_build_report_markdown_escapes_pipes() -> None:
    markdown = build_report_markdown(_sample_report())

    assert "# Spell Check Report" in markdown
    assert "- Document: sample.txt" in markdown
    assert "- Total misspellings found: 3" in markdown
    assert "| 1 | quikc, brwn | The quikc brwn fox |" in markdown
    assert "| 2 | fux | the \\| fux |" in markdown


def test_build_report_markdown_no_errors() -> None:
    markdown = build_report_markdown(check_lines(["the fox"], DICTIONARY))

    assert "_No misspellings found._" in markdown


def test_build_report_csv_one_row_per_finding() -> None:
    rows = build_report_csv(_sample_report())

    assert rows[0] == CSV_HEADERS
    assert rows[1:] == [
        ["sample.txt", "1", "quikc", "The quikc brwn fox"],
        ["sample.txt", "1", "brwn", "The quikc brwn fox"],
        ["sample.txt", "2", "fux", "the | fux"],
    ]


def test_write_reports_creates_markdown_and_csv(tmp_path: Path) -> None:
    report_path = tmp_path / "out" / "report.md"

    csv_path = write_reports(_sample_report(), report_path)

    assert csv_path == tmp_path / "out" / "report.csv"
    assert "Spell Check Report" in report_path.read_text(encoding="utf-8")
    with csv_path.open("r", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CSV_HEADERS
    assert len(rows) == 4
