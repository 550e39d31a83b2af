"""Tests for the Finding and report models."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.models import DocumentReport, ExitCode, Finding, LineReport


def test_finding_identity_is_word_and_line() -> None:
    assert Finding(word="teh", line_number=1) == Finding(word="teh", line_number=1)
    assert Finding(word="teh", line_number=1) != Finding(word="teh", line_number=2)
    assert len({Finding(word="teh", line_number=1), Finding(word="teh", line_number=1)}) == 1


def test_finding_is_immutable() -> None:
    finding = Finding(word="teh", line_number=1)

    with pytest.raises(ValidationError):
        finding.word = "the"  # type: ignore[misc]


def test_finding_rejects_empty_word() -> None:
    with pytest.raises(ValidationError):
        Finding(word="", line_number=0)


def test_finding_rejects_negative_line_number() -> None:
    with pytest.raises(ValidationError):
        Finding(word="teh", line_number=-1)


def test_finding_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        Finding(word="teh", line_number=0, suggestion="the")  # type: ignore[call-arg]


def test_line_report_had_error() -> None:
    assert LineReport(line_number=0, text="").had_error is False
    assert LineReport(
        line_number=0, text="teh", findings=(Finding(word="teh", line_number=0),)
    ).had_error


def test_document_report_totals() -> None:
    report = DocumentReport(
        path=Path("doc.txt"),
        lines_checked=4,
        line_reports=[
            LineReport(
                line_number=1,
                text="teh adn",
                findings=(
                    Finding(word="teh", line_number=1),
                    Finding(word="adn", line_number=1),
                ),
            ),
            LineReport(
                line_number=3,
                text="teh",
                findings=(Finding(word="teh", line_number=3),),
            ),
        ],
    )

    assert report.total_findings == 3
    assert report.error_line_count == 2
    assert report.has_errors
    assert report.name == "doc.txt"
    assert [str(finding) for finding in report.findings] == ["1: teh", "1: adn", "3: teh"]


def test_exit_code_values() -> None:
    assert int(ExitCode.OK) == 0
    assert int(ExitCode.SPELLING_ERRORS) == 1
    assert int(ExitCode.IO_ERROR) == 2
