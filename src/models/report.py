"""Per-line and per-document check results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .finding import Finding


@dataclass(frozen=True)
class LineReport:
    """Result of checking one line: its findings and whether it had any."""

    line_number: int
    text: str
    findings: tuple[Finding, ...] = ()

    @property
    def had_error(self) -> bool:
        return bool(self.findings)

    @property
    def words(self) -> list[str]:
        return [finding.word for finding in self.findings]


@dataclass
class DocumentReport:
    """Compilation of the lines with misspellings for a single document.

    ``line_reports`` only holds lines that had at least one finding, in the
    order they appear in the document.
    """

    path: Path | None
    lines_checked: int = 0
    line_reports: list[LineReport] = field(default_factory=list)

    @property
    def findings(self) -> list[Finding]:
        return [finding for line in self.line_reports for finding in line.findings]

    @property
    def total_findings(self) -> int:
        return sum(len(line.findings) for line in self.line_reports)

    @property
    def error_line_count(self) -> int:
        return len(self.line_reports)

    @property
    def has_errors(self) -> bool:
        return bool(self.line_reports)

    @property
    def name(self) -> str:
        return self.path.name if self.path is not None else "<stdin>"
