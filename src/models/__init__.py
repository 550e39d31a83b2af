"""Public model exports for the project.

Keep the :mod:`src` namespace clean: tests and other modules should import
``from src.models import Finding, DocumentReport``.
"""

from __future__ import annotations

from .enums import ExitCode
from .finding import Finding
from .report import DocumentReport, LineReport

__all__ = ["Finding", "LineReport", "DocumentReport", "ExitCode"]
